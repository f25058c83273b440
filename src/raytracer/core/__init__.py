from .color import Color
from .errors import InvalidConfigurationError, RaytracerError
from .ray import Ray
from .vector import Normal3, Point3, Vector3

__all__ = [
    "Color",
    "InvalidConfigurationError",
    "Normal3",
    "Point3",
    "Ray",
    "RaytracerError",
    "Vector3",
]
