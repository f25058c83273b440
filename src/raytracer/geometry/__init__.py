from .box import AxisAlignedBox
from .geometry import Geometry
from .hit import Hit
from .plane import Plane
from .sphere import Sphere
from .triangle import Triangle
from .world import World

__all__ = [
    "AxisAlignedBox",
    "Geometry",
    "Hit",
    "Plane",
    "Sphere",
    "Triangle",
    "World",
]
