# core/ray.py
from dataclasses import dataclass

from raytracer.core.errors import require
from raytracer.core.vector import Point3, Vector3


@dataclass(frozen=True)
class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is not required to be normalized.
    """
    origin: Point3
    direction: Vector3

    def __post_init__(self):
        require(self.origin, "origin")
        require(self.direction, "direction")

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t
