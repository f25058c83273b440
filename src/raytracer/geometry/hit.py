# geometry/hit.py
from dataclasses import dataclass

from raytracer.core.ray import Ray
from raytracer.core.vector import Normal3, Point3


@dataclass(frozen=True)
class Hit:
    """
    Records details of a ray-object intersection.

    The normal has unit length but follows the geometry's own convention,
    it is not turned to face the incoming ray.
    """
    t: float
    ray: Ray
    geometry: object
    normal: Normal3

    @property
    def point(self) -> Point3:
        return self.ray.at(self.t)
