# lights/light.py
from raytracer.core.color import Color
from raytracer.core.constants import EPSILON
from raytracer.core.errors import require
from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vector3


class Light:
    """
    Abstract light source. Materials ask a light whether it reaches a point
    and from which direction, and weight its color accordingly.
    """
    def __init__(self, color: Color, casts_shadows: bool = False):
        self.color = require(color, "color")
        self.casts_shadows = casts_shadows

    def illuminates(self, point: Point3, world) -> bool:
        """
        True if light from this source arrives at the point.
        """
        raise NotImplementedError("illuminates() must be implemented by subclasses.")

    def direction_from(self, point: Point3) -> Vector3:
        """
        Unit vector pointing from the point towards the light.
        """
        raise NotImplementedError("direction_from() must be implemented by subclasses.")

    def _blocked(self, point: Point3, world, distance: float) -> bool:
        # Shadow rays start slightly off the surface so it doesn't shadow itself.
        shadow_ray = Ray(point, self.direction_from(point))
        hit = world.hit(shadow_ray, EPSILON)
        return hit is not None and hit.t < distance
