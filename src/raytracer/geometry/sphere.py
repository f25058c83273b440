# geometry/sphere.py
import math
from typing import Optional

from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, is_valid
from raytracer.geometry.geometry import Geometry
from raytracer.geometry.hit import Hit


class Sphere(Geometry):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Point3, radius: float, material):
        super().__init__(material)
        self.center = require(center, "center")
        if radius is None or not is_valid(radius) or radius < 0:
            raise InvalidConfigurationError(
                f"The radius must be a non-negative finite number, got {radius!r}."
            )
        self.radius = radius

    def hit(self, ray: Ray, t_min: float = 0.0) -> Optional[Hit]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return None
        b = ray.direction.dot(oc * 2.0)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return None
        if discriminant == 0:
            # Tangent, only counts while the ray is still moving towards it.
            t = -b / (2 * a)
            if b > 0 or t < t_min:
                return None
            return self._hit_at(ray, t)

        sqrt_disc = math.sqrt(discriminant)
        n1 = (-b + sqrt_disc) / (2 * a)
        n2 = (-b - sqrt_disc) / (2 * a)
        # a > 0, so n2 <= n1
        if n2 >= t_min:
            root = n2
        elif n1 >= t_min:
            root = n1
        else:
            return None
        return self._hit_at(ray, root)

    def _hit_at(self, ray: Ray, t: float) -> Optional[Hit]:
        outward = ray.at(t) - self.center
        if outward.x == 0 and outward.y == 0 and outward.z == 0:
            # Zero-radius sphere hit dead center has no normal.
            return None
        return Hit(t, ray, self, outward.normalize().as_normal())

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius!r})"
