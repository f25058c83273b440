# geometry/plane.py
from typing import Optional

from raytracer.core.errors import require
from raytracer.core.ray import Ray
from raytracer.core.vector import Normal3, Point3
from raytracer.geometry.geometry import Geometry
from raytracer.geometry.hit import Hit


class Plane(Geometry):
    """
    An infinitely large plane defined by a point on it and its normal.
    """
    def __init__(self, a: Point3, n: Normal3, material):
        super().__init__(material)
        self.a = require(a, "a")
        require(n, "n")
        self.n = n.normalize()

    def hit(self, ray: Ray, t_min: float = 0.0) -> Optional[Hit]:
        # t = <a - o, n> / <d, n>
        denominator = ray.direction.dot(self.n)
        if denominator == 0:
            # parallel
            return None
        t = (self.a - ray.origin).dot(self.n) / denominator
        if t < t_min:
            return None
        # The plane's own normal, even when the ray comes from behind.
        return Hit(t, ray, self, self.n)

    def __repr__(self) -> str:
        return f"Plane(a={self.a!r}, n={self.n!r})"
