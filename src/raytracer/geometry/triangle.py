# geometry/triangle.py
from typing import Optional

from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.ray import Ray
from raytracer.core.vector import Normal3, Point3
from raytracer.geometry.geometry import Geometry
from raytracer.geometry.hit import Hit


class Triangle(Geometry):
    """Represents a single triangle in 3D space with optional vertex normals."""
    def __init__(self, a: Point3, b: Point3, c: Point3, material,
                 na: Optional[Normal3] = None, nb: Optional[Normal3] = None,
                 nc: Optional[Normal3] = None):
        super().__init__(material)
        self.a = require(a, "a")
        self.b = require(b, "b")
        self.c = require(c, "c")

        face = (b - a).cross(c - a)
        if face.length() == 0:
            raise InvalidConfigurationError("The triangle vertices must not be collinear.")
        # Normals
        if na is None or nb is None or nc is None:
            self.na = self.nb = self.nc = face.normalize().as_normal()
        else:
            self.na = na.normalize()
            self.nb = nb.normalize()
            self.nc = nc.normalize()

    def get_normal(self, beta: float, gamma: float) -> Optional[Normal3]:
        """Interpolate normal at the given barycentric coordinates."""
        alpha = 1.0 - beta - gamma
        n = self.na * alpha + self.nb * beta + self.nc * gamma
        if n.x == 0 and n.y == 0 and n.z == 0:
            return None
        return n.normalize()

    def hit(self, ray: Ray, t_min: float = 0.0) -> Optional[Hit]:
        # Möller–Trumbore intersection algorithm
        edge1 = self.b - self.a
        edge2 = self.c - self.a
        h = ray.direction.cross(edge2)
        det = edge1.dot(h)

        # If ray is parallel to triangle
        if abs(det) < 1e-12:
            return None

        f = 1.0 / det
        s = ray.origin - self.a
        beta = f * s.dot(h)
        if beta < 0.0 or beta > 1.0:
            return None

        q = s.cross(edge1)
        gamma = f * ray.direction.dot(q)
        if gamma < 0.0 or beta + gamma > 1.0:
            return None

        t = f * edge2.dot(q)
        if t < t_min:
            return None

        normal = self.get_normal(beta, gamma)
        if normal is None:
            return None
        return Hit(t, ray, self, normal)

    def __repr__(self) -> str:
        return f"Triangle(a={self.a!r}, b={self.b!r}, c={self.c!r})"
