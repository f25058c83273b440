# core/vector.py
import math
from dataclasses import dataclass

from raytracer.core.errors import InvalidConfigurationError


def is_valid(value: float) -> bool:
    """
    True for finite numbers, False for NaN and +/- infinity.
    """
    return math.isfinite(value)


@dataclass(frozen=True)
class Vector3:
    """
    An immutable 3D vector supporting arithmetic, dot and cross products,
    and normalization.
    """
    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, t: float) -> "Vector3":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def dot(self, other) -> float:
        # other may be a Vector3 or a Normal3
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def is_valid(self) -> bool:
        return is_valid(self.x) and is_valid(self.y) and is_valid(self.z)

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector pointing in the same direction.
        Zero-length and non-finite vectors have no direction and are rejected.
        """
        if not self.is_valid():
            raise InvalidConfigurationError(f"Cannot normalize non-finite vector {self!r}.")
        l = self.length()
        if l == 0:
            raise InvalidConfigurationError("Cannot normalize a zero-length vector.")
        return self / l

    def reflected_on(self, normal: "Normal3") -> "Vector3":
        """
        Mirrors this vector on the normal, e.g. a vector pointing away from
        the surface towards a light becomes the direction of the reflection.
        """
        return Vector3(
            -self.x + 2 * self.dot(normal) * normal.x,
            -self.y + 2 * self.dot(normal) * normal.y,
            -self.z + 2 * self.dot(normal) * normal.z
        )

    def as_normal(self) -> "Normal3":
        return Normal3(self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class Normal3:
    """
    A surface normal. Kept apart from Vector3 because normals transform
    differently, but converts to and from a vector freely.
    """
    x: float
    y: float
    z: float

    def __add__(self, other: "Normal3") -> "Normal3":
        return Normal3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> "Normal3":
        return Normal3(-self.x, -self.y, -self.z)

    def __mul__(self, t: float) -> "Normal3":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Normal3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> "Normal3":
        return self.__mul__(t)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def as_vector(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def normalize(self) -> "Normal3":
        return self.as_vector().normalize().as_normal()

    def __repr__(self) -> str:
        return f"Normal3({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class Point3:
    """
    A position in 3D space. Points differ from vectors in what arithmetic
    makes sense: point - point is a vector, point + vector is a point.
    """
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if isinstance(other, Point3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def is_valid(self) -> bool:
        return is_valid(self.x) and is_valid(self.y) and is_valid(self.z)

    def __repr__(self) -> str:
        return f"Point3({self.x}, {self.y}, {self.z})"
