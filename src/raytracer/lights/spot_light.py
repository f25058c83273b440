# lights/spot_light.py
import math

from raytracer.core.color import Color
from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.vector import Point3, Vector3, is_valid
from raytracer.lights.light import Light


class SpotLight(Light):
    """
    A point light restricted to a cone: only points within half_angle
    (radians) of the spot direction are lit.
    """
    def __init__(self, color: Color, position: Point3, direction: Vector3,
                 half_angle: float, casts_shadows: bool = False):
        super().__init__(color, casts_shadows)
        self.position = require(position, "position")
        self.direction = require(direction, "direction").normalize()
        if half_angle is None or not is_valid(half_angle) or not 0 < half_angle <= math.pi:
            raise InvalidConfigurationError(
                f"half_angle must be in (0, pi], got {half_angle!r}."
            )
        self.half_angle = half_angle

    def illuminates(self, point: Point3, world) -> bool:
        to_point = point - self.position
        distance = to_point.length()
        if distance == 0:
            return False
        cos_angle = max(-1.0, min(1.0, to_point.dot(self.direction) / distance))
        if math.acos(cos_angle) > self.half_angle:
            return False
        if not self.casts_shadows:
            return True
        return not self._blocked(point, world, distance)

    def direction_from(self, point: Point3) -> Vector3:
        return (self.position - point).normalize()

    def __repr__(self) -> str:
        return (f"SpotLight(color={self.color!r}, position={self.position!r}, "
                f"direction={self.direction!r}, half_angle={self.half_angle!r})")
