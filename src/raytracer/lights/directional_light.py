# lights/directional_light.py
import math

from raytracer.core.color import Color
from raytracer.core.errors import require
from raytracer.core.vector import Point3, Vector3
from raytracer.lights.light import Light


class DirectionalLight(Light):
    """
    Light from an infinitely distant source, e.g. the sun: every point is
    lit from the same direction.
    """
    def __init__(self, color: Color, direction: Vector3, casts_shadows: bool = False):
        super().__init__(color, casts_shadows)
        # direction the light travels in
        self.direction = require(direction, "direction").normalize()

    def illuminates(self, point: Point3, world) -> bool:
        if not self.casts_shadows:
            return True
        return not self._blocked(point, world, math.inf)

    def direction_from(self, point: Point3) -> Vector3:
        return -self.direction

    def __repr__(self) -> str:
        return f"DirectionalLight(color={self.color!r}, direction={self.direction!r})"
