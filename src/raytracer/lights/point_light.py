# lights/point_light.py
from raytracer.core.color import Color
from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.vector import Point3, Vector3
from raytracer.lights.light import Light


class PointLight(Light):
    """
    Emits light from a single position in all directions.
    """
    def __init__(self, color: Color, position: Point3, casts_shadows: bool = False):
        super().__init__(color, casts_shadows)
        self.position = require(position, "position")
        if not position.is_valid():
            raise InvalidConfigurationError(f"The light position must be finite, got {position!r}.")

    def illuminates(self, point: Point3, world) -> bool:
        distance = (self.position - point).length()
        if distance == 0:
            # no direction to the light
            return False
        if not self.casts_shadows:
            return True
        return not self._blocked(point, world, distance)

    def direction_from(self, point: Point3) -> Vector3:
        return (self.position - point).normalize()

    def __repr__(self) -> str:
        return f"PointLight(color={self.color!r}, position={self.position!r})"
