# materials/lambertian.py
from raytracer.core.color import Color
from raytracer.core.errors import require
from raytracer.geometry.hit import Hit
from raytracer.materials.material import Material


class LambertMaterial(Material):
    """
    Lambertian diffuse material: ambient term plus, for every light that
    reaches the point, the light color weighted by cos(angle to the normal).
    """

    def __init__(self, color: Color):
        self.color = require(color, "color")

    def color_for(self, hit: Hit, world, tracer) -> Color:
        point = hit.point
        result = self.color * world.ambient
        for light in world.lights:
            if not light.illuminates(point, world):
                continue
            l = light.direction_from(point)
            result = result + self.color * light.color * max(0.0, hit.normal.dot(l))
        return result

    def __repr__(self) -> str:
        return f"LambertMaterial({self.color!r})"
