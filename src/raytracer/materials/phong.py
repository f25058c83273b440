# materials/phong.py
from raytracer.core.color import Color
from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.vector import is_valid
from raytracer.geometry.hit import Hit
from raytracer.materials.material import Material


class PhongMaterial(Material):
    """
    Diffuse color plus a specular highlight whose size is controlled by
    the Phong exponent.
    """
    def __init__(self, diffuse: Color, specular: Color, exponent: float):
        self.diffuse = require(diffuse, "diffuse")
        self.specular = require(specular, "specular")
        if exponent is None or not is_valid(exponent) or exponent < 0:
            raise InvalidConfigurationError(
                f"The Phong exponent must be a non-negative number, got {exponent!r}."
            )
        self.exponent = exponent

    def local_color(self, hit: Hit, world) -> Color:
        point = hit.point
        n = hit.normal
        e = (-hit.ray.direction).normalize()
        result = self.diffuse * world.ambient
        for light in world.lights:
            if not light.illuminates(point, world):
                continue
            l = light.direction_from(point)
            n_dot_l = n.dot(l)
            if n_dot_l <= 0:
                # light is behind the surface
                continue
            result = result + self.diffuse * light.color * n_dot_l
            e_dot_r = e.dot(l.reflected_on(n))
            if e_dot_r > 0:
                result = result + self.specular * light.color * e_dot_r ** self.exponent
        return result

    def color_for(self, hit: Hit, world, tracer) -> Color:
        return self.local_color(hit, world)

    def __repr__(self) -> str:
        return (f"PhongMaterial(diffuse={self.diffuse!r}, specular={self.specular!r}, "
                f"exponent={self.exponent!r})")
