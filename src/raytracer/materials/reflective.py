# materials/reflective.py
from raytracer.core.color import Color
from raytracer.core.errors import require
from raytracer.core.ray import Ray
from raytracer.core.utils import reflect
from raytracer.geometry.hit import Hit
from raytracer.materials.phong import PhongMaterial


class ReflectiveMaterial(PhongMaterial):
    """
    Phong shading plus a mirror term: the color seen in the mirrored
    direction, weighted by the reflection color.
    """
    def __init__(self, diffuse: Color, specular: Color, exponent: float, reflection: Color):
        super().__init__(diffuse, specular, exponent)
        self.reflection = require(reflection, "reflection")

    def color_for(self, hit: Hit, world, tracer) -> Color:
        mirrored = Ray(hit.point, reflect(hit.ray.direction, hit.normal))
        return self.local_color(hit, world) + self.reflection * tracer.trace(mirrored, world)

    def __repr__(self) -> str:
        return (f"ReflectiveMaterial(diffuse={self.diffuse!r}, specular={self.specular!r}, "
                f"exponent={self.exponent!r}, reflection={self.reflection!r})")
