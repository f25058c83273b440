# materials/single_color.py
from raytracer.core.color import Color
from raytracer.core.errors import require
from raytracer.geometry.hit import Hit
from raytracer.materials.material import Material


class SingleColorMaterial(Material):
    """
    Flat color, ignores lights and ambient entirely.
    """
    def __init__(self, color: Color):
        self.color = require(color, "color")

    def color_for(self, hit: Hit, world, tracer) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SingleColorMaterial({self.color!r})"
