# geometry/geometry.py
from typing import Optional

from raytracer.core.errors import require
from raytracer.core.ray import Ray
from raytracer.geometry.hit import Hit


class Geometry:
    """
    Abstract class for objects that can be hit by a ray. Every geometry
    owns the material it is rendered with.
    """
    def __init__(self, material):
        self.material = require(material, "material")

    def hit(self, ray: Ray, t_min: float = 0.0) -> Optional[Hit]:
        """
        Returns the nearest intersection with t >= t_min, or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
