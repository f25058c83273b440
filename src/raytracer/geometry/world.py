# geometry/world.py
from typing import Iterable, List, Optional

from raytracer.core.color import Color
from raytracer.core.constants import DEFAULT_MAX_DEPTH, INDEX_OF_REFRACTION_VACUUM
from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.ray import Ray
from raytracer.core.vector import is_valid
from raytracer.geometry.geometry import Geometry
from raytracer.geometry.hit import Hit


class World:
    """
    The scene: geometries, lights, background and ambient color, the
    refractive index of the surrounding medium and the recursion bound.

    A world is filled while the scene is built and is only read while
    rendering, so it can be shared by worker processes as is.
    """
    def __init__(self, background_color: Color = None, ambient: Color = None,
                 index_of_refraction: float = INDEX_OF_REFRACTION_VACUUM,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 geometries: Iterable[Geometry] = (), lights: Iterable = ()):
        self.background_color = background_color if background_color is not None else Color.black()
        self.ambient = ambient if ambient is not None else Color.black()
        if index_of_refraction is None or not is_valid(index_of_refraction) or index_of_refraction <= 0:
            raise InvalidConfigurationError(
                f"index_of_refraction must be a positive finite number, got {index_of_refraction!r}."
            )
        self.index_of_refraction = index_of_refraction
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
            raise InvalidConfigurationError(f"max_depth must be an int >= 0, got {max_depth!r}.")
        self.max_depth = max_depth
        self.geometries: List[Geometry] = []
        self.lights: List = []
        for geometry in require(geometries, "geometries"):
            self.add(geometry)
        for light in require(lights, "lights"):
            self.add_light(light)

    def add(self, geometry: Geometry):
        self.geometries.append(require(geometry, "geometry"))

    def add_all(self, geometries: Iterable[Geometry]):
        for geometry in geometries:
            self.add(geometry)

    def add_light(self, light):
        self.lights.append(require(light, "light"))

    def hit(self, ray: Ray, t_min: float = 0.0) -> Optional[Hit]:
        """
        Linear scan over all geometries. Returns the hit with the smallest
        t >= t_min; on equal t the geometry added first wins.
        """
        closest = None
        for geometry in self.geometries:
            rec = geometry.hit(ray, t_min)
            if rec is None:
                continue
            if closest is None or rec.t < closest.t:
                closest = rec
        return closest

    def __repr__(self) -> str:
        return (f"World({len(self.geometries)} geometries, {len(self.lights)} lights, "
                f"max_depth={self.max_depth})")
