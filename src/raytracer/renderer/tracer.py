# renderer/tracer.py
from raytracer.core.color import Color
from raytracer.core.constants import EPSILON
from raytracer.core.errors import InvalidConfigurationError
from raytracer.core.ray import Ray


class Tracer:
    """
    Recursive integrator. trace() finds the nearest hit and asks its
    material for a color; materials that follow secondary rays call back
    into the tracer they were handed.

    Each tracer carries the number of trace levels it may still descend.
    The material receives a tracer with one level less, so the recursion
    ends after world.max_depth nested calls no matter how the scene
    bounces rays around. An exhausted tracer returns the background.
    """
    def __init__(self, depth: int, t_min: float = 0.0):
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise InvalidConfigurationError(f"depth must be an int, got {depth!r}.")
        self.depth = depth
        self.t_min = t_min

    @classmethod
    def for_world(cls, world) -> "Tracer":
        """
        The tracer for primary rays, which may hit surfaces at t = 0.
        """
        return cls(world.max_depth)

    def descend(self) -> "Tracer":
        # Secondary rays start on a surface and must not hit it again at t ~ 0.
        return Tracer(self.depth - 1, EPSILON)

    def trace(self, ray: Ray, world) -> Color:
        if self.depth <= 0:
            return world.background_color
        hit = world.hit(ray, self.t_min)
        if hit is None:
            return world.background_color
        return hit.geometry.material.color_for(hit, world, self.descend())

    def __repr__(self) -> str:
        return f"Tracer(depth={self.depth}, t_min={self.t_min})"
