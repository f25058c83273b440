# materials/material.py
from raytracer.core.color import Color
from raytracer.geometry.hit import Hit


class Material:
    """
    Abstract material class. Subclasses must implement color_for().

    color_for() receives the tracer so that reflective and transparent
    materials can follow secondary rays; the tracer it is given already
    carries the reduced recursion depth.
    """
    def color_for(self, hit: Hit, world, tracer) -> Color:
        """
        Computes the color seen along hit.ray at the intersection.
        """
        raise NotImplementedError("color_for() must be implemented by subclasses.")
