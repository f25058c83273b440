from .raytracer import Renderer
from .tracer import Tracer

__all__ = ["Renderer", "Tracer"]
