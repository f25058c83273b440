from .camera import Camera
from .orthographic import OrthographicCamera
from .perspective import PerspectiveCamera

__all__ = ["Camera", "OrthographicCamera", "PerspectiveCamera"]
