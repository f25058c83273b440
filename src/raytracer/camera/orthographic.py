# camera/orthographic.py
from raytracer.camera.camera import Camera
from raytracer.core.errors import InvalidConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vector3, is_valid


class OrthographicCamera(Camera):
    """
    Parallel projection. All rays share the direction -w and start on the
    image plane through the eye; scale is the visible height in world units.
    """
    def __init__(self, eye: Point3, gaze: Vector3, up: Vector3, scale: float):
        super().__init__(eye, gaze, up)
        if scale is None or not is_valid(scale) or scale <= 0:
            raise InvalidConfigurationError(f"scale must be a positive number, got {scale!r}.")
        self.scale = scale

    def _ray_for(self, width: int, height: int, x: int, y: int) -> Ray:
        # Square pixels of scale / height world units keep the aspect ratio.
        pixel = self.scale / height
        origin = (self.eye
                  + self.u * ((x - (width - 1) / 2.0) * pixel)
                  + self.v * (((height - 1) / 2.0 - y) * pixel))
        return Ray(origin, -self.w)

    def __repr__(self) -> str:
        return f"OrthographicCamera(eye={self.eye!r}, gaze={self.gaze!r}, scale={self.scale!r})"
