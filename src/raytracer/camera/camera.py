# camera/camera.py
from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vector3


class Camera:
    """
    Base class for cameras. Builds the orthonormal basis (u, v, w) from the
    eye position e, the gaze direction g and the up vector t:

        w = -g / |g|
        u = (t x w) / |t x w|
        v = w x u

    u points right, v points up and w points backwards (away from the scene).
    """
    def __init__(self, eye: Point3, gaze: Vector3, up: Vector3):
        self.eye = require(eye, "eye")
        self.gaze = require(gaze, "gaze")
        self.up = require(up, "up")
        if not eye.is_valid():
            raise InvalidConfigurationError(f"The eye position must be finite, got {eye!r}.")
        try:
            self.w = (-gaze).normalize()
            self.u = up.cross(self.w).normalize()
        except InvalidConfigurationError as e:
            raise InvalidConfigurationError(
                f"Cannot build a camera basis from gaze {gaze!r} and up {up!r}: "
                "both must be non-zero and not parallel."
            ) from e
        self.v = self.w.cross(self.u)

    def ray_for(self, width: int, height: int, x: int, y: int) -> Ray:
        """
        Returns the primary ray through pixel (x, y) of a width x height image.
        Pixel (0, 0) is the top left corner.
        """
        _check_pixel(width, height, x, y)
        return self._ray_for(width, height, x, y)

    def _ray_for(self, width: int, height: int, x: int, y: int) -> Ray:
        raise NotImplementedError("_ray_for() must be implemented by subclasses.")


def _check_pixel(width: int, height: int, x: int, y: int):
    if width < 1 or height < 1:
        raise InvalidConfigurationError(f"Image size must be at least 1x1, got {width}x{height}.")
    if not (0 <= x < width and 0 <= y < height):
        raise InvalidConfigurationError(f"Pixel ({x}, {y}) is outside a {width}x{height} image.")
