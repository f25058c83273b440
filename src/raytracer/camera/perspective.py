# camera/perspective.py
import math

from raytracer.camera.camera import Camera
from raytracer.core.errors import InvalidConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.vector import Point3, Vector3, is_valid


class PerspectiveCamera(Camera):
    """
    Pinhole camera: all rays start at the eye and fan out through an image
    plane. angle is the vertical field of view in radians.
    """
    def __init__(self, eye: Point3, gaze: Vector3, up: Vector3, angle: float):
        super().__init__(eye, gaze, up)
        if angle is None or not is_valid(angle) or not 0 < angle < math.pi:
            raise InvalidConfigurationError(f"angle must be in (0, pi), got {angle!r}.")
        self.angle = angle

    def _ray_for(self, width: int, height: int, x: int, y: int) -> Ray:
        # Distance of the image plane such that it is `height` pixels tall.
        distance = (height / 2.0) / math.tan(self.angle / 2.0)
        direction = (self.w * -distance
                     + self.u * (x - (width - 1) / 2.0)
                     + self.v * ((height - 1) / 2.0 - y))
        return Ray(self.eye, direction.normalize())

    def __repr__(self) -> str:
        return f"PerspectiveCamera(eye={self.eye!r}, gaze={self.gaze!r}, angle={self.angle!r})"
