# geometry/box.py
import math
from typing import Optional

from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.core.ray import Ray
from raytracer.core.vector import Normal3, Point3
from raytracer.geometry.geometry import Geometry
from raytracer.geometry.hit import Hit

_AXES = ("x", "y", "z")


def _axis_normal(axis: str, sign: float) -> Normal3:
    return Normal3(
        sign if axis == "x" else 0.0,
        sign if axis == "y" else 0.0,
        sign if axis == "z" else 0.0
    )


class AxisAlignedBox(Geometry):
    """
    A box whose faces are parallel to the coordinate planes, spanned by its
    left-bottom-far corner lbf and its right-upper-near corner run.
    """
    def __init__(self, lbf: Point3, run: Point3, material):
        super().__init__(material)
        self.lbf = require(lbf, "lbf")
        self.run = require(run, "run")
        if not (lbf.is_valid() and run.is_valid()):
            raise InvalidConfigurationError("The box corners must be finite.")
        if lbf.x > run.x or lbf.y > run.y or lbf.z > run.z:
            raise InvalidConfigurationError(
                f"lbf {lbf!r} must not be greater than run {run!r} on any axis."
            )

    def hit(self, ray: Ray, t_min: float = 0.0) -> Optional[Hit]:
        # Slab method: for each axis, find the interval where the ray is
        # between the two faces; the box is hit where all intervals overlap.
        t_near, t_far = -math.inf, math.inf
        near_axis = far_axis = None
        for a in _AXES:
            o = getattr(ray.origin, a)
            d = getattr(ray.direction, a)
            lo = getattr(self.lbf, a)
            hi = getattr(self.run, a)
            if d == 0:
                if o < lo or o > hi:
                    return None
                continue
            t0 = (lo - o) / d
            t1 = (hi - o) / d
            if t0 > t1:
                t0, t1 = t1, t0
            if t0 > t_near:
                t_near, near_axis = t0, a
            if t1 < t_far:
                t_far, far_axis = t1, a
        if near_axis is None or t_near > t_far or t_far < t_min:
            return None

        if t_near >= t_min:
            # Entering face, outward normal points against the direction.
            t, axis, sign = t_near, near_axis, -1.0
        else:
            # Origin inside the box, leaving through the far face.
            t, axis, sign = t_far, far_axis, 1.0
        d = getattr(ray.direction, axis)
        return Hit(t, ray, self, _axis_normal(axis, sign if d > 0 else -sign))

    def __repr__(self) -> str:
        return f"AxisAlignedBox(lbf={self.lbf!r}, run={self.run!r})"
