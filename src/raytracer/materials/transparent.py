# materials/transparent.py
import math

from raytracer.core.color import Color
from raytracer.core.errors import InvalidConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.utils import schlick
from raytracer.core.vector import is_valid
from raytracer.geometry.hit import Hit
from raytracer.materials.material import Material


class TransparentMaterial(Material):
    """
    Dielectric such as glass or water. The color is the Fresnel-weighted
    sum of the colors seen along the reflected and the transmitted ray,
    using Schlick's approximation for the reflectance.

    eta1 is the index of the medium the ray comes from (the world's index
    when it hits the surface from outside), eta2 the index it enters.
    """
    def __init__(self, index_of_refraction: float):
        if index_of_refraction is None or not is_valid(index_of_refraction) or index_of_refraction <= 0:
            raise InvalidConfigurationError(
                f"index_of_refraction must be a positive finite number, got {index_of_refraction!r}."
            )
        self.index_of_refraction = index_of_refraction

    def color_for(self, hit: Hit, world, tracer) -> Color:
        # cos phi1 = <-d, n>
        # cos phi2 = sqrt(1 - (eta1 / eta2)^2 * (1 - cos^2 phi1))
        # rd = d + 2 cos phi1 * n
        # rt = (eta1 / eta2) * d - (cos phi2 - (eta1 / eta2) * cos phi1) * n
        # c = R * trace(p, rd) + T * trace(p, rt)
        d = hit.ray.direction.normalize()
        n = hit.normal
        p = hit.point
        eta1 = world.index_of_refraction
        eta2 = self.index_of_refraction

        cos_phi1 = (-d).dot(n)
        if cos_phi1 < 0:
            # Leaving the medium: look at the interface from the inside.
            n = -n
            cos_phi1 = -cos_phi1
            eta1, eta2 = eta2, eta1

        q = eta1 / eta2
        n_vec = n.as_vector()
        rd = d + n_vec * (2 * cos_phi1)
        radicand = 1 - q * q * (1 - cos_phi1 * cos_phi1)
        if radicand < 0:
            # Total internal reflection, nothing is transmitted.
            return tracer.trace(Ray(p, rd), world)

        cos_phi2 = math.sqrt(radicand)
        rt = d * q - n_vec * (cos_phi2 - q * cos_phi1)
        r = schlick(cos_phi1, eta1, eta2)
        t = 1 - r
        return tracer.trace(Ray(p, rd), world) * r + tracer.trace(Ray(p, rt), world) * t

    def __repr__(self) -> str:
        return f"TransparentMaterial({self.index_of_refraction!r})"
