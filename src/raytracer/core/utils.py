# core/utils.py
from raytracer.core.vector import Normal3, Vector3


def reflect(v: Vector3, n: Normal3) -> Vector3:
    """
    Reflects the incoming direction v about the normal n.
    """
    return v - n.as_vector() * (2 * v.dot(n))


def schlick(cos_theta: float, eta1: float, eta2: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance at an interface
    between media with refractive indices eta1 (incoming) and eta2.
    """
    r0 = ((eta1 - eta2) / (eta1 + eta2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos_theta) ** 5
