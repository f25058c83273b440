from .lambertian import LambertMaterial
from .material import Material
from .phong import PhongMaterial
from .reflective import ReflectiveMaterial
from .single_color import SingleColorMaterial
from .transparent import TransparentMaterial

__all__ = [
    "LambertMaterial",
    "Material",
    "PhongMaterial",
    "ReflectiveMaterial",
    "SingleColorMaterial",
    "TransparentMaterial",
]
