# materials/presets.py
from raytracer.core import constants
from raytracer.core.color import Color
from raytracer.materials.lambertian import LambertMaterial
from raytracer.materials.phong import PhongMaterial
from raytracer.materials.reflective import ReflectiveMaterial
from raytracer.materials.transparent import TransparentMaterial


class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    PURPLE = Color(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.1, 0.1, 0.1)

    @staticmethod
    def matte(color: Color) -> LambertMaterial:
        """Create a matte material with the given color."""
        return LambertMaterial(color)

    @staticmethod
    def glossy(color: Color, exponent: float = 64) -> PhongMaterial:
        """Create a plastic-like material with a white highlight."""
        return PhongMaterial(color, Color.white(), exponent)


class MirrorPresets:
    """Reflective materials tinted like common metals."""

    @staticmethod
    def mirror() -> ReflectiveMaterial:
        return ReflectiveMaterial(Color.black(), Color.black(), 1, Color.white())

    @staticmethod
    def gold() -> ReflectiveMaterial:
        return ReflectiveMaterial(Color(1.0, 0.78, 0.34), Color.white(), 32, Color(0.5, 0.4, 0.2))

    @staticmethod
    def silver() -> ReflectiveMaterial:
        return ReflectiveMaterial(Color(0.95, 0.93, 0.88), Color.white(), 64, Color(0.6, 0.6, 0.6))

    @staticmethod
    def copper() -> ReflectiveMaterial:
        return ReflectiveMaterial(Color(0.95, 0.64, 0.54), Color.white(), 32, Color(0.5, 0.3, 0.25))


class TransparentPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> TransparentMaterial:
        return TransparentMaterial(constants.INDEX_OF_REFRACTION_GLASS)

    @staticmethod
    def water() -> TransparentMaterial:
        return TransparentMaterial(constants.INDEX_OF_REFRACTION_WATER)

    @staticmethod
    def diamond() -> TransparentMaterial:
        return TransparentMaterial(constants.INDEX_OF_REFRACTION_DIAMOND)

    @staticmethod
    def ice() -> TransparentMaterial:
        return TransparentMaterial(constants.INDEX_OF_REFRACTION_ICE)

    @staticmethod
    def sapphire() -> TransparentMaterial:
        return TransparentMaterial(constants.INDEX_OF_REFRACTION_SAPPHIRE)
