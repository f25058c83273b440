from .directional_light import DirectionalLight
from .light import Light
from .point_light import PointLight
from .spot_light import SpotLight

__all__ = ["DirectionalLight", "Light", "PointLight", "SpotLight"]
