"""
Configuration settings for the ray tracer
"""
from raytracer.core.errors import InvalidConfigurationError

# Rendering settings
RENDER_SETTINGS = {
    'width': 640,
    'height': 480,
    'workers': 1,
    'output': 'render.png',
    'quality': 'balanced',
    'log_level': 'INFO',
}

# scale: fraction of the configured resolution, max_depth: trace levels
QUALITY_LEVELS = {
    'preview': {'scale': 0.25, 'max_depth': 2},
    'balanced': {'scale': 0.5, 'max_depth': 4},
    'high_quality': {'scale': 1.0, 'max_depth': 8},
}


def get_quality(name: str) -> dict:
    """
    Returns the settings of a quality level, raising for unknown names.
    """
    try:
        return QUALITY_LEVELS[name]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}."
        ) from None


def scaled_size(width: int, height: int, quality: dict) -> tuple:
    """
    Applies a quality level's scale to the image size, never below 1x1.
    """
    scale = quality['scale']
    return max(1, int(width * scale)), max(1, int(height * scale))
