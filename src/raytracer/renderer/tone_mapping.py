# renderer/tone_mapping.py
import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def to_uint8(image: np.ndarray) -> np.ndarray:
    """
    Clamps a linear image to [0, 1] and converts it to 8-bit channels.
    """
    return (np.clip(image, 0.0, 1.0) * 255 + 0.5).astype(np.uint8)


def reinhard_tone_mapping(image: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(image, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return to_uint8(mapped)


def save_image(image: np.ndarray, output_path: str) -> None:
    """
    Save a rendered image to a file; the format follows the file extension.
    Float images are clamped and converted, uint8 images are written as is.
    """
    if image.dtype != np.uint8:
        image = to_uint8(image)
    Image.fromarray(np.ascontiguousarray(image)).save(output_path)
    logger.info("Image saved to %s", output_path)
