# renderer/image_io.py
import logging
import os
from typing import Sequence
import numpy as np
from PIL import Image
from core.vector import Color3

logger = logging.getLogger(__name__)


def image_to_array(image: Sequence[Sequence[Color3]]) -> np.ndarray:
    """
    Converts a row-major image of colors to a float64 array of shape
    (height, width, 3). Values are copied unchanged.
    """
    if len(image) == 0 or len(image[0]) == 0:
        raise ValueError("cannot convert an empty image")
    return np.array([[tuple(color) for color in row] for row in image], dtype=np.float64)


def array_to_uint8(array: np.ndarray) -> np.ndarray:
    """
    Maps [0, 1] floats to 8-bit channels with floor(c * 255.999),
    saturating out-of-range values and sending NaN to 0.
    """
    scaled = np.nan_to_num(np.asarray(array, dtype=np.float64) * 255.999,
                           nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.floor(scaled), 0, 255).astype(np.uint8)


def save_png(image: Sequence[Sequence[Color3]], path: str) -> None:
    """
    Saves the image as an 8-bit RGB PNG.
    """
    pixels = array_to_uint8(image_to_array(image))
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    # uint8 (H, W, 3) arrays are read as RGB
    Image.fromarray(pixels).save(path)
    logger.info("Wrote %s", path)
