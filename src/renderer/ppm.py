# renderer/ppm.py
import logging
import os
from typing import Sequence, Tuple
from core.vector import Color3

logger = logging.getLogger(__name__)

MAX_CHANNEL = 255


def channel_to_byte(component: float) -> int:
    """
    Maps a color component in [0, 1] to an 8-bit channel with
    floor(component * 255.999). Values outside the range saturate to 0 or
    255 and NaN maps to 0.
    """
    scaled = component * 255.999
    if not scaled > 0:
        return 0
    if scaled >= MAX_CHANNEL:
        return MAX_CHANNEL
    return int(scaled)


def color_to_rgb(color: Color3) -> Tuple[int, int, int]:
    return (channel_to_byte(color.x),
            channel_to_byte(color.y),
            channel_to_byte(color.z))


def _image_size(image: Sequence[Sequence[Color3]]) -> Tuple[int, int]:
    if len(image) == 0 or len(image[0]) == 0:
        raise ValueError("cannot serialize an empty image")
    width = len(image[0])
    for row in image:
        if len(row) != width:
            raise ValueError(f"image rows must all have width {width}, got {len(row)}")
    return width, len(image)


def image_to_ppm(image: Sequence[Sequence[Color3]]) -> str:
    """
    Serializes a row-major image of colors to plain-text PPM (P3).

    The header declares the format tag, "width height" and the maximum
    channel value, followed by one line of "r g b" triples per row.
    """
    width, height = _image_size(image)
    lines = ["P3", f"{width} {height}", str(MAX_CHANNEL)]
    for row in image:
        lines.append(" ".join("%d %d %d" % color_to_rgb(color) for color in row))
    return "\n".join(lines) + "\n"


def write_ppm(image: Sequence[Sequence[Color3]], path: str) -> None:
    """
    Writes the image as a P3 PPM file, creating parent directories.
    """
    text = image_to_ppm(image)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="ascii") as f:
        f.write(text)
    logger.info("Wrote %s", path)
