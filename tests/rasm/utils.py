import logging
import os
from typing import Sequence

import numpy as np
from PIL import Image as PILImage

from rasm.api.image import Image
from rasm.api.layers import Layer

logging.basicConfig(level=logging.DEBUG)

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
HALF_BLUE = (0, 0, 255, 128)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)


def solid(width: int, height: int, color: Sequence[int]) -> Image:
    return Image.new(width, height, color)


def gradient(width: int, height: int) -> Image:
    """Opaque image whose every pixel is distinct enough to detect shifts."""
    data = np.zeros((height, width, 4), dtype=np.uint8)
    data[..., 0] = np.arange(width, dtype=np.uint8)[np.newaxis, :] * 7
    data[..., 1] = np.arange(height, dtype=np.uint8)[:, np.newaxis] * 11
    data[..., 2] = 100
    data[..., 3] = 255
    return Image(width, height, [Layer(data)])


def write_image(path: str, image: Image, format: str = "PNG") -> str:
    pil = image.topil()
    if format == "JPEG":
        pil = pil.convert("RGB")
    pil.save(path, format)
    return path


def read_rgba(path: str) -> np.ndarray:
    assert os.path.exists(path)
    with PILImage.open(path) as image:
        return np.asarray(image.convert("RGBA"))
