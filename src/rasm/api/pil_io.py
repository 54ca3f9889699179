"""
PIL IO module.

Thin adapters between raw RGBA8 buffers and Pillow: decoding source images,
encoding output files and resampling.
"""

import logging
import os
from typing import Union

from PIL import Image

from rasm.constants import CHANNELS, RESAMPLE_FILTER

logger = logging.getLogger(__name__)


def decode(path: Union[str, "os.PathLike[str]"]) -> tuple[int, int, bytes]:
    """
    Decode an image file into an RGBA8 buffer.

    Palette, grayscale, RGB and 16-bit inputs are converted to 8-bit RGBA,
    and missing alpha becomes opaque.

    :return: ``(width, height, data)`` where ``data`` is row-major, top to
        bottom, one byte per channel.
    :raises PIL.UnidentifiedImageError: if the file is not a known image.
    """
    with Image.open(path) as image:
        logger.debug(
            "Decoding %s (%s, %s, %dx%d)"
            % (path, image.format, image.mode, image.width, image.height)
        )
        image.load()
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return image.width, image.height, image.tobytes()


def topil(data: bytes, width: int, height: int) -> Image.Image:
    """Wrap an RGBA8 buffer into a PIL Image."""
    expected = width * height * CHANNELS
    if len(data) != expected:
        raise ValueError(
            "Expected %d bytes for %dx%d RGBA, got %d"
            % (expected, width, height, len(data))
        )
    return Image.frombytes("RGBA", (width, height), data)


def encode(
    data: bytes,
    width: int,
    height: int,
    path: Union[str, "os.PathLike[str]"],
    format: str,
    mode: str = "RGBA",
    **params,
) -> None:
    """
    Encode an RGBA8 buffer into ``path``.

    :param format: Pillow format name, such as ``"PNG"`` or ``"JPEG"``.
    :param mode: Color type written to the file, ``"RGBA"`` or ``"RGB"``.
    :param params: Extra encoder options passed to :py:meth:`PIL.Image.Image.save`.
    """
    image = topil(data, width, height)
    if mode != image.mode:
        image = image.convert(mode)
    logger.debug("Encoding %dx%d %s as %s to %s" % (width, height, mode, format, path))
    image.save(path, format, **params)


def resample(
    data: bytes,
    size: tuple[int, int],
    target: tuple[int, int],
    resample: Image.Resampling = RESAMPLE_FILTER,
) -> bytes:
    """
    Resample an RGBA8 buffer of ``size`` to ``target``.

    :param size: Source (width, height).
    :param target: Destination (width, height).
    :param resample: Pillow filter, Lanczos by default.
    :return: RGBA8 buffer of the destination size.
    """
    image = topil(data, *size)
    return image.resize(target, resample).tobytes()
