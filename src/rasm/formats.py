"""
Output formats.

:py:class:`OutputTarget` owns the canvas image and hands its RGBA8 buffer to
the encoder registered for its :py:class:`~rasm.constants.OutputFormat`.
Encoders share one signature::

    encoder(data, width, height, path, color_type, bit_depth)
"""

import logging
import os
from typing import Callable, Union

from rasm.api import pil_io
from rasm.api.image import Image
from rasm.constants import JPEG_QUALITY, OutputFormat
from rasm.errors import ConfigurationError
from rasm.registry import new_registry

logger = logging.getLogger(__name__)

ENCODERS, register = new_registry(attribute="format")

COLOR_TYPES = ("RGBA", "RGB")


def _check_depth(bit_depth: int) -> None:
    if bit_depth != 8:
        raise ConfigurationError("Unsupported bit depth: %r" % (bit_depth,))


@register(OutputFormat.PNG)
def write_png(
    data: bytes, width: int, height: int, path: str, color_type: str, bit_depth: int
) -> None:
    _check_depth(bit_depth)
    pil_io.encode(data, width, height, path, "PNG", mode=color_type)


@register(OutputFormat.JPG)
def write_jpg(
    data: bytes, width: int, height: int, path: str, color_type: str, bit_depth: int
) -> None:
    _check_depth(bit_depth)
    # JPEG has no alpha channel.
    if data[3::4].replace(b"\xff", b""):
        logger.warning("Dropping alpha channel of %dx%d JPG output" % (width, height))
    pil_io.encode(data, width, height, path, "JPEG", mode="RGB", quality=JPEG_QUALITY)


def get_format(value: Union[str, OutputFormat]) -> OutputFormat:
    """
    Resolve an output format tag.

    :raises ConfigurationError: if the tag is not a known format.
    """
    try:
        return OutputFormat(value)
    except ValueError:
        raise ConfigurationError("Unknown image format: %r" % (value,)) from None


class OutputTarget(object):
    """
    Format-backed output image.

    :param format: :py:class:`~rasm.constants.OutputFormat` or its tag.
    :param image: Image that is encoded by :py:meth:`write`.
    """

    def __init__(self, format: Union[str, OutputFormat], image: Image):
        self._format = get_format(format)
        self._encoder: Callable = ENCODERS[self._format]
        self._image = image
        self._color_type = "RGBA"
        self._bit_depth = 8

    @property
    def format(self) -> OutputFormat:
        return self._format

    @property
    def image(self) -> Image:
        return self._image

    @property
    def color_type(self) -> str:
        """Color type written to the file, ``"RGBA"`` or ``"RGB"``."""
        return self._color_type

    @color_type.setter
    def color_type(self, value: str) -> None:
        if value not in COLOR_TYPES:
            raise ConfigurationError("Unsupported color type: %r" % (value,))
        self._color_type = value

    @property
    def bit_depth(self) -> int:
        return self._bit_depth

    @bit_depth.setter
    def bit_depth(self, value: int) -> None:
        _check_depth(value)
        self._bit_depth = value

    def filename(self, name: Union[str, "os.PathLike[str]"]) -> str:
        """Append the format extension to ``name``."""
        return "%s.%s" % (os.fspath(name), self._format.extension)

    def write(self, name: Union[str, "os.PathLike[str]"]) -> str:
        """
        Encode the image to ``<name>.<ext>``.

        :return: Path of the written file.
        """
        path = self.filename(name)
        self._encoder(
            self._image.tobytes(),
            self._image.width,
            self._image.height,
            path,
            self._color_type,
            self._bit_depth,
        )
        logger.info("Wrote %s" % path)
        return path
