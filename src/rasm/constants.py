"""
Various constants for rasm
"""

from enum import Enum

from PIL import Image


class OutputFormat(str, Enum):
    """
    Output file format of a :py:class:`~rasm.canvas.Canvas`.

    The value is the file extension written by the encoder.
    """

    PNG = "png"
    JPG = "jpg"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.strip().lower()
            if name == "jpeg":
                return cls.JPG
            for member in cls:
                if member.value == name:
                    return member
        return None

    @property
    def extension(self) -> str:
        return self.value


class ObjectKind(str, Enum):
    """
    Kind of a manifest object.
    """

    RECT = "rect"
    IMAGE = "image"


#: Resampling filter used by :py:meth:`~rasm.api.image.Image.resize`.
RESAMPLE_FILTER = Image.Resampling.LANCZOS

#: Encoder quality for JPG output.
JPEG_QUALITY = 100

#: Default pixel, opaque white.
DEFAULT_COLOR = (255, 255, 255, 255)

#: Number of channels in a pixel.
CHANNELS = 4
