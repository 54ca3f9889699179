"""
Image module.

An :py:class:`Image` is an ordered stack of equally sized
:py:class:`~rasm.api.layers.Layer` objects, bottom to top, together with the
origin where it is placed on a canvas.

Example usage::

    from rasm.api.image import Image

    # Decode a file into a single-layer image
    image = Image.open('photo.jpg')

    # Stack another layer and flatten
    image.add_layer(overlay)
    image.collapse()

    # Resize preserving the aspect ratio
    image.resize((640, 0))
    image.topil().save('thumbnail.png')
"""

import logging
import os
from typing import Iterator, Optional, Sequence, Union

import numpy as np
from PIL import Image as PILImage

from rasm.api import pil_io
from rasm.api.layers import Layer
from rasm.api.pixel import ColorLike, Point
from rasm.composite import collapse
from rasm.errors import ResizeError

logger = logging.getLogger(__name__)


class Image(object):
    """
    Layered RGBA image.

    .. py:attribute:: origin

        :py:class:`~rasm.api.pixel.Point` where the top-left corner of the
        image is placed.
    """

    def __init__(
        self,
        width: int,
        height: int,
        layers: Optional[Sequence[Layer]] = None,
        origin: Optional[Point] = None,
    ):
        self._width = width
        self._height = height
        self._layers: list[Layer] = []
        self.origin = origin if origin is not None else Point()
        for layer in layers or []:
            self.add_layer(layer)

    @classmethod
    def new(
        cls, width: int, height: int, color: Optional[ColorLike] = None
    ) -> "Image":
        """
        Create a new image with a single layer filled with ``color``.

        :param width: Width in pixels.
        :param height: Height in pixels.
        :param color: Fill color, opaque white by default.
        """
        return cls(width, height, [Layer.new(width, height, color)])

    @classmethod
    def frombytes(
        cls,
        width: int,
        height: int,
        data: bytes,
        origin: Optional[Point] = None,
    ) -> "Image":
        """Create a single-layer image from a row-major RGBA8 buffer."""
        return cls(width, height, [Layer.frombytes(width, height, data)], origin)

    @classmethod
    def open(cls, path: Union[str, "os.PathLike[str]"]) -> "Image":
        """
        Decode an image file.

        :param path: Path to a PNG, JPEG or any format Pillow reads.
        :return: Single-layer :py:class:`Image`.
        """
        width, height, data = pil_io.decode(path)
        return cls.frombytes(width, height, data)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self._width, self._height

    @property
    def layers(self) -> list[Layer]:
        """Layers in paint order, bottom first."""
        return self._layers

    def add_layer(self, layer: Layer) -> None:
        """Stack ``layer`` on top."""
        if layer.size != self.size:
            raise ValueError(
                "Layer size %r does not match image size %r" % (layer.size, self.size)
            )
        self._layers.append(layer)

    def __len__(self) -> int:
        return len(self._layers)

    def __getitem__(self, index: int) -> Layer:
        return self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __repr__(self) -> str:
        return "%s(size=%dx%d, layers=%d, origin=(%d, %d))" % (
            self.__class__.__name__,
            self._width,
            self._height,
            len(self._layers),
            self.origin.x,
            self.origin.y,
        )

    def collapse(self) -> Layer:
        """
        Flatten the layer stack in place.

        :return: The remaining single :py:class:`~rasm.api.layers.Layer`.
        """
        if len(self._layers) != 1:
            logger.debug("Collapsing %d layers of %s" % (len(self._layers), self))
            self._layers = [collapse(self)]
        return self._layers[0]

    def tobytes(self) -> bytes:
        """Collapse and return the row-major RGBA8 buffer."""
        return self.collapse().tobytes()

    def numpy(self) -> np.ndarray:
        """Collapse and return the ``(height, width, 4)`` ``uint8`` array."""
        return self.collapse().numpy()

    def topil(self) -> PILImage.Image:
        """Collapse and return an RGBA PIL Image."""
        return pil_io.topil(self.tobytes(), self._width, self._height)

    def resolve_size(self, size: Sequence[int]) -> tuple[int, int]:
        """
        Resolve a resize target, filling a zero dimension so that the aspect
        ratio is preserved.

        :raises ResizeError: if both dimensions are zero, any is negative, or
            the image itself is empty along a dimension.
        """
        width, height = int(size[0]), int(size[1])
        if width < 0 or height < 0:
            raise ResizeError("Invalid resize target (%d, %d)" % (width, height))
        if width == 0 and height == 0:
            raise ResizeError("Resize target cannot be (0, 0)")
        if 0 in (width, height) and 0 in self.size:
            raise ResizeError("Cannot keep the aspect ratio of %s" % self)
        if width == 0:
            width = int(self._width * (height / self._height))
        elif height == 0:
            height = int(self._height * (width / self._width))
        return width, height

    def resize(self, size: Sequence[int]) -> None:
        """
        Resample the image to ``size``.

        The stack is flattened, resampled with the Lanczos filter and replaced
        by exactly one layer. A zero in ``size`` is computed from the other
        dimension; a target equal to the current size leaves the image as is.

        :param size: Absolute (width, height) pair.
        :raises ResizeError: if both dimensions are zero.
        """
        target = self.resolve_size(size)
        if target == self.size:
            logger.debug("Resize of %s to its own size ignored" % self)
            return
        if 0 in target:
            raise ResizeError("Resize target %r collapses %s" % (target, self))

        logger.debug("Resizing %s to %dx%d" % ((self,) + target))
        data = pil_io.resample(self.tobytes(), self.size, target)
        self._width, self._height = target
        self._layers = [Layer.frombytes(target[0], target[1], data)]
