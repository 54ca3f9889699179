"""
Canvas module.

A :py:class:`Canvas` collects drawables in a FIFO queue and composites them,
in insertion order, when it is saved. Later drawables cover earlier ones.

Example usage::

    from rasm import Canvas, Image

    canvas = Canvas("png", 1080, 1080)

    # Top half red, bottom half blue. Coordinates are percentages.
    canvas.new_rect((0, 0), (100, 50), (255, 0, 0, 255))
    canvas.new_rect((0, 50), (100, 100), (0, 0, 255, 255))

    # Place a photo at the center, half the canvas wide
    photo = canvas.add_image((25, 25), Image.open("photo.jpg"))
    photo.resize((540, 0))

    canvas.save("poster")  # writes poster.png
"""

import logging
import os
from collections import deque
from typing import Optional, Sequence, Union

from rasm.api.image import Image
from rasm.api.layers import Layer
from rasm.api.pixel import ColorLike, Point
from rasm.constants import DEFAULT_COLOR, OutputFormat
from rasm.drawables import Drawable, PlacedImage, Rect
from rasm.formats import OutputTarget

logger = logging.getLogger(__name__)


class Canvas(object):
    """
    Output image under construction.

    :param format: Output format, :py:class:`~rasm.constants.OutputFormat`
        or its tag such as ``"png"``.
    :param width: Width in pixels.
    :param height: Height in pixels.
    :param color: Background color, opaque white by default.
    :raises ConfigurationError: if ``format`` is unknown.
    """

    def __init__(
        self,
        format: Union[str, OutputFormat],
        width: int,
        height: int,
        color: Optional[ColorLike] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError("Invalid canvas size (%d, %d)" % (width, height))
        color = color if color is not None else DEFAULT_COLOR
        self._target = OutputTarget(format, Image.new(width, height, color))
        self._width = width
        self._height = height
        self._queue: deque[Drawable] = deque()
        self._saved = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def format(self) -> OutputFormat:
        return self._target.format

    @property
    def target(self) -> OutputTarget:
        """Format adapter that encodes the canvas image."""
        return self._target

    @property
    def image(self) -> Image:
        return self._target.image

    @property
    def base_layer(self) -> Layer:
        """Layer every drawable composites onto."""
        return self._target.image.layers[0]

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return "%s(format=%s, size=%dx%d, pending=%d)" % (
            self.__class__.__name__,
            self.format.value,
            self._width,
            self._height,
            len(self._queue),
        )

    def resolve(self, pct: Sequence[float]) -> Point:
        """
        Convert an (x, y) pair of percentages of the canvas width and height
        into a pixel :py:class:`~rasm.api.pixel.Point`.
        """
        return Point(
            int(self._width * (pct[0] / 100.0)),
            int(self._height * (pct[1] / 100.0)),
        )

    def _enqueue(self, drawable: Drawable) -> None:
        if self._saved:
            raise RuntimeError("Canvas has already been saved")
        logger.debug("Enqueue %r" % (drawable,))
        self._queue.append(drawable)

    def new_rect(
        self,
        origin: Sequence[float],
        offset: Sequence[float],
        color: ColorLike,
    ) -> Rect:
        """
        Queue a rectangle.

        :param origin: (x, y) percentages of the top-left corner.
        :param offset: (x, y) percentages of the opposite end of the diagonal.
        :param color: Fill color.
        :return: The queued :py:class:`~rasm.drawables.Rect`.
        """
        rect = Rect.from_coordinates(self.resolve(origin), self.resolve(offset), color)
        self._enqueue(rect)
        return rect

    def add_image(self, origin: Sequence[float], image: Image) -> PlacedImage:
        """
        Queue an image.

        :param origin: (x, y) percentages of the top-left corner.
        :param image: Decoded :py:class:`~rasm.api.image.Image`.
        :return: The queued :py:class:`~rasm.drawables.PlacedImage`, which
            may still be resized before :py:meth:`save`.
        """
        image.origin = self.resolve(origin)
        placed = PlacedImage(image)
        self._enqueue(placed)
        return placed

    def save(self, filename: Union[str, "os.PathLike[str]"]) -> str:
        """
        Draw every queued object in order and encode the result.

        :param filename: Output path without extension.
        :return: Path of the written file, ``<filename>.<ext>``.
        """
        if self._saved:
            raise RuntimeError("Canvas has already been saved")
        self._saved = True
        logger.debug("Drawing %d objects onto %r" % (len(self._queue), self))
        while self._queue:
            self._queue.popleft().draw(self)
        return self._target.write(filename)
