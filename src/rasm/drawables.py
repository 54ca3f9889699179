"""
Drawable objects queued on a :py:class:`~rasm.canvas.Canvas`.

The set of drawables is closed: :py:class:`Rect` and :py:class:`PlacedImage`.
Each one composites itself onto the canvas base layer when drawn, so the
canvas never needs to know which kind it holds.
"""

import abc
import logging
from typing import TYPE_CHECKING, Sequence

from attrs import define, field

from rasm.api.image import Image
from rasm.api.pixel import ColorLike, Pixel, Point, as_pixel
from rasm.composite import paste
from rasm.errors import BoundsError

if TYPE_CHECKING:
    from rasm.canvas import Canvas

logger = logging.getLogger(__name__)


class Drawable(abc.ABC):
    """Renderable object that composites itself onto a canvas."""

    @abc.abstractmethod
    def draw(self, canvas: "Canvas") -> None:
        """Composite onto the base layer of ``canvas``."""

    @abc.abstractmethod
    def resize(self, size: Sequence[int]) -> None:
        """Resize to an absolute (width, height) pair."""


@define(eq=False)
class Rect(Drawable):
    """
    Solid rectangle.

    Covers rows ``[origin.y, origin.y + height)`` and columns
    ``[origin.x, origin.x + width)``.
    """

    origin: Point = field(factory=Point)
    color: Pixel = field(factory=lambda: Pixel(0, 0, 0, 255), converter=as_pixel)
    width: int = field(default=0)
    height: int = field(default=0)

    @classmethod
    def from_coordinates(
        cls,
        a: Sequence[int],
        c: Sequence[int],
        color: ColorLike = (0, 0, 0, 255),
    ) -> "Rect":
        """
        Build a rectangle from the two ends of its diagonal.

        :param a: (x, y) top-left corner, inclusive.
        :param c: (x, y) bottom-right corner, exclusive.
        :raises BoundsError: if ``c`` lies above or left of ``a``.
        """
        origin = Point.from_tuple(a)
        end = Point.from_tuple(c)
        if end.x < origin.x or end.y < origin.y:
            raise BoundsError(
                "Diagonal end (%d, %d) precedes origin (%d, %d)"
                % (end.x, end.y, origin.x, origin.y)
            )
        return cls(origin, color, end.x - origin.x, end.y - origin.y)

    def set_color(self, color: ColorLike) -> None:
        self.color = as_pixel(color)

    def draw(self, canvas: "Canvas") -> None:
        logger.debug("Drawing %r" % (self,))
        paste(
            canvas.base_layer,
            self.origin,
            self.color.astuple(),
            size=(self.width, self.height),
        )

    def resize(self, size: Sequence[int]) -> None:
        pass


class PlacedImage(Drawable):
    """
    An :py:class:`~rasm.api.image.Image` placed at its own origin.

    The embedded image keeps its layer stack until it is drawn.
    """

    def __init__(self, image: Image):
        self._image = image

    @property
    def image(self) -> Image:
        return self._image

    @property
    def origin(self) -> Point:
        return self._image.origin

    @origin.setter
    def origin(self, value: Point) -> None:
        self._image.origin = value

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self._image)

    def draw(self, canvas: "Canvas") -> None:
        logger.debug("Drawing %r" % (self,))
        layer = self._image.collapse()
        paste(canvas.base_layer, self.origin, layer.numpy())

    def resize(self, size: Sequence[int]) -> None:
        self._image.resize(size)
