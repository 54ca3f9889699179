"""
Pixel and point primitives.

:py:class:`Pixel` is a straight (not premultiplied) RGBA color with 8 bits
per channel. :py:func:`compose` is the source-over-destination blend every
drawable uses to paint onto a canvas::

    from rasm.api.pixel import Pixel, compose

    red = Pixel(255, 0, 0, 255)
    blue = Pixel(0, 0, 255, 128)
    compose(red, blue)  # Pixel(r=127, g=0, b=128, a=255)
"""

import logging
from typing import Iterator, Sequence, Union

from attrs import define, field

from rasm.constants import DEFAULT_COLOR
from rasm.validators import range_

logger = logging.getLogger(__name__)

_channel = range_(0, 255)


def _ceil_div255(value: int) -> int:
    return (value + 254) // 255


@define(frozen=True)
class Point:
    """
    Integer pixel coordinate. ``x`` is the column and ``y`` is the row.
    """

    x: int = field(default=0, converter=int)
    y: int = field(default=0, converter=int)

    @classmethod
    def from_tuple(cls, value: Sequence[int]) -> "Point":
        return cls(value[0], value[1])

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __getitem__(self, index: int) -> int:
        return (self.x, self.y)[index]

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))


@define(frozen=True)
class Pixel:
    """
    Four independent 8-bit channels.

    Pixels are immutable values; indexing and iteration yield the channels in
    ``(r, g, b, a)`` order, and ``dst + src`` composes ``src`` over ``dst``.
    """

    r: int = field(default=DEFAULT_COLOR[0], converter=int, validator=_channel)
    g: int = field(default=DEFAULT_COLOR[1], converter=int, validator=_channel)
    b: int = field(default=DEFAULT_COLOR[2], converter=int, validator=_channel)
    a: int = field(default=DEFAULT_COLOR[3], converter=int, validator=_channel)

    @classmethod
    def from_tuple(cls, value: Sequence[int]) -> "Pixel":
        """Create a pixel from an ``(r, g, b, a)`` sequence."""
        if len(value) != 4:
            raise ValueError("Pixel requires 4 channels, got %d" % len(value))
        return cls(*(int(x) for x in value))

    def astuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def tobytes(self) -> bytes:
        return bytes(self.astuple())

    def __getitem__(self, index: int) -> int:
        return self.astuple()[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.astuple())

    def __len__(self) -> int:
        return 4

    def __add__(self, other: "Pixel") -> "Pixel":
        return compose(self, other)


ColorLike = Union[Pixel, Sequence[int]]


def as_pixel(color: ColorLike) -> Pixel:
    """Coerce an ``(r, g, b, a)`` sequence into a :py:class:`Pixel`."""
    if isinstance(color, Pixel):
        return color
    return Pixel.from_tuple(color)


def compose(dst: Pixel, src: Pixel) -> Pixel:
    """
    Composite ``src`` over ``dst``.

    Color and alpha are blended with integer ceil division by 255. A fully
    transparent source leaves ``dst`` as is, and a fully transparent
    destination takes the source verbatim.
    """
    if src.a == 0:
        return dst
    if dst.a == 0:
        return src
    alpha = src.a
    inverse = 255 - alpha
    return Pixel(
        _ceil_div255(alpha * src.r + inverse * dst.r),
        _ceil_div255(alpha * src.g + inverse * dst.g),
        _ceil_div255(alpha * src.b + inverse * dst.b),
        _ceil_div255(alpha * 255 + inverse * dst.a),
    )
