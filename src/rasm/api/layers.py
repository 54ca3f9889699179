"""
Row and Layer containers.

A :py:class:`Layer` owns a ``(height, width, 4)`` ``uint8`` array. Every
accessor is bounds-checked and raises :py:class:`~rasm.errors.BoundsError`
instead of wrapping around or clipping the way plain numpy indexing would.
"""

import logging
from typing import Iterator, Optional

import numpy as np

from rasm.api.pixel import ColorLike, Pixel, as_pixel
from rasm.composite import blend
from rasm.constants import CHANNELS
from rasm.errors import BoundsError

logger = logging.getLogger(__name__)


def _check_index(index: int, size: int, what: str) -> int:
    if not isinstance(index, (int, np.integer)):
        raise TypeError("%s index must be an integer, got %r" % (what, index))
    if index < 0 or index >= size:
        raise BoundsError("%s %d out of range [0, %d)" % (what, index, size))
    return int(index)


class Row:
    """
    One row of a :py:class:`Layer`.

    Rows are views: assigning a pixel writes through to the layer.
    """

    def __init__(self, data: np.ndarray, index: int = 0):
        self._data = data
        self._index = index

    @property
    def index(self) -> int:
        """Row number within its layer."""
        return self._index

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, column: int) -> Pixel:
        column = _check_index(column, len(self), "column")
        return Pixel.from_tuple(self._data[column].tolist())

    def __setitem__(self, column: int, color: ColorLike) -> None:
        column = _check_index(column, len(self), "column")
        self._data[column] = as_pixel(color).astuple()

    def __iter__(self) -> Iterator[Pixel]:
        for value in self._data.tolist():
            yield Pixel.from_tuple(value)

    def __repr__(self) -> str:
        return "%s(index=%d, width=%d)" % (
            self.__class__.__name__,
            self._index,
            len(self),
        )

    def compose(self, column: int, color: ColorLike) -> None:
        """Composite ``color`` over the pixel at ``column``."""
        column = _check_index(column, len(self), "column")
        self._data[column] = blend.compose(
            self._data[column], np.array(as_pixel(color).astuple(), np.uint8)
        )

    def tobytes(self) -> bytes:
        return self._data.tobytes()


class Layer:
    """
    Height by width grid of pixels; one compositing plane.

    Example::

        from rasm.api.layers import Layer

        layer = Layer.new(4, 2, (255, 0, 0, 255))
        layer[1][3]            # Pixel(r=255, g=0, b=0, a=255)
        layer[1][3] = (0, 0, 0, 255)
        layer.tobytes()        # 32 bytes, row-major RGBA8
    """

    def __init__(self, data: np.ndarray):
        if data.ndim != 3 or data.shape[2] != CHANNELS:
            raise ValueError(
                "Layer data must have shape (height, width, 4), got %r"
                % (data.shape,)
            )
        self._data = np.ascontiguousarray(data, dtype=np.uint8)

    @classmethod
    def new(
        cls, width: int, height: int, color: Optional[ColorLike] = None
    ) -> "Layer":
        """
        Create a layer filled with ``color``.

        :param width: Width in pixels.
        :param height: Height in pixels.
        :param color: Fill color, opaque white by default.
        """
        if width < 0 or height < 0:
            raise ValueError("Invalid layer size (%d, %d)" % (width, height))
        pixel = as_pixel(color) if color is not None else Pixel()
        data = np.empty((height, width, CHANNELS), dtype=np.uint8)
        data[...] = pixel.astuple()
        return cls(data)

    @classmethod
    def frombytes(cls, width: int, height: int, data: bytes) -> "Layer":
        """
        Create a layer from a row-major RGBA8 buffer.

        Trailing bytes that do not fill a complete row are ignored.
        """
        row_size = width * CHANNELS
        if width <= 0 or len(data) < row_size * height:
            raise ValueError(
                "Buffer of %d bytes is too small for %dx%d RGBA"
                % (len(data), width, height)
            )
        array = np.frombuffer(data, dtype=np.uint8, count=row_size * height)
        return cls(array.reshape((height, width, CHANNELS)).copy())

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def numpy(self) -> np.ndarray:
        """
        Get the underlying ``(height, width, 4)`` array.

        The array is shared, writes modify the layer.
        """
        return self._data

    def tobytes(self) -> bytes:
        """Row-major RGBA8 buffer."""
        return self._data.tobytes()

    def copy(self) -> "Layer":
        return self.__class__(self._data.copy())

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, row: int) -> Row:
        row = _check_index(row, self.height, "row")
        return Row(self._data[row], row)

    def __iter__(self) -> Iterator[Row]:
        for index in range(self.height):
            yield Row(self._data[index], index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "%s(width=%d, height=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
        )

    def fill(self, color: ColorLike) -> None:
        """Overwrite every pixel with ``color``."""
        self._data[...] = as_pixel(color).astuple()

    def fill_row(self, row: int, color: ColorLike) -> None:
        """Overwrite one row with ``color``."""
        row = _check_index(row, self.height, "row")
        self._data[row, :] = as_pixel(color).astuple()

    def fill_column(self, column: int, color: ColorLike) -> None:
        """Overwrite one column with ``color``."""
        column = _check_index(column, self.width, "column")
        self._data[:, column] = as_pixel(color).astuple()

    def region(self, top: int, left: int, height: int, width: int) -> np.ndarray:
        """
        Return a writable view of the ``height`` by ``width`` block whose
        top-left corner is at (``top``, ``left``).

        :raises BoundsError: if any part of the block lies outside the layer.
        """
        if height < 0 or width < 0:
            raise BoundsError("Negative extent (%d, %d)" % (width, height))
        if top < 0 or left < 0:
            raise BoundsError("Negative origin (%d, %d)" % (left, top))
        if top + height > self.height:
            raise BoundsError(
                "row %d out of range [0, %d)" % (top + height - 1, self.height)
            )
        if left + width > self.width:
            raise BoundsError(
                "column %d out of range [0, %d)" % (left + width - 1, self.width)
            )
        return self._data[top : top + height, left : left + width]
