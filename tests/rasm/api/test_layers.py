import logging

import numpy as np
import pytest

from rasm.api.layers import Layer, Row
from rasm.api.pixel import Pixel
from rasm.errors import BoundsError

from ..utils import BLUE, HALF_BLUE, RED, TRANSPARENT

logger = logging.getLogger(__name__)


@pytest.fixture
def layer() -> Layer:
    return Layer.new(4, 3, RED)


def test_layer_new(layer: Layer) -> None:
    assert layer.size == (4, 3)
    assert len(layer) == 3
    assert layer.numpy().shape == (3, 4, 4)
    assert layer.numpy().dtype == np.uint8
    assert all(pixel == Pixel(*RED) for row in layer for pixel in row)


def test_layer_default_color() -> None:
    assert Layer.new(1, 1)[0][0] == Pixel(255, 255, 255, 255)


def test_layer_frombytes_row_major() -> None:
    data = bytes(range(2 * 3 * 4))
    layer = Layer.frombytes(2, 3, data)
    assert layer.size == (2, 3)
    assert layer[0][1] == Pixel(4, 5, 6, 7)
    assert layer[2][0] == Pixel(16, 17, 18, 19)
    assert layer.tobytes() == data


def test_layer_frombytes_short() -> None:
    with pytest.raises(ValueError):
        Layer.frombytes(2, 2, b"\x00" * 15)


def test_layer_invalid_shape() -> None:
    with pytest.raises(ValueError):
        Layer(np.zeros((2, 2, 3), dtype=np.uint8))


def test_row_view(layer: Layer) -> None:
    row = layer[1]
    assert isinstance(row, Row)
    assert row.index == 1
    assert len(row) == 4
    row[2] = BLUE
    assert layer[1][2] == Pixel(*BLUE)
    assert layer.numpy()[1, 2].tolist() == list(BLUE)
    assert row.tobytes() == layer.numpy()[1].tobytes()


def test_row_compose(layer: Layer) -> None:
    layer[0].compose(0, HALF_BLUE)
    assert layer[0][0] == Pixel(127, 0, 128, 255)


@pytest.mark.parametrize("row, column", [(3, 0), (-1, 0), (0, 4), (0, -1)])
def test_layer_bounds(layer: Layer, row: int, column: int) -> None:
    with pytest.raises(BoundsError):
        layer[row][column] = BLUE
    with pytest.raises(IndexError):
        layer[row][column]


def test_layer_fill(layer: Layer) -> None:
    layer.fill(TRANSPARENT)
    assert not layer.numpy().any()
    layer.fill_row(1, BLUE)
    layer.fill_column(3, RED)
    assert layer[1][0] == Pixel(*BLUE)
    assert layer[1][3] == Pixel(*RED)
    assert layer[0][3] == Pixel(*RED)
    assert layer[0][0] == Pixel(*TRANSPARENT)
    with pytest.raises(BoundsError):
        layer.fill_row(3, BLUE)
    with pytest.raises(BoundsError):
        layer.fill_column(4, BLUE)


def test_layer_region(layer: Layer) -> None:
    region = layer.region(1, 2, 2, 2)
    assert region.shape == (2, 2, 4)
    region[...] = BLUE
    assert layer[2][3] == Pixel(*BLUE)
    assert layer[0][3] == Pixel(*RED)


@pytest.mark.parametrize(
    "top, left, height, width",
    [(2, 0, 2, 1), (0, 3, 1, 2), (-1, 0, 1, 1), (0, -1, 1, 1), (0, 0, -1, 1)],
)
def test_layer_region_bounds(layer: Layer, top, left, height, width) -> None:
    with pytest.raises(BoundsError):
        layer.region(top, left, height, width)


def test_layer_equality(layer: Layer) -> None:
    other = layer.copy()
    assert other == layer
    other[0][0] = BLUE
    assert other != layer
