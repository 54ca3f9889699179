import logging

import numpy as np
import pytest

from rasm.api.image import Image
from rasm.api.layers import Layer
from rasm.api.pixel import Pixel, Point
from rasm.composite import Compositor, collapse, paste
from rasm.errors import BoundsError

from ..utils import BLUE, HALF_BLUE, RED, TRANSPARENT, gradient, solid

logger = logging.getLogger(__name__)


def test_collapse_single_layer_identity() -> None:
    image = gradient(4, 4)
    assert collapse(image) is image[0]


def test_collapse_does_not_modify_layers() -> None:
    image = solid(3, 3, RED)
    image.add_layer(Layer.new(3, 3, HALF_BLUE))
    bottom = image[0].copy()
    layer = collapse(image)
    assert image[0] == bottom
    assert len(image) == 2
    assert layer[0][0] == Pixel(127, 0, 128, 255)


def test_collapse_empty() -> None:
    with pytest.raises(ValueError):
        collapse(Image(2, 2))


def test_compositor_size_mismatch() -> None:
    compositor = Compositor(2, 2)
    with pytest.raises(BoundsError):
        compositor.apply(Layer.new(3, 2))


def test_compositor_three_layers() -> None:
    compositor = Compositor(1, 1)
    compositor.apply(Layer.new(1, 1, TRANSPARENT))
    compositor.apply(Layer.new(1, 1, HALF_BLUE))
    compositor.apply(Layer.new(1, 1, RED))
    assert compositor.finish()[0][0] == Pixel(*RED)


def test_paste_color() -> None:
    layer = Layer.new(4, 4, TRANSPARENT)
    paste(layer, Point(1, 2), BLUE, size=(3, 2))
    data = layer.numpy()
    assert data[2:4, 1:4].tolist() == [[list(BLUE)] * 3] * 2
    assert not data[:2].any()
    assert not data[:, 0].any()


def test_paste_array() -> None:
    layer = Layer.new(5, 5, RED)
    source = gradient(2, 3).numpy()
    paste(layer, Point(3, 2), source)
    np.testing.assert_array_equal(layer.numpy()[2:5, 3:5], source)


@pytest.mark.parametrize("origin, size", [((3, 0), (2, 1)), ((0, 4), (1, 2))])
def test_paste_out_of_bounds(origin, size) -> None:
    layer = Layer.new(4, 5, RED)
    with pytest.raises(BoundsError):
        paste(layer, Point(*origin), BLUE, size=size)
    assert layer == Layer.new(4, 5, RED)


def test_paste_color_requires_size() -> None:
    with pytest.raises(ValueError):
        paste(Layer.new(2, 2), Point(), BLUE)
