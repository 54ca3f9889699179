"""Composite implementation for layer collapse and placement."""

import logging
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from rasm.composite import blend
from rasm.errors import BoundsError

if TYPE_CHECKING:
    from rasm.api.image import Image
    from rasm.api.layers import Layer
    from rasm.api.pixel import Point

logger = logging.getLogger(__name__)


def collapse(image: "Image") -> "Layer":
    """
    Composite every layer of ``image`` into a single layer.

    Layers are applied in add order, the first layer being the backdrop. A
    single-layer image returns its only layer untouched.

    Example::

        from rasm.composite import collapse

        layer = collapse(image)
        layer.tobytes()

    :param image: :py:class:`~rasm.api.image.Image` to collapse.
    :return: :py:class:`~rasm.api.layers.Layer`
    """
    if len(image.layers) == 0:
        raise ValueError("Cannot collapse an image without layers")
    if len(image.layers) == 1:
        return image.layers[0]

    compositor = Compositor(image.width, image.height)
    for layer in image.layers:
        compositor.apply(layer)
    return compositor.finish()


def paste(
    target: "Layer",
    origin: "Point",
    values: Union[np.ndarray, tuple[int, int, int, int]],
    size: Optional[tuple[int, int]] = None,
) -> None:
    """
    Composite ``values`` over ``target`` with the top-left corner at ``origin``.

    :param target: Destination layer, modified in place.
    :param origin: Placement; ``origin.x`` is the column and ``origin.y`` the row.
    :param values: Either a ``(height, width, 4)`` array or a single RGBA color.
    :param size: (width, height) of the block, required when ``values`` is a
        single color.
    :raises BoundsError: if the block does not fit inside ``target``.
    """
    if isinstance(values, np.ndarray) and values.ndim == 3:
        height, width = values.shape[:2]
    else:
        if size is None:
            raise ValueError("size is required to paste a single color")
        width, height = size
        values = np.asarray(values, dtype=np.uint8)

    logger.debug(
        "Pasting %dx%d block at (%d, %d) onto %s"
        % (width, height, origin.x, origin.y, target)
    )
    region = target.region(origin.y, origin.x, height, width)
    blend.compose_into(region, values)


class Compositor(object):
    """Composite context for a stack of equally sized layers.

    Example::

        compositor = Compositor(width, height)
        for layer in layers:
            compositor.apply(layer)
        layer = compositor.finish()
    """

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self._data: Optional[np.ndarray] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def apply(self, layer: "Layer") -> None:
        logger.debug("Compositing %s" % layer)
        if layer.size != (self._width, self._height):
            raise BoundsError(
                "Layer size %r does not match %r"
                % (layer.size, (self._width, self._height))
            )
        if self._data is None:
            self._data = layer.numpy().copy()
            return
        blend.compose_into(self._data, layer.numpy())

    def finish(self) -> "Layer":
        from rasm.api.layers import Layer

        if self._data is None:
            raise ValueError("Nothing to composite")
        return Layer(self._data)
