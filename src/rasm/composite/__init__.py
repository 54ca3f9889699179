"""
Composite module for layer collapse and blending.

This subpackage provides the rendering engine that the data model and the
drawables share. Everything operates on ``uint8`` RGBA numpy arrays.

Key modules:

- :py:mod:`rasm.composite.composite`: Layer collapse and block placement
- :py:mod:`rasm.composite.blend`: Source-over blending

Example usage::

    from rasm.api.image import Image
    from rasm.composite import collapse

    image = Image.new(64, 64)
    image.add_layer(overlay)
    layer = collapse(image)
"""

from rasm.composite.composite import Compositor, collapse, paste

__all__ = [
    "Compositor",
    "collapse",
    "paste",
]
