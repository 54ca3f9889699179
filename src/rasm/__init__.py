"""
rasm: manifest-driven raster image compositor.

A canvas collects rectangles and placed images and composites them, in
insertion order, into a single PNG or JPG file.

Basic usage::

    from rasm import Canvas, Image

    canvas = Canvas("png", 1080, 1080, color=(255, 255, 255, 255))
    canvas.new_rect((0, 0), (100, 50), (255, 0, 0, 255))
    canvas.add_image((10, 60), Image.open("photo.jpg")).resize((0, 400))
    canvas.save("output")  # writes output.png

Architecture:

- :py:mod:`rasm.api`: Pixel, Layer and Image data model
- :py:mod:`rasm.composite`: Blending and layer collapse
- :py:mod:`rasm.drawables`: Rectangles and placed images
- :py:mod:`rasm.canvas`: Render queue and output
- :py:mod:`rasm.manifest`: TOML manifest loading
"""

from rasm.api.image import Image
from rasm.api.pixel import Pixel, Point
from rasm.canvas import Canvas
from rasm.constants import OutputFormat
from rasm.version import __version__

__all__ = ["Canvas", "Image", "OutputFormat", "Pixel", "Point", "__version__"]
