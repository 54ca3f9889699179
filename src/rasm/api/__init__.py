"""
Pixel and image data model.

Key modules:

- :py:mod:`rasm.api.pixel`: Pixel, Point and scalar compositing
- :py:mod:`rasm.api.layers`: Bounds-checked Row and Layer containers
- :py:mod:`rasm.api.image`: Layer stacks with collapse and resize
- :py:mod:`rasm.api.pil_io`: PIL/Pillow decode, encode and resample

Example usage::

    from rasm.api.image import Image
    from rasm.api.pixel import Pixel

    image = Image.new(2, 2, Pixel(0, 0, 0, 0))
    image[0][1][1] = Pixel(255, 0, 0, 255)
    image.tobytes()
"""
