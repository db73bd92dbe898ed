"""In-memory 32-bit pixel buffers and their double buffering."""

import sys
from array import array

from PIL import Image

COLOR_MASK = 0xFFFFFFFF
_TYPECODE = "I" if array("I").itemsize == 4 else "L"


class Canvas:
    """A ``width`` x ``height`` grid of 0xAARRGGBB pixel values."""

    def __init__(self, width, height, fill=0):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array(_TYPECODE, [fill & COLOR_MASK]) * (width * height)

    def _offset(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def put_pixel(self, x, y, color):
        """Store ``color`` (truncated to 32 bits) at ``(x, y)``."""
        self._pixels[self._offset(x, y)] = color & COLOR_MASK

    def get_pixel(self, x, y):
        """Return the colour stored at ``(x, y)``."""
        return self._pixels[self._offset(x, y)]

    def to_image(self):
        """Return the canvas as an RGB image, ignoring the alpha byte."""
        data = array(_TYPECODE, self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return Image.frombytes(
            "RGB", (self.width, self.height), data.tobytes(), "raw", "BGRX"
        )

    def save(self, path):
        """Write the canvas to ``path``; the format follows the extension."""
        self.to_image().save(path)


class DoubleBuffer:
    """Two canvases: ``back`` is drawn into while ``front`` is shown."""

    def __init__(self, width, height):
        self.back = Canvas(width, height)
        self.front = Canvas(width, height)

    @property
    def width(self):
        return self.front.width

    @property
    def height(self):
        return self.front.height

    def swap(self):
        """Exchange the drawing and displayed canvases."""
        self.back, self.front = self.front, self.back