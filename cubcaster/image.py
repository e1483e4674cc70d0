"""In-memory 32-bit pixel images and colour conversion for shallow visuals."""

from __future__ import annotations

from collections.abc import Sequence

_BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = _BITS_PER_PIXEL // 8
_MASK32 = 0xFFFFFFFF


class Image:
    """A width x height ZPixmap-style image, 32 bits per pixel, little-endian.

    ``data`` holds the raw bytes, one row of ``size_line`` bytes after another.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = _BITS_PER_PIXEL
        self.size_line = width * _BYTES_PER_PIXEL
        self.endian = 0
        self.data = bytearray(self.size_line * height)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` as an unsigned 32-bit value at (x, y)."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (color & _MASK32).to_bytes(
            _BYTES_PER_PIXEL, "little"
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], "little")

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        pattern = (color & _MASK32).to_bytes(_BYTES_PER_PIXEL, "little")
        self.data[:] = pattern * (self.width * self.height)


def good_color(color: int, depth: int, decrgb: Sequence[int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth.

    ``decrgb`` holds six numbers: shift and width of the red, green and blue
    masks. Visuals of 24 bits or more take the colour unchanged.
    """
    if depth >= 24:
        return color
    if len(decrgb) != 6:
        raise ValueError("decrgb must hold six values")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = decrgb
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )