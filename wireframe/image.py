"""In-memory pixel images and colour conversion for a display visual."""

from __future__ import annotations

from dataclasses import dataclass, field

LSB_FIRST = 0
MSB_FIRST = 1


def _mask_run(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError("a colour mask must have at least one bit set")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def channel_shifts(
    red_mask: int, green_mask: int, blue_mask: int
) -> tuple[int, int, int, int, int, int]:
    """Return (shift, width) of the red, green and blue masks, flattened."""
    red = _mask_run(red_mask)
    green = _mask_run(green_mask)
    blue = _mask_run(blue_mask)
    return (*red, *green, *blue)


@dataclass(frozen=True)
class Visual:
    """A true-colour visual: its depth and channel masks."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF

    def color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value of this visual."""
        if self.depth >= 24:
            return color
        red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = (
            channel_shifts(self.red_mask, self.green_mask, self.blue_mask)
        )
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - red_bits)) << red_shift)
            + ((green >> (16 - green_bits)) << green_shift)
            + ((blue >> (16 - blue_bits)) << blue_shift)
        )


@dataclass
class Image:
    """A ZPixmap-style image whose rows are padded to 32 bits."""

    width: int
    height: int
    bits_per_pixel: int = 32
    byte_order: int = LSB_FIRST
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError("bits per pixel must be a positive multiple of 8")
        if self.byte_order not in (LSB_FIRST, MSB_FIRST):
            raise ValueError("byte order must be LSB_FIRST or MSB_FIRST")
        self.size_line = (self.width * self.bits_per_pixel + 31) // 32 * 4
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _endian(self) -> str:
        return "big" if self.byte_order == MSB_FIRST else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at pixel (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._endian)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._endian)

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``, padding included."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the image")
        start = y * self.size_line
        return bytes(self.data[start:start + self.size_line])