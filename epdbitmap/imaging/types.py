from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..errors import EmptyImageError

Pixel = Tuple[int, int, int, int]


def _validate_size(width: int, height: int, length: int) -> None:
    if width <= 0 or height <= 0:
        raise EmptyImageError(f"Image must not be empty (got {width}x{height})")
    if length != width * height:
        raise ValueError(f"Expected {width * height} pixels, got {length}")


@dataclass(frozen=True)
class RasterImage:
    """Row-major RGBA pixels as produced by the decoder."""

    width: int
    height: int
    pixels: Tuple[Pixel, ...]

    def validate(self) -> None:
        """Reject empty images and mismatched pixel counts."""
        _validate_size(self.width, self.height, len(self.pixels))

    def pixel(self, x: int, y: int) -> Pixel:
        return self.pixels[y * self.width + x]

    def crop(self, width: int, height: int) -> "RasterImage":
        """Return the top-left ``width`` x ``height`` region."""
        if width == self.width and height == self.height:
            return self
        rows = []
        for y in range(height):
            start = y * self.width
            rows.extend(self.pixels[start : start + width])
        return RasterImage(width, height, tuple(rows))


@dataclass
class GrayscaleBuffer:
    """Per-pixel luminance; values may leave 0..255 while dithering."""

    width: int
    height: int
    values: List[float]

    def validate(self) -> None:
        _validate_size(self.width, self.height, len(self.values))


@dataclass(frozen=True)
class BitMatrix:
    """Row-major 0/1 pixels, 1 meaning dark."""

    width: int
    height: int
    bits: Tuple[int, ...]

    def validate(self) -> None:
        _validate_size(self.width, self.height, len(self.bits))

    def row(self, y: int) -> Sequence[int]:
        return self.bits[y * self.width : (y + 1) * self.width]
