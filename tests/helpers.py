from __future__ import annotations

from typing import Sequence, Tuple

from epdbitmap.imaging import RasterImage

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def solid(width: int, height: int, rgb: Tuple[int, int, int], alpha: int = 255) -> RasterImage:
    return RasterImage(width, height, tuple([(rgb[0], rgb[1], rgb[2], alpha)] * (width * height)))


def from_pixels(width: int, height: int, pixels: Sequence[Tuple[int, int, int, int]]) -> RasterImage:
    return RasterImage(width, height, tuple(pixels))
