from __future__ import annotations

from .types import BitMatrix, RasterImage

THRESHOLD = 128


def luminance(r: int, g: int, b: int) -> float:
    return (r + g + b) / 3


def threshold_image(image: RasterImage) -> BitMatrix:
    """Quantize each pixel to dark (1) when its RGB average is below 128."""
    image.validate()
    bits = tuple(1 if luminance(r, g, b) < THRESHOLD else 0 for r, g, b, _ in image.pixels)
    return BitMatrix(image.width, image.height, bits)
