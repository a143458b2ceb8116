from __future__ import annotations

from .threshold import THRESHOLD, luminance
from .types import BitMatrix, GrayscaleBuffer, RasterImage


def to_grayscale(image: RasterImage) -> GrayscaleBuffer:
    image.validate()
    values = [luminance(r, g, b) for r, g, b, _ in image.pixels]
    return GrayscaleBuffer(image.width, image.height, values)


def dither_grayscale(buffer: GrayscaleBuffer) -> BitMatrix:
    """Floyd-Steinberg error diffusion over a grayscale buffer.

    Pixels are visited row by row, left to right. The quantization error of
    each pixel is spread to its unvisited neighbours (7/16 right, 3/16
    bottom-left, 5/16 bottom, 1/16 bottom-right), dropping the share of any
    neighbour outside the buffer. Accumulated values are never clamped.
    The diffusion runs on a private copy; ``buffer`` is left untouched.
    """
    buffer.validate()
    width = buffer.width
    height = buffer.height
    gray = list(buffer.values)
    bits = [0] * len(gray)
    for y in range(height):
        has_below = y + 1 < height
        for x in range(width):
            idx = y * width + x
            old = gray[idx]
            new_val = 0 if old < THRESHOLD else 255
            bits[idx] = 1 if new_val == 0 else 0
            err = old - new_val
            has_right = x + 1 < width
            if has_right:
                gray[idx + 1] += err * 7 / 16
            if has_below:
                if x > 0:
                    gray[idx + width - 1] += err * 3 / 16
                gray[idx + width] += err * 5 / 16
                if has_right:
                    gray[idx + width + 1] += err * 1 / 16
    return BitMatrix(width, height, tuple(bits))


def dither_image(image: RasterImage) -> BitMatrix:
    return dither_grayscale(to_grayscale(image))
