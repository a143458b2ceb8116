from __future__ import annotations

import math
from typing import List, Tuple

from ..errors import InvalidFrameCountError
from .types import RasterImage

MIN_FRAME_COUNT = 2
OPAQUE = 255


def validate_frame_count(frame_count: int) -> None:
    if frame_count < MIN_FRAME_COUNT:
        raise InvalidFrameCountError(f"Frame count must be at least {MIN_FRAME_COUNT} (got {frame_count})")


def frame_alpha(index: int, frame_count: int) -> float:
    """Return the weight of the second image for frame ``index``."""
    validate_frame_count(frame_count)
    return index / (frame_count - 1)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def shared_size(img1: RasterImage, img2: RasterImage) -> Tuple[int, int]:
    return min(img1.width, img2.width), min(img1.height, img2.height)


def blend_pair(img1: RasterImage, img2: RasterImage, alpha: float) -> RasterImage:
    """Cross-fade two images of equal size; the result is fully opaque."""
    inverse = 1 - alpha
    pixels = []
    for (r1, g1, b1, _), (r2, g2, b2, _) in zip(img1.pixels, img2.pixels):
        pixels.append(
            (
                round_half_up(r1 * inverse + r2 * alpha),
                round_half_up(g1 * inverse + g2 * alpha),
                round_half_up(b1 * inverse + b2 * alpha),
                OPAQUE,
            )
        )
    return RasterImage(img1.width, img1.height, tuple(pixels))


def blend_frames(img1: RasterImage, img2: RasterImage, frame_count: int) -> List[RasterImage]:
    """Blend ``img1`` into ``img2`` over ``frame_count`` frames.

    Both images are cropped to their shared top-left region; no resampling
    takes place.
    """
    validate_frame_count(frame_count)
    img1.validate()
    img2.validate()
    width, height = shared_size(img1, img2)
    first = img1.crop(width, height)
    second = img2.crop(width, height)
    return [blend_pair(first, second, frame_alpha(f, frame_count)) for f in range(frame_count)]
