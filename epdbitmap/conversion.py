from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass
from typing import List, Optional

from .encoding import PackedBitmap, pack_bits, render_bitmap_source, render_frames_source
from .errors import MissingInputError
from .imaging import RasterImage, blend_frames, dither_image, frame_alpha, threshold_image
from .imaging.blend import validate_frame_count


@dataclass(frozen=True)
class OutputArtifact:
    text: str


@dataclass(frozen=True)
class Frame:
    index: int
    alpha: float
    bitmap: PackedBitmap


@dataclass(frozen=True)
class DitherBlendResult:
    artifact: OutputArtifact
    frames: List[Frame]

    @property
    def bitmaps(self) -> List[PackedBitmap]:
        """Packed frames in ascending index order, for preview renderers."""
        return [frame.bitmap for frame in self.frames]


def convert_single(image: Optional[RasterImage], label: str) -> OutputArtifact:
    """Threshold one image and render it as a byte array declaration."""
    _require_images(image)
    bitmap = pack_bits(threshold_image(image))
    return OutputArtifact(render_bitmap_source(bitmap, label))


def convert_dither_blend(
    image1: Optional[RasterImage],
    image2: Optional[RasterImage],
    frame_count: int,
    executor: Optional[Executor] = None,
) -> DitherBlendResult:
    """Cross-fade two images over ``frame_count`` dithered frames.

    Frames are independent of each other; when ``executor`` is given they
    are dithered and packed on it. The artifact always lists frames in
    ascending index order, and nothing is returned unless every frame
    succeeded.
    """
    _require_images(image1, image2)
    validate_frame_count(frame_count)
    blended = blend_frames(image1, image2, frame_count)
    if executor is None:
        bitmaps = [_dither_and_pack(image) for image in blended]
    else:
        bitmaps = list(executor.map(_dither_and_pack, blended))
    frames = [
        Frame(index, frame_alpha(index, frame_count), bitmap) for index, bitmap in enumerate(bitmaps)
    ]
    artifact = OutputArtifact(render_frames_source(bitmaps))
    return DitherBlendResult(artifact, frames)


def _dither_and_pack(image: RasterImage) -> PackedBitmap:
    return pack_bits(dither_image(image))


def _require_images(*images: Optional[RasterImage]) -> None:
    if any(image is None for image in images):
        if len(images) > 1:
            raise MissingInputError("Two images are required for a dithered blend")
        raise MissingInputError("An image is required")
