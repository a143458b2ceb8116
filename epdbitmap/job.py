from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .conversion import OutputArtifact, convert_dither_blend, convert_single
from .displays import DisplayRegistry, check_fits
from .encoding import PackedBitmap, render_frame_table
from .errors import MissingInputError
from .imaging import load_raster

DEFAULT_FRAME_COUNT = 10
DEFAULT_PREVIEW_SCALE = 1


@dataclass
class ConversionSettings:
    frame_count: int = DEFAULT_FRAME_COUNT
    label: Optional[str] = None
    frame_table: Optional[str] = None
    display: Optional[str] = None
    preview_scale: int = DEFAULT_PREVIEW_SCALE


@dataclass(frozen=True)
class JobOutput:
    artifact: OutputArtifact
    bitmaps: List[PackedBitmap]


class BitmapJobBuilder:
    def __init__(
        self,
        settings: Optional[ConversionSettings] = None,
        registry: Optional[DisplayRegistry] = None,
    ) -> None:
        self.settings = settings or ConversionSettings()
        self._registry = registry

    def build_from_files(self, paths: Sequence[str]) -> JobOutput:
        """Convert one image (threshold) or two images (dithered blend)."""
        if not paths:
            raise MissingInputError("Missing image path")
        if len(paths) > 2:
            raise ValueError("At most two images can be converted at once")
        if len(paths) == 1:
            return self._build_single(paths[0])
        return self._build_blend(paths[0], paths[1])

    def _build_single(self, path: str) -> JobOutput:
        if self.settings.frame_table:
            raise ValueError("A frame table needs two images to blend")
        image = load_raster(path)
        self._check_display(image.width, image.height)
        label = self.settings.label or os.path.basename(path)
        return JobOutput(convert_single(image, label), [])

    def _build_blend(self, path1: str, path2: str) -> JobOutput:
        image1 = load_raster(path1)
        image2 = load_raster(path2)
        self._check_display(min(image1.width, image2.width), min(image1.height, image2.height))
        result = convert_dither_blend(image1, image2, self.settings.frame_count)
        artifact = result.artifact
        if self.settings.frame_table:
            table = render_frame_table(self.settings.frame_table, len(result.frames))
            artifact = OutputArtifact(artifact.text + table)
        return JobOutput(artifact, result.bitmaps)

    def _check_display(self, width: int, height: int) -> None:
        if not self.settings.display:
            return
        if self._registry is None:
            self._registry = DisplayRegistry.load()
        profile = self._registry.require(self.settings.display)
        check_fits(profile, width, height)
