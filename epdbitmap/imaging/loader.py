from __future__ import annotations

import os
from typing import Set

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import DecodeFailureError, MissingInputError
from .types import RasterImage

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"}


def raster_from_image(img: Image.Image) -> RasterImage:
    """Convert a decoded Pillow image into RGBA pixel data."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    width, height = img.size
    data = img.tobytes()
    pixels = tuple(tuple(data[i : i + 4]) for i in range(0, len(data), 4))
    raster = RasterImage(width, height, pixels)
    raster.validate()
    return raster


def load_raster(path: str) -> RasterImage:
    _validate_input_path(path)
    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            img.load()
            return raster_from_image(img)
    except (UnidentifiedImageError, OSError) as exc:
        raise DecodeFailureError(f"Could not decode {path}: {exc}") from exc


def _validate_input_path(path: str) -> None:
    if not path:
        raise MissingInputError("Missing image path")
    if not os.path.isfile(path):
        raise MissingInputError(f"File not found: {path}")
    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
