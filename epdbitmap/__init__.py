from .conversion import DitherBlendResult, Frame, OutputArtifact, convert_dither_blend, convert_single
from .encoding import PackedBitmap, pack_bits, unpack_bits
from .errors import (
    BitmapError,
    DecodeFailureError,
    EmptyImageError,
    InvalidFrameCountError,
    MissingInputError,
)
from .imaging import BitMatrix, GrayscaleBuffer, RasterImage, load_raster
from .preview import PreviewSession

__version__ = "0.1.0"

__all__ = [
    "BitMatrix",
    "BitmapError",
    "convert_dither_blend",
    "convert_single",
    "DecodeFailureError",
    "DitherBlendResult",
    "EmptyImageError",
    "Frame",
    "GrayscaleBuffer",
    "InvalidFrameCountError",
    "load_raster",
    "MissingInputError",
    "OutputArtifact",
    "pack_bits",
    "PackedBitmap",
    "PreviewSession",
    "RasterImage",
    "unpack_bits",
]
