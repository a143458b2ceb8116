from .blend import blend_frames, frame_alpha
from .dither import dither_grayscale, dither_image, to_grayscale
from .loader import SUPPORTED_EXTENSIONS, load_raster, raster_from_image
from .threshold import threshold_image
from .types import BitMatrix, GrayscaleBuffer, RasterImage

__all__ = [
    "BitMatrix",
    "blend_frames",
    "dither_grayscale",
    "dither_image",
    "frame_alpha",
    "GrayscaleBuffer",
    "load_raster",
    "RasterImage",
    "raster_from_image",
    "SUPPORTED_EXTENSIONS",
    "threshold_image",
    "to_grayscale",
]
