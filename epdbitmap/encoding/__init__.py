from .packing import PackedBitmap, bytes_per_row, pack_bits, pack_row, unpack_bits
from .source import (
    MEMORY_QUALIFIER,
    format_byte_values,
    frame_identifier,
    render_bitmap_source,
    render_frame_source,
    render_frame_table,
    render_frames_source,
    sanitize_identifier,
    strip_extension,
)

__all__ = [
    "bytes_per_row",
    "format_byte_values",
    "frame_identifier",
    "MEMORY_QUALIFIER",
    "pack_bits",
    "pack_row",
    "PackedBitmap",
    "render_bitmap_source",
    "render_frame_source",
    "render_frame_table",
    "render_frames_source",
    "sanitize_identifier",
    "strip_extension",
    "unpack_bits",
]
