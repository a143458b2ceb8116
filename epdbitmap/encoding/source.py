from __future__ import annotations

import re
from typing import Sequence

from .packing import PackedBitmap

MEMORY_QUALIFIER = "PROGMEM"
IDENTIFIER_PREFIX = "epd_bitmap_"
FRAME_IDENTIFIER_PREFIX = IDENTIFIER_PREFIX + "dithered_blend_"
VALUES_PER_LINE = 16

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_INVALID_IDENT_RE = re.compile(r"[^a-zA-Z0-9_]")
_C_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def strip_extension(label: str) -> str:
    return _EXTENSION_RE.sub("", label)


def sanitize_identifier(label: str) -> str:
    """Build the array name for a label, e.g. ``"my logo.png"`` -> ``epd_bitmap_my_logo``."""
    return IDENTIFIER_PREFIX + _INVALID_IDENT_RE.sub("_", strip_extension(label))


def frame_identifier(index: int) -> str:
    return f"{FRAME_IDENTIFIER_PREFIX}{index}"


def format_byte_values(data: bytes) -> str:
    """Render bytes as ``0x..`` values, 16 per line, tab indented."""
    parts = []
    last = len(data) - 1
    for i, value in enumerate(data):
        parts.append(f"0x{value:02x}")
        if i < last:
            parts.append(", ")
        if (i + 1) % VALUES_PER_LINE == 0:
            parts.append("\n\t")
    return "".join(parts)


def _declaration(identifier: str, data: bytes) -> str:
    return f"const unsigned char {identifier} [] {MEMORY_QUALIFIER} = {{\n\t{format_byte_values(data)}\n}};"


def render_bitmap_source(bitmap: PackedBitmap, label: str) -> str:
    bitmap.validate()
    header = f"// '{strip_extension(label)}', {bitmap.width}x{bitmap.height}px\n"
    return header + _declaration(sanitize_identifier(label), bitmap.data)


def render_frame_source(bitmap: PackedBitmap, index: int, total: int) -> str:
    bitmap.validate()
    header = f"// Dithered blend frame {index + 1}/{total}, {bitmap.width}x{bitmap.height}px\n"
    return header + _declaration(frame_identifier(index), bitmap.data) + "\n\n"


def render_frames_source(bitmaps: Sequence[PackedBitmap]) -> str:
    """Concatenate frame blocks in the given (ascending index) order."""
    total = len(bitmaps)
    return "".join(render_frame_source(bitmap, index, total) for index, bitmap in enumerate(bitmaps))


def render_frame_table(name: str, total: int) -> str:
    """Emit a pointer table over the frame arrays plus its element count."""
    if not _C_IDENT_RE.match(name):
        raise ValueError(f"Invalid C identifier for frame table: '{name}'")
    names = [frame_identifier(index) for index in range(total)]
    body = ",\n\t".join(names)
    return (
        f"const unsigned char* {name}[] = {{\n\t{body}\n}};\n"
        f"const int {name}_count = {len(names)};\n"
    )
