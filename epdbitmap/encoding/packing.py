from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..errors import EmptyImageError
from ..imaging.types import BitMatrix


def bytes_per_row(width: int) -> int:
    return (width + 7) // 8


@dataclass(frozen=True)
class PackedBitmap:
    """1-bit image packed MSB-first, each row padded to a whole byte."""

    width: int
    height: int
    data: bytes

    @property
    def bytes_per_row(self) -> int:
        return bytes_per_row(self.width)

    def validate(self) -> None:
        """Validate dimensions against the packed length."""
        if self.width <= 0 or self.height <= 0:
            raise EmptyImageError(f"Bitmap must not be empty (got {self.width}x{self.height})")
        expected = self.bytes_per_row * self.height
        if len(self.data) != expected:
            raise ValueError(f"Expected {expected} bytes, got {len(self.data)}")

    def bit(self, x: int, y: int) -> int:
        value = self.data[y * self.bytes_per_row + (x >> 3)]
        return (value >> (7 - (x & 7))) & 1


def pack_row(row: Sequence[int]) -> bytes:
    """Pack one row of 0/1 pixels into bytes, MSB first, zero padded."""
    out = bytearray()
    for i in range(0, len(row), 8):
        value = 0
        for bit, pix in enumerate(row[i : i + 8]):
            if pix:
                value |= 0x80 >> bit
        out.append(value)
    return bytes(out)


def pack_bits(matrix: BitMatrix) -> PackedBitmap:
    matrix.validate()
    out = bytearray()
    for y in range(matrix.height):
        out += pack_row(matrix.row(y))
    return PackedBitmap(matrix.width, matrix.height, bytes(out))


def unpack_bits(packed: PackedBitmap) -> BitMatrix:
    """Recover the bit matrix a packed bitmap was built from."""
    packed.validate()
    bits: List[int] = []
    for y in range(packed.height):
        for x in range(packed.width):
            bits.append(packed.bit(x, y))
    return BitMatrix(packed.width, packed.height, tuple(bits))
