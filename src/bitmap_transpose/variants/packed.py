"""1-bit transpose producing a tightly packed output."""

from __future__ import annotations

from ..bits import BytesLike, byte_count, check_dimensions, read_rows, write_packed
from ..matrix import transpose_matrix
from .base import Variant, VariantKind


def packed_size(width: int, height: int) -> int:
    return byte_count(width * height)


def transpose_1bit_packed(data: BytesLike, width: int, height: int) -> bytes:
    # Input rows stay byte-aligned; only the output drops the padding.
    check_dimensions(width, height)
    bits = read_rows(data, width, height)
    return write_packed(transpose_matrix(bits))


variant = Variant(
    kind=VariantKind.PACKED_1BIT,
    title="1-bit, output packed with no row padding",
    element_bits=1,
    size_formula="ceil(width*height/8)",
    kernel=transpose_1bit_packed,
    size_law=packed_size,
)
