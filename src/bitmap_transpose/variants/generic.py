"""1-bit transpose for arbitrary dimensions with byte-aligned rows."""

from __future__ import annotations

from ..bits import BytesLike, byte_count, check_dimensions, read_rows, write_rows
from ..matrix import transpose_matrix
from .base import Variant, VariantKind


def generic_size(width: int, height: int) -> int:
    return width * byte_count(height)


def transpose_1bit_generic(data: BytesLike, width: int, height: int) -> bytes:
    """Transpose a bitmap whose rows are each padded to a whole byte.

    Input rows span ``ceil(width/8)`` bytes, output rows (one per input
    column) span ``ceil(height/8)`` bytes. A final row cut short of its pad
    bytes reads as zero.
    """
    check_dimensions(width, height)
    bits = read_rows(data, width, height)
    return write_rows(transpose_matrix(bits))


variant = Variant(
    kind=VariantKind.GENERIC_1BIT,
    title="1-bit, byte-aligned rows of any length",
    element_bits=1,
    size_formula="width * ceil(height/8)",
    kernel=transpose_1bit_generic,
    size_law=generic_size,
)
