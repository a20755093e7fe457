"""8-bit transpose, one byte per element."""

from __future__ import annotations

from ..bits import BytesLike, check_dimensions, fit_buffer
from ..matrix import transpose_matrix
from .base import Variant, VariantKind


def bytewise_size(width: int, height: int) -> int:
    return width * height


def transpose_8bit(data: BytesLike, width: int, height: int) -> bytes:
    """Return ``out`` with ``out[x*height + y] == data[y*width + x]``."""
    check_dimensions(width, height)
    matrix = fit_buffer(data, width * height).reshape(height, width)
    return transpose_matrix(matrix).tobytes()


variant = Variant(
    kind=VariantKind.BYTEWISE_8BIT,
    title="8-bit, one byte per element",
    element_bits=8,
    size_formula="width * height",
    kernel=transpose_8bit,
    size_law=bytewise_size,
)
