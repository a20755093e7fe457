"""1-bit transpose for matrices whose sides are both multiples of 8."""

from __future__ import annotations

import numpy as np

from ..bits import BytesLike, check_dimensions, fit_buffer
from ..config import BIT_ORDER, BITS_PER_BYTE
from ..errors import InvalidDimensions
from ..matrix import transpose_matrix
from .base import Variant, VariantKind


def aligned_size(width: int, height: int) -> int:
    return width * (height // BITS_PER_BYTE)


def transpose_1bit_aligned(data: BytesLike, width: int, height: int) -> bytes:
    """Transpose a byte-aligned bitmap.

    No row carries padding on either side, so the whole buffer unpacks into
    one flat run of ``width * height`` bits and packs back the same way.
    Output row ``x`` holds input column ``x`` as ``height`` bits.
    """
    check_dimensions(width, height)
    if width % BITS_PER_BYTE or height % BITS_PER_BYTE:
        raise InvalidDimensions(
            f"Aligned transpose needs both sides to be multiples of 8, got {width}x{height}"
        )
    flat = fit_buffer(data, (width // BITS_PER_BYTE) * height)
    bits = np.unpackbits(flat, bitorder=BIT_ORDER).reshape(height, width)
    return np.packbits(transpose_matrix(bits), bitorder=BIT_ORDER).tobytes()


variant = Variant(
    kind=VariantKind.ALIGNED_1BIT,
    title="1-bit, both sides multiples of 8",
    element_bits=1,
    size_formula="width * height/8",
    kernel=transpose_1bit_aligned,
    size_law=aligned_size,
)
