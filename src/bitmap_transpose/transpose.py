"""Entry point that routes a matrix to the matching transpose variant."""

from __future__ import annotations

import logging

from .bits import BytesLike
from .config import DEFAULT_ELEMENT_BITS, DEFAULT_PACKED
from .variants import select_variant

logger = logging.getLogger(__name__)


def transpose(
    data: BytesLike,
    width: int,
    height: int,
    *,
    element_bits: int = DEFAULT_ELEMENT_BITS,
    packed: bool = DEFAULT_PACKED,
) -> bytes:
    """Transpose a row-major matrix into its column-major layout.

    Args:
        data: Row-major input. 1-bit input always uses byte-aligned rows.
        width: Elements per input row.
        height: Number of input rows.
        element_bits: 1 for bitmaps, 8 for one byte per element.
        packed: For 1-bit data, emit the output without per-row padding.

    Returns:
        bytes: A new buffer whose row ``x`` holds input column ``x``.

    Raises:
        UnsupportedElementWidth: If ``element_bits`` is neither 1 nor 8.
        InvalidDimensions: If ``width`` or ``height`` is not a positive integer.
    """
    variant = select_variant(width, height, element_bits, packed)
    logger.debug(
        "Transposing %dx%d matrix with %s variant into %d bytes",
        width,
        height,
        variant.kind.value,
        variant.output_size(width, height),
    )
    return variant.run(data, width, height)


def output_size(
    width: int,
    height: int,
    element_bits: int = DEFAULT_ELEMENT_BITS,
    packed: bool = DEFAULT_PACKED,
) -> int:
    """Return the length of the buffer ``transpose`` produces for these options."""
    return select_variant(width, height, element_bits, packed).output_size(width, height)
