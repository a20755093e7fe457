"""Conversion between byte-aligned and packed 1-bit layouts.

Transposing never changes layout on its own: to feed packed output back in as
input, align it first.
"""

from __future__ import annotations

from .bits import BytesLike, check_dimensions, read_packed, read_rows, write_packed, write_rows


def pack_rows(data: BytesLike, width: int, height: int) -> bytes:
    """Drop the per-row padding of a byte-aligned bitmap."""
    check_dimensions(width, height)
    return write_packed(read_rows(data, width, height))


def align_rows(data: BytesLike, width: int, height: int) -> bytes:
    """Pad each row of a packed bitmap out to a whole byte."""
    check_dimensions(width, height)
    return write_rows(read_packed(data, width, height))
