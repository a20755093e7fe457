"""Variant registry and selection."""

from __future__ import annotations

from typing import Dict

from ..bits import check_dimensions
from ..config import BITS_PER_BYTE, DEFAULT_ELEMENT_BITS, DEFAULT_PACKED, SUPPORTED_ELEMENT_BITS
from ..errors import UnsupportedElementWidth
from .aligned import transpose_1bit_aligned
from .aligned import variant as aligned_variant
from .base import Variant, VariantKind
from .bytewise import transpose_8bit
from .bytewise import variant as bytewise_variant
from .generic import transpose_1bit_generic
from .generic import variant as generic_variant
from .packed import transpose_1bit_packed
from .packed import variant as packed_variant

VARIANTS: Dict[VariantKind, Variant] = {
    aligned_variant.kind: aligned_variant,
    generic_variant.kind: generic_variant,
    packed_variant.kind: packed_variant,
    bytewise_variant.kind: bytewise_variant,
}


def select_kind(
    width: int,
    height: int,
    element_bits: int = DEFAULT_ELEMENT_BITS,
    packed: bool = DEFAULT_PACKED,
) -> VariantKind:
    """Pick the variant for a matrix; element width is checked first."""
    if isinstance(element_bits, bool) or element_bits not in SUPPORTED_ELEMENT_BITS:
        raise UnsupportedElementWidth(element_bits)
    check_dimensions(width, height)
    if element_bits == 8:
        return VariantKind.BYTEWISE_8BIT
    if packed:
        return VariantKind.PACKED_1BIT
    if width % BITS_PER_BYTE == 0 and height % BITS_PER_BYTE == 0:
        return VariantKind.ALIGNED_1BIT
    return VariantKind.GENERIC_1BIT


def select_variant(
    width: int,
    height: int,
    element_bits: int = DEFAULT_ELEMENT_BITS,
    packed: bool = DEFAULT_PACKED,
) -> Variant:
    return VARIANTS[select_kind(width, height, element_bits, packed)]


__all__ = [
    "Variant",
    "VariantKind",
    "VARIANTS",
    "select_kind",
    "select_variant",
    "transpose_1bit_aligned",
    "transpose_1bit_generic",
    "transpose_1bit_packed",
    "transpose_8bit",
]
