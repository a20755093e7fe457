"""Shared variant definition infrastructure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..bits import BytesLike

Kernel = Callable[[BytesLike, int, int], bytes]
SizeLaw = Callable[[int, int], int]


class VariantKind(str, Enum):
    ALIGNED_1BIT = "1bit-aligned"
    GENERIC_1BIT = "1bit-generic"
    PACKED_1BIT = "1bit-packed"
    BYTEWISE_8BIT = "8bit"


@dataclass(frozen=True)
class Variant:
    kind: VariantKind
    title: str
    element_bits: int
    size_formula: str
    kernel: Kernel
    size_law: SizeLaw

    def output_size(self, width: int, height: int) -> int:
        return self.size_law(width, height)

    def run(self, data: BytesLike, width: int, height: int) -> bytes:
        return self.kernel(data, width, height)
