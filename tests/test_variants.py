import math

import pytest

from bitmap_transpose import (
    VARIANTS,
    InvalidDimensions,
    UnsupportedElementWidth,
    VariantKind,
    select_variant,
    transpose_1bit_aligned,
    transpose_1bit_generic,
    transpose_1bit_packed,
    transpose_8bit,
)
from bitmap_transpose.variants import select_kind


@pytest.mark.parametrize(
    "width,height,element_bits,packed,kind",
    [
        (8, 8, 1, False, VariantKind.ALIGNED_1BIT),
        (128, 64, 1, False, VariantKind.ALIGNED_1BIT),
        (8, 8, 1, True, VariantKind.PACKED_1BIT),
        (10, 3, 1, True, VariantKind.PACKED_1BIT),
        (10, 8, 1, False, VariantKind.GENERIC_1BIT),
        (8, 10, 1, False, VariantKind.GENERIC_1BIT),
        (32, 140, 1, False, VariantKind.GENERIC_1BIT),
        (3, 3, 8, False, VariantKind.BYTEWISE_8BIT),
        (3, 3, 8, True, VariantKind.BYTEWISE_8BIT),
    ],
)
def test_selection_policy(width, height, element_bits, packed, kind):
    assert select_kind(width, height, element_bits, packed) is kind
    assert select_variant(width, height, element_bits, packed) is VARIANTS[kind]


def test_select_rejects_unknown_width():
    with pytest.raises(UnsupportedElementWidth):
        select_variant(8, 8, element_bits=4)


def test_registry_covers_every_kind():
    assert set(VARIANTS) == set(VariantKind)
    for kind, variant in VARIANTS.items():
        assert variant.kind is kind
        assert variant.element_bits in (1, 8)


@pytest.mark.parametrize(
    "kind,width,height,expected",
    [
        (VariantKind.ALIGNED_1BIT, 16, 24, 16 * 3),
        (VariantKind.GENERIC_1BIT, 10, 3, 10 * 1),
        (VariantKind.GENERIC_1BIT, 3, 10, 3 * 2),
        (VariantKind.PACKED_1BIT, 10, 3, 4),
        (VariantKind.PACKED_1BIT, 3, 3, 2),
        (VariantKind.BYTEWISE_8BIT, 7, 5, 35),
    ],
)
def test_size_laws(kind, width, height, expected):
    variant = VARIANTS[kind]
    assert variant.output_size(width, height) == expected
    assert len(variant.run(b"", width, height)) == expected


def test_aligned_requires_multiples_of_8():
    with pytest.raises(InvalidDimensions):
        transpose_1bit_aligned(b"\x00" * 4, 10, 8)
    with pytest.raises(InvalidDimensions):
        transpose_1bit_aligned(b"\x00" * 4, 8, 4)


def test_aligned_and_generic_agree_on_aligned_dimensions():
    data = bytes(range(64))
    assert transpose_1bit_aligned(data, 16, 32) == transpose_1bit_generic(data, 16, 32)


def test_aligned_first_column():
    # Only the leftmost pixel of every row is lit.
    data = b"\x80\x00" * 8
    out = transpose_1bit_aligned(data, 16, 8)
    assert out == b"\xff" + b"\x00" * 15


def test_generic_row_padding():
    # 3 wide, 2 tall: rows "##." and "..#"
    out = transpose_1bit_generic(bytes([0xC0, 0x20]), 3, 2)
    assert out == bytes([0x80, 0x80, 0x40])


def test_packed_has_no_row_padding():
    # Same bitmap as above; output bits "10 10 01" run together.
    out = transpose_1bit_packed(bytes([0xC0, 0x20]), 3, 2)
    assert out == bytes([0b10100100])


def test_packed_cursor_advances_over_unset_bits():
    width, height = 9, 1
    data = bytes([0x00, 0x80])  # only x = 8 is lit
    out = transpose_1bit_packed(data, width, height)
    assert len(out) == math.ceil(width * height / 8)
    assert out == bytes([0x00, 0x80])


def test_8bit_column_order():
    data = bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12])
    assert transpose_8bit(data, 4, 3) == bytes([1, 5, 9, 2, 6, 10, 3, 7, 11, 4, 8, 12])


@pytest.mark.parametrize(
    "kernel", [transpose_1bit_aligned, transpose_1bit_generic, transpose_1bit_packed, transpose_8bit]
)
def test_kernels_reject_non_positive_dimensions(kernel):
    with pytest.raises(InvalidDimensions):
        kernel(b"\x00" * 8, 0, 8)
