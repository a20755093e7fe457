"""Row-major to column-major transposition for bitmaps and byte matrices."""

from importlib.metadata import PackageNotFoundError, version

from .errors import InvalidDimensions, TransposeError, UnsupportedElementWidth
from .layout import align_rows, pack_rows
from .transpose import output_size, transpose
from .variants import (
    VARIANTS,
    Variant,
    VariantKind,
    select_variant,
    transpose_1bit_aligned,
    transpose_1bit_generic,
    transpose_1bit_packed,
    transpose_8bit,
)

try:  # pragma: no cover - best effort during editable installs
    __version__ = version("bitmap-transpose")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "transpose",
    "output_size",
    "pack_rows",
    "align_rows",
    "select_variant",
    "Variant",
    "VariantKind",
    "VARIANTS",
    "transpose_1bit_aligned",
    "transpose_1bit_generic",
    "transpose_1bit_packed",
    "transpose_8bit",
    "TransposeError",
    "UnsupportedElementWidth",
    "InvalidDimensions",
]
