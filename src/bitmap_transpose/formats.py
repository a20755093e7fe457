"""Renderers for transposed buffers."""

from __future__ import annotations

from enum import Enum

from .bits import BytesLike, as_byte_array, check_dimensions, read_rows
from .config import C_ARRAY_BYTES_PER_LINE, DEFAULT_C_ARRAY_NAME, PREVIEW_OFF, PREVIEW_ON


class OutputFormat(str, Enum):
    RAW = "raw"
    HEX = "hex"
    C = "c"


def to_hex(data: BytesLike) -> str:
    return " ".join(f"0x{b:02x}" for b in as_byte_array(data).tolist())


def to_c_array(
    data: BytesLike,
    name: str = DEFAULT_C_ARRAY_NAME,
    per_line: int = C_ARRAY_BYTES_PER_LINE,
) -> str:
    """Emit ``data`` as a C ``uint8_t`` array definition.

    Example for two bytes::

        const uint8_t BITMAP[2] = {
            0x80, 0x01,
        };
    """
    if not name.isidentifier():
        raise ValueError(f"Not a valid C identifier: {name!r}")
    if per_line <= 0:
        raise ValueError("per_line must be positive")
    values = as_byte_array(data).tolist()
    if not values:
        raise ValueError("Cannot emit a zero-length C array")
    lines = [f"const uint8_t {name}[{len(values)}] = {{"]
    for start in range(0, len(values), per_line):
        chunk = values[start:start + per_line]
        lines.append("    " + " ".join(f"0x{b:02x}," for b in chunk))
    lines.append("};")
    return "\n".join(lines) + "\n"


def render_bitmap(
    data: BytesLike,
    width: int,
    height: int,
    on: str = PREVIEW_ON,
    off: str = PREVIEW_OFF,
) -> str:
    """Draw a byte-aligned 1-bit bitmap as text, one line per row."""
    check_dimensions(width, height)
    bits = read_rows(data, width, height)
    return "\n".join("".join(on if bit else off for bit in row) for row in bits.tolist())
