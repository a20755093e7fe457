"""Stride arithmetic and MSB-first bit (un)packing.

Every 1-bit buffer handled by the engine follows one addressing rule: element
``i`` of a byte-aligned run lives in byte ``i // 8`` at bit ``7 - i % 8``.
Two layouts are in use:

* byte-aligned rows: each row starts on a fresh byte, stride ``ceil(width/8)``
* packed: all ``width * height`` bits back to back, no per-row padding

Buffers that are shorter than their layout requires are zero-filled, longer
ones are cut to size. The same rule applies to 8-bit matrices.
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from .config import BIT_ORDER, BITS_PER_BYTE
from .errors import InvalidDimensions

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, np.ndarray]


def byte_count(bits: int) -> int:
    """Return the number of bytes needed to hold ``bits`` bits."""
    return -(-bits // BITS_PER_BYTE)


def row_stride(width: int) -> int:
    """Bytes spanned by one byte-aligned row of ``width`` 1-bit elements."""
    return byte_count(width)


def check_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimensions(f"{name} must be positive, got {value}")


def as_byte_array(data: BytesLike) -> np.ndarray:
    """View ``data`` as a flat ``uint8`` array."""
    if isinstance(data, np.ndarray):
        return np.ascontiguousarray(data, dtype=np.uint8).reshape(-1)
    return np.frombuffer(data, dtype=np.uint8)


def fit_buffer(data: BytesLike, size: int) -> np.ndarray:
    """Return ``data`` as exactly ``size`` bytes, zero-filling missing ones."""
    buf = as_byte_array(data)
    if buf.size == size:
        return buf
    if buf.size < size:
        logger.debug("Input holds %d of %d bytes; reading the rest as zero", buf.size, size)
    else:
        logger.debug("Input holds %d bytes; ignoring %d past the expected %d", buf.size, buf.size - size, size)
    fitted = np.zeros(size, dtype=np.uint8)
    keep = min(size, buf.size)
    fitted[:keep] = buf[:keep]
    return fitted


def read_rows(data: BytesLike, width: int, height: int) -> np.ndarray:
    """Unpack byte-aligned rows into a ``(height, width)`` matrix of 0/1."""
    stride = row_stride(width)
    rows = fit_buffer(data, stride * height).reshape(height, stride)
    return np.unpackbits(rows, axis=1, count=width, bitorder=BIT_ORDER)


def read_packed(data: BytesLike, width: int, height: int) -> np.ndarray:
    """Unpack a packed buffer into a ``(height, width)`` matrix of 0/1."""
    total = width * height
    flat = fit_buffer(data, byte_count(total))
    return np.unpackbits(flat, count=total, bitorder=BIT_ORDER).reshape(height, width)


def write_rows(bits: np.ndarray) -> bytes:
    """Pack a 0/1 matrix into byte-aligned rows."""
    return np.packbits(bits, axis=1, bitorder=BIT_ORDER).tobytes()


def write_packed(bits: np.ndarray) -> bytes:
    """Pack a 0/1 matrix into one contiguous run of bits."""
    return np.packbits(np.ravel(bits), bitorder=BIT_ORDER).tobytes()
