"""Constants and defaults shared by the transpose engine and the CLI."""

# =============================================================================
# ELEMENT WIDTHS
# =============================================================================

# Bits per matrix element the engine knows how to transpose
SUPPORTED_ELEMENT_BITS = (1, 8)

# Element width used when the caller does not ask for one
DEFAULT_ELEMENT_BITS = 1

# 1-bit output is byte-aligned per row unless packing is requested
DEFAULT_PACKED = False

# =============================================================================
# BIT ADDRESSING
# =============================================================================

BITS_PER_BYTE = 8

# Element 0 of a byte is its most-significant bit (bit 7). Display
# controllers depend on this ordering, so it is never configurable.
BIT_ORDER = "big"

# =============================================================================
# OUTPUT FORMATS
# =============================================================================

# Bytes per line when emitting a C array
C_ARRAY_BYTES_PER_LINE = 16

# Identifier used for emitted C arrays when none is given
DEFAULT_C_ARRAY_NAME = "BITMAP"

# Characters for lit and unlit pixels in ASCII previews
PREVIEW_ON = "#"
PREVIEW_OFF = "."
