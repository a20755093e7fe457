"""Exceptions raised by the transpose engine."""


class TransposeError(Exception):
    """Base class for transpose failures."""


class UnsupportedElementWidth(TransposeError, ValueError):
    """Raised when an element width other than 1 or 8 bits is requested."""

    def __init__(self, element_bits):
        self.element_bits = element_bits
        super().__init__(
            f"Unsupported element width: {element_bits!r} bits. "
            "Only 1 and 8 are supported."
        )


class InvalidDimensions(TransposeError, ValueError):
    """Raised when matrix dimensions are unusable for the requested layout."""
