"""
Error taxonomy for product code validation.

Structural problems (wrong length, wrong alphabet) are raised so callers can
tell malformed input apart from a well-formed code whose check digit is
wrong. Checksum mismatches are never errors; validators return False.
"""


class ProductCodeError(ValueError):
    """Base class for all product code errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code


class InvalidLengthError(ProductCodeError):
    """Code length is outside the set accepted by the format."""


class NonNumericError(ProductCodeError):
    """Code contains characters outside the format's alphabet."""


class ExpansionFailedError(ProductCodeError):
    """UPC-E code cannot be expanded to UPC-A."""


class NoParityMatchError(ProductCodeError):
    """Even/odd pattern of a UPC-E code is not in the parity table."""

    def __init__(self, message: str, code: str | None = None, pattern: str | None = None):
        super().__init__(message, code)
        self.pattern = pattern


class SuppressionFailedError(ProductCodeError):
    """UPC-A code matches none of the zero-suppression conditions."""


class NoMatchError(ProductCodeError):
    """Code did not validate as any supported format."""
