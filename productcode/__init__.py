"""
Validation and normalization of UPC-A, UPC-E, EAN-13 and ISBN product codes.
"""

import logging

from productcode.barcode import (
    ProductCodeDetector,
    detect_product_code,
    expand_upce,
    suppress_upca,
    validate_ean,
    validate_isbn,
    validate_upc,
    validate_upce,
)
from productcode.errors import (
    ExpansionFailedError,
    InvalidLengthError,
    NoMatchError,
    NoParityMatchError,
    NonNumericError,
    ProductCodeError,
    SuppressionFailedError,
)
from productcode.models import DetectionResult, IsbnParts, IsbnValidation, ProductCodeType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # API
    "validate_upc",
    "validate_upce",
    "validate_ean",
    "validate_isbn",
    "expand_upce",
    "suppress_upca",
    "detect_product_code",
    "ProductCodeDetector",
    # Models
    "DetectionResult",
    "IsbnParts",
    "IsbnValidation",
    "ProductCodeType",
    # Errors
    "ProductCodeError",
    "InvalidLengthError",
    "NonNumericError",
    "ExpansionFailedError",
    "NoParityMatchError",
    "SuppressionFailedError",
    "NoMatchError",
]
