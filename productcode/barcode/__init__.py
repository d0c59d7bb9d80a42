"""
Product code validation, UPC-E conversion and format detection.
"""

from productcode.barcode.detector import ProductCodeDetector, detect_product_code
from productcode.barcode.isbn import get_isbn_check_digit, get_isbn_parts, validate_isbn
from productcode.barcode.upce import (
    expand_upce,
    get_parity,
    get_upce_check_digit,
    suppress_upca,
    validate_upce,
)
from productcode.barcode.validator import (
    get_ean_check_digit,
    get_upc_check_digit,
    validate_ean,
    validate_upc,
)

__all__ = [
    "ProductCodeDetector",
    "detect_product_code",
    "validate_upc",
    "validate_upce",
    "validate_ean",
    "validate_isbn",
    "expand_upce",
    "suppress_upca",
    "get_parity",
    "get_isbn_parts",
    "get_upc_check_digit",
    "get_upce_check_digit",
    "get_ean_check_digit",
    "get_isbn_check_digit",
]
