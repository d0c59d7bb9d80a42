"""
Product code detector: works out which format a raw code belongs to.
"""

from collections.abc import Callable
from typing import Any

from productcode.barcode.isbn import get_isbn_check_digit, validate_isbn
from productcode.barcode.upce import get_upce_check_digit, validate_upce
from productcode.barcode.validator import (
    get_ean_check_digit,
    get_upc_check_digit,
    validate_ean,
    validate_upc,
)
from productcode.errors import NoMatchError, ProductCodeError
from productcode.log import get_logger
from productcode.models import DetectionResult, IsbnValidation, ProductCodeType

logger = get_logger(__name__)


class ProductCodeDetector:
    """
    Classify a code by validating it against every supported format.

    Every format is tried independently; a structural error from one format
    only means that format did not match. When several formats validate, the
    first in PRIORITY wins. Any 13-digit code that passes EAN also passes the
    ISBN-13 checksum, so EAN has to come before ISBN.
    """

    PRIORITY = (
        ProductCodeType.UPC_A,
        ProductCodeType.UPC_E,
        ProductCodeType.EAN,
        ProductCodeType.ISBN,
    )

    CHECK_DIGITS: dict[ProductCodeType, Callable[[str], int]] = {
        ProductCodeType.UPC_A: get_upc_check_digit,
        ProductCodeType.UPC_E: get_upce_check_digit,
        ProductCodeType.EAN: get_ean_check_digit,
        ProductCodeType.ISBN: get_isbn_check_digit,
    }

    def check_code(self, code: str) -> DetectionResult:
        """
        Detect the type of a code.

        Args:
            code: Raw code string

        Returns:
            DetectionResult for the highest-priority format that validated

        Raises:
            NoMatchError: no format validated the code
        """
        code = code.strip()

        upc_a_valid = self._attempt(ProductCodeType.UPC_A, validate_upc, code)
        upc_e_valid = self._attempt(ProductCodeType.UPC_E, validate_upce, code)
        ean_valid = self._attempt(ProductCodeType.EAN, validate_ean, code)
        isbn = self._attempt(ProductCodeType.ISBN, validate_isbn, code)

        matches = {
            ProductCodeType.UPC_A: upc_a_valid,
            ProductCodeType.UPC_E: upc_e_valid,
            ProductCodeType.EAN: ean_valid,
            ProductCodeType.ISBN: isinstance(isbn, IsbnValidation) and isbn.valid,
        }

        for code_type in self.PRIORITY:
            if not matches[code_type]:
                continue

            result = DetectionResult(
                code=code,
                code_type=code_type,
                check_digit=self.CHECK_DIGITS[code_type](code),
                isbn_parts=isbn.parts if code_type == ProductCodeType.ISBN else None,
            )
            logger.debug(
                "Detected product code",
                code=code,
                code_type=code_type.value,
                check_digit=result.check_digit,
            )
            return result

        logger.debug("No product code format matched", code=code)
        raise NoMatchError(f"Code is not a valid UPC-A, UPC-E, EAN or ISBN: {code}", code)

    def _attempt(self, code_type: ProductCodeType, validator: Callable[[str], Any], code: str) -> Any:
        """Run one validator, turning its structural errors into a plain 'no'."""
        try:
            return validator(code)
        except ProductCodeError as e:
            logger.debug(
                "Format rejected code",
                code=code,
                code_type=code_type.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            return False


def detect_product_code(code: str) -> DetectionResult:
    """
    Convenience function to classify a single code.

    Args:
        code: Raw code string

    Returns:
        Detection result

    Raises:
        NoMatchError: no format validated the code
    """
    detector = ProductCodeDetector()
    return detector.check_code(code)
