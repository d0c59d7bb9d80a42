"""
Barcode validation for UPC-A and EAN-13 codes.
"""

from productcode.barcode.checksum import ean_check_digit, is_digits, upc_check_digit
from productcode.errors import InvalidLengthError, NonNumericError
from productcode.log import get_logger

logger = get_logger(__name__)

UPC_A_LENGTH = 12
EAN_13_LENGTH = 13


def get_upc_check_digit(code: str) -> int:
    """Calculate the UPC-A check digit of a 12-digit (or 11-digit body) code."""
    return upc_check_digit(code.strip())


def validate_upc(code: str) -> bool:
    """
    Validate a UPC-A code.

    Args:
        code: 12-digit UPC-A code

    Returns:
        True if the trailing digit matches the computed check digit

    Raises:
        InvalidLengthError: code is not 12 characters long
        NonNumericError: code contains anything but 0-9
    """
    code = code.strip()

    if len(code) != UPC_A_LENGTH:
        raise InvalidLengthError(
            f"UPC-A must be {UPC_A_LENGTH} digits, got {len(code)}: {code}", code
        )
    if not is_digits(code):
        raise NonNumericError(f"UPC-A can only contain digits: {code}", code)

    valid = upc_check_digit(code) == int(code[-1])
    logger.debug("Validated UPC-A", code=code, valid=valid)
    return valid


def get_ean_check_digit(code: str) -> int:
    """Calculate the EAN-13 check digit of a 13-digit (or 12-digit body) code."""
    return ean_check_digit(code.strip())


def validate_ean(code: str) -> bool:
    """
    Validate an EAN-13 code.

    Only exactly 13 digits are accepted; shorter codes are not padded.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid

    Raises:
        InvalidLengthError: code is not 13 characters long
        NonNumericError: code contains anything but 0-9
    """
    code = code.strip()

    if len(code) != EAN_13_LENGTH:
        raise InvalidLengthError(
            f"EAN must be {EAN_13_LENGTH} digits, got {len(code)}: {code}", code
        )
    if not is_digits(code):
        raise NonNumericError(f"EAN can only contain digits: {code}", code)

    valid = ean_check_digit(code) == int(code[-1])
    logger.debug("Validated EAN-13", code=code, valid=valid)
    return valid
