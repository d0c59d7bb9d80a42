"""
ISBN-10 / ISBN-13 validation and part extraction.
"""

import re

from productcode.barcode.checksum import (
    isbn10_check_digit,
    isbn10_checksum,
    isbn13_check_digit,
    isbn13_checksum,
)
from productcode.errors import InvalidLengthError, NonNumericError
from productcode.log import get_logger
from productcode.models import IsbnParts, IsbnValidation

logger = get_logger(__name__)

ISBN_10_LENGTH = 10
ISBN_13_LENGTH = 13

# Everything except digits and the ISBN-10 'X' is punctuation (hyphens, spaces)
_NON_ISBN_CHARS = re.compile(r"[^0-9X]")


def normalize_isbn(code: str) -> str:
    """Uppercase and drop every character that is not a digit or 'X'."""
    return _NON_ISBN_CHARS.sub("", code.upper())


def _check_structure(isbn: str, raw: str) -> None:
    if len(isbn) not in (ISBN_10_LENGTH, ISBN_13_LENGTH):
        raise InvalidLengthError(
            f"ISBN must be 10 or 13 digits, got {len(isbn)}: {raw}", raw
        )
    # 'X' is only a check character, and only for ISBN-10
    body = isbn[:-1] if len(isbn) == ISBN_10_LENGTH else isbn
    if "X" in body:
        raise NonNumericError(f"'X' is only allowed as the ISBN-10 check digit: {raw}", raw)


def get_isbn_parts(isbn: str) -> IsbnParts:
    """
    Split a normalized ISBN into fixed-width parts.

    ISBN-10: group[0:2] publisher[2:6] title[6:9] check[9]
    ISBN-13: ean[0:3] group[3:5] publisher[5:9] title[9:12] check[12]
    """
    if len(isbn) == ISBN_10_LENGTH:
        return IsbnParts(
            group=isbn[0:2],
            publisher=isbn[2:6],
            title=isbn[6:9],
            check_digit=isbn[9:10],
        )
    if len(isbn) == ISBN_13_LENGTH:
        return IsbnParts(
            ean=isbn[0:3],
            group=isbn[3:5],
            publisher=isbn[5:9],
            title=isbn[9:12],
            check_digit=isbn[12:13],
        )
    raise InvalidLengthError(f"ISBN must be 10 or 13 digits, got {len(isbn)}: {isbn}", isbn)


def validate_isbn(code: str) -> IsbnValidation:
    """
    Validate an ISBN-10 or ISBN-13 code.

    Hyphens, spaces and other punctuation are ignored. A checksum failure is
    a normal negative result; only structural problems raise.

    Args:
        code: ISBN, optionally hyphenated

    Returns:
        IsbnValidation with parts set when valid

    Raises:
        InvalidLengthError: normalized code is neither 10 nor 13 long
        NonNumericError: 'X' appears anywhere but the ISBN-10 check position
    """
    isbn = normalize_isbn(code.strip())
    _check_structure(isbn, code)

    if len(isbn) == ISBN_10_LENGTH:
        valid = isbn10_checksum(isbn) % 11 == 0
    else:
        valid = isbn13_checksum(isbn) % 10 == 0

    logger.debug("Validated ISBN", code=isbn, length=len(isbn), valid=valid)

    if not valid:
        return IsbnValidation(valid=False)
    return IsbnValidation(valid=True, parts=get_isbn_parts(isbn))


def get_isbn_check_digit(code: str) -> int:
    """Computed check value of an ISBN; 10 stands for 'X'."""
    isbn = normalize_isbn(code.strip())
    _check_structure(isbn, code)

    if len(isbn) == ISBN_10_LENGTH:
        return isbn10_check_digit(isbn)
    return isbn13_check_digit(isbn)
