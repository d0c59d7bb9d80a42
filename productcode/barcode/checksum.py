"""
Check digit algorithms for UPC, EAN and ISBN codes.

Callers are responsible for length and character checks; each function only
reads the prefix it needs.
"""

import math


def is_digits(code: str) -> bool:
    """True if code is non-empty and made only of ASCII 0-9."""
    return code.isascii() and code.isdigit()


def upc_check_digit(code: str) -> int:
    """
    Calculate the UPC-A check digit from the first 11 digits.

    Algorithm:
    1. Sum digits at odd positions (1, 3, 5, ..., 11) and multiply by 3
    2. Add digits at even positions (2, 4, ..., 10)
    3. Checksum = (10 - (sum mod 10)) mod 10
    """
    odd_sum = 0
    even_sum = 0
    for i, digit in enumerate(code[:11]):
        if i % 2 == 0:
            odd_sum += int(digit)
        else:
            even_sum += int(digit)

    total = even_sum + 3 * odd_sum
    return (10 - total % 10) % 10


def ean_check_digit(code: str) -> int:
    """
    Calculate the EAN-13 check digit from the first 12 digits.

    Same odd/even split as UPC-A with the weights swapped: odd positions
    count once, even positions three times. The digit is the distance to the
    next multiple of ten.
    """
    odd_sum = 0
    even_sum = 0
    for i, digit in enumerate(code[:12]):
        if i % 2 == 0:
            odd_sum += int(digit)
        else:
            even_sum += int(digit)

    total = 3 * even_sum + odd_sum
    return math.ceil(total / 10) * 10 - total


def isbn_char_value(char: str) -> int:
    """Numeric value of an ISBN character; 'X' is ten."""
    return 10 if char in ("X", "x") else int(char)


def isbn10_checksum(code: str) -> int:
    """
    Weighted ISBN-10 sum over all ten characters, check digit included.

    Weights run 10 down to 1. The code is valid iff the sum is divisible by 11.
    """
    return sum((10 - i) * isbn_char_value(char) for i, char in enumerate(code[:10]))


def isbn10_check_digit(code: str) -> int:
    """Check value (0-10) completing the first nine ISBN-10 characters."""
    partial = sum((10 - i) * isbn_char_value(char) for i, char in enumerate(code[:9]))
    return (11 - partial % 11) % 11


def isbn13_checksum(code: str) -> int:
    """
    Weighted ISBN-13 sum over all 13 digits, check digit included.

    Even indices weigh 1, odd indices weigh 3. Valid iff divisible by 10.
    """
    return sum(int(char) * (1 if i % 2 == 0 else 3) for i, char in enumerate(code[:13]))


def isbn13_check_digit(code: str) -> int:
    """Check digit completing the first twelve ISBN-13 digits."""
    partial = sum(int(char) * (1 if i % 2 == 0 else 3) for i, char in enumerate(code[:12]))
    return (10 - partial % 10) % 10


def check_digit_char(value: int) -> str:
    """Render a check digit value; ten becomes 'X'."""
    return "X" if value == 10 else str(value)
