"""
UPC-E codec: expansion to UPC-A, zero suppression back to UPC-E, validation.

UPC-E carries six significant digits. Which of them belong to the
manufacturer number and which to the product number is decided by a
selector digit:

    selector 0-2   d1 d2 s  0 0 0 0 d3 d4 d5
    selector 3     d1 d2 d3 0 0 0 0 0 d4 d5
    selector 4     d1 d2 d3 d4 0 0 0 0 0 d5
    selector 5-9   d1 d2 d3 d4 d5 0 0 0 0 s

The ten digits above form the UPC-A body between its leading digit and its
check digit.
"""

from types import MappingProxyType

from productcode.barcode.checksum import is_digits, upc_check_digit
from productcode.errors import (
    ExpansionFailedError,
    InvalidLengthError,
    NoParityMatchError,
    NonNumericError,
    SuppressionFailedError,
)
from productcode.log import get_logger

logger = get_logger(__name__)

UPC_E_LENGTHS = (6, 7, 8)
UPC_A_LENGTH = 12

# check digit -> {even/odd pattern of the six digits: parity bit}
PARITY_PATTERNS = MappingProxyType(
    {
        0: MappingProxyType({"EEEOOO": 0, "OOOEEE": 1}),
        1: MappingProxyType({"EEOEOO": 0, "OOEOEE": 1}),
        2: MappingProxyType({"EEOOEO": 0, "OOEEOE": 1}),
        3: MappingProxyType({"EEOOOE": 0, "OOEEEO": 1}),
        4: MappingProxyType({"EOEEOO": 0, "OEOOEE": 1}),
        5: MappingProxyType({"EOOEEO": 0, "OEEOOE": 1}),
        6: MappingProxyType({"EOOOEE": 0, "OEEEOO": 1}),
        7: MappingProxyType({"EOEOEO": 0, "OEOEOE": 1}),
        8: MappingProxyType({"EOEOOE": 0, "OEOEEO": 1}),
        9: MappingProxyType({"EOOEOE": 0, "OEEOEO": 1}),
    }
)

# pattern -> (check digit, parity bit)
_PATTERN_LOOKUP = MappingProxyType(
    {
        pattern: (check_digit, parity)
        for check_digit, patterns in PARITY_PATTERNS.items()
        for pattern, parity in patterns.items()
    }
)


def parity_pattern(digits: str) -> str:
    """Even/odd pattern of the first six digits, e.g. '654321' -> 'EOEOEO'."""
    return "".join("E" if int(digit) % 2 == 0 else "O" for digit in digits[:6])


def get_parity(digits: str) -> tuple[int, int]:
    """
    Resolve the UPC-E check digit and parity bit from six digits.

    Returns:
        Tuple of (check_digit, parity_bit)

    Raises:
        NoParityMatchError: pattern is not in the parity table
    """
    pattern = parity_pattern(digits)
    match = _PATTERN_LOOKUP.get(pattern)
    if match is None:
        raise NoParityMatchError(
            f"No parity entry for pattern {pattern}: {digits}", digits, pattern=pattern
        )
    return match


def _expand_body(digits: str, selector: int) -> str:
    """Ten-digit UPC-A body for six UPC-E digits and a selector digit."""
    if selector in (0, 1, 2):
        return f"{digits[0:2]}{selector}0000{digits[2:5]}"
    if selector == 3:
        return f"{digits[0:3]}00000{digits[3:5]}"
    if selector == 4:
        return f"{digits[0:4]}00000{digits[4]}"
    return f"{digits[0:5]}0000{selector}"


def _expand_with_indicator(digits: str, indicator: int) -> str:
    check_digit, parity = get_parity(digits)
    return f"{parity}{_expand_body(digits, indicator)}{check_digit}"


def _expand_with_number_system(code: str) -> str:
    # number system + six digits + UPC-E check digit; the sixth digit selects
    number_system, digits = code[0], code[1:7]
    body = number_system + _expand_body(digits, int(digits[5]))
    return body + str(upc_check_digit(body))


def expand_upce(code: str, indicator: str | None = None) -> str:
    """
    Expand a UPC-E code into its 12-digit UPC-A form.

    - 6 digits: the six significant digits; ``indicator`` must name the
      selector digit, the code is then expanded like ``indicator + code``.
    - 7 digits: indicator digit followed by the six significant digits. The
      leading UPC-A digit and the check digit come from the parity table.
    - 8 digits: number system, six significant digits, check digit. The
      UPC-A check digit is recomputed from the expanded body.

    Args:
        code: UPC-E code
        indicator: Selector digit for bare 6-digit codes

    Returns:
        12-digit UPC-A code

    Raises:
        NonNumericError: code or indicator contains anything but 0-9
        ExpansionFailedError: length is not 6, 7 or 8, or a 6-digit code
            came without an indicator
        NoParityMatchError: 6/7-digit code whose pattern is not in the table
    """
    code = code.strip()

    if not is_digits(code):
        raise NonNumericError(f"UPC-E can only contain digits: {code}", code)

    length = len(code)
    if length not in UPC_E_LENGTHS:
        raise ExpansionFailedError(
            f"UPC-E must be 6, 7 or 8 digits, got {length}: {code}", code
        )

    if indicator is not None and length != 6:
        raise ExpansionFailedError(
            f"Indicator digit only applies to 6-digit UPC-E: {code}", code
        )

    if length == 6:
        if indicator is None:
            raise ExpansionFailedError(
                f"6-digit UPC-E needs an explicit indicator digit: {code}", code
            )
        if len(indicator) != 1 or not is_digits(indicator):
            raise NonNumericError(f"Indicator must be a single digit: {indicator!r}", code)
        return _expand_with_indicator(code, int(indicator))

    if length == 7:
        return _expand_with_indicator(code[1:], int(code[0]))

    return _expand_with_number_system(code)


def _suppress_condition_a(code: str, digits: list[int]) -> str | None:
    # 023456000073 -> 02345673
    if digits[10] >= 5 and digits[5] != 0 and not any(digits[6:10]):
        return code[0:6] + code[10] + code[11]
    return None


def _suppress_condition_b(code: str, digits: list[int]) -> str | None:
    # 023450000017 -> 02345147
    if digits[4] != 0 and not any(digits[5:10]):
        return code[0:5] + code[10] + "4" + code[11]
    return None


def _suppress_condition_c(code: str, digits: list[int]) -> str | None:
    # 063200009716 -> 06397126
    if digits[3] <= 2 and not any(digits[4:8]):
        return code[0:3] + code[8:11] + code[3] + code[11]
    return None


def _suppress_condition_d(code: str, digits: list[int]) -> str | None:
    # 086700000939 -> 08679339
    if digits[3] >= 3 and not any(digits[4:9]):
        return code[0:4] + code[9:11] + "3" + code[11]
    return None


_SUPPRESSION_CONDITIONS = (
    _suppress_condition_a,
    _suppress_condition_b,
    _suppress_condition_c,
    _suppress_condition_d,
)


def suppress_upca(code: str) -> str:
    """
    Compress a 12-digit UPC-A code to its 8-digit UPC-E form.

    Conditions are tried in order A, B, C, D; they are mutually exclusive.

    Raises:
        InvalidLengthError: code is not 12 characters long
        NonNumericError: code contains anything but 0-9
        SuppressionFailedError: code has no zero run UPC-E can drop
    """
    code = code.strip()

    if len(code) != UPC_A_LENGTH:
        raise InvalidLengthError(
            f"UPC-A must be {UPC_A_LENGTH} digits, got {len(code)}: {code}", code
        )
    if not is_digits(code):
        raise NonNumericError(f"UPC-A can only contain digits: {code}", code)

    digits = [int(digit) for digit in code]
    for condition in _SUPPRESSION_CONDITIONS:
        upce = condition(code, digits)
        if upce is not None:
            logger.debug("Suppressed UPC-A", code=code, upce=upce, condition=condition.__name__)
            return upce

    raise SuppressionFailedError(f"UPC-A cannot be zero-suppressed: {code}", code)


def get_upce_check_digit(code: str) -> int:
    """UPC-A check digit of the expanded form of a UPC-E code."""
    return upc_check_digit(expand_upce(code))


def validate_upce(code: str) -> bool:
    """
    Validate a UPC-E code through its expanded UPC-A form.

    A code that cannot be expanded is reported as invalid, not raised.

    Raises:
        NonNumericError: code contains anything but 0-9
    """
    code = code.strip()

    if not is_digits(code):
        raise NonNumericError(f"UPC-E can only contain digits: {code}", code)

    try:
        expanded = expand_upce(code)
    except (ExpansionFailedError, NoParityMatchError) as e:
        logger.debug("UPC-E expansion failed", code=code, error=str(e))
        return False

    check_digit = upc_check_digit(expanded)
    # 8-digit codes carry their own check digit; expansion recomputed it
    trailing = code[-1] if len(code) == 8 else expanded[-1]
    valid = check_digit == int(trailing)
    logger.debug("Validated UPC-E", code=code, expanded=expanded, valid=valid)
    return valid
