"""
Tests for check digit algorithms.
"""

from productcode.barcode.checksum import (
    check_digit_char,
    ean_check_digit,
    is_digits,
    isbn10_check_digit,
    isbn10_checksum,
    isbn13_check_digit,
    isbn13_checksum,
    upc_check_digit,
)


class TestDigitCheck:
    """Tests for the ASCII digit predicate."""

    def test_ascii_digits(self):
        """Plain 0-9 strings are digits."""
        assert is_digits("0123456789")

    def test_rejects_empty_and_letters(self):
        """Empty strings and letters are not digits."""
        assert not is_digits("")
        assert not is_digits("12a4")
        assert not is_digits("12 4")

    def test_rejects_unicode_digits(self):
        """Non-ASCII digit characters are rejected."""
        assert not is_digits("١٢٣")  # Arabic-Indic
        assert not is_digits("12²")


class TestUpcCheckDigit:
    """Tests for the UPC-A check digit."""

    def test_known_codes(self):
        """Test checksum calculation for known UPC-A codes."""
        assert upc_check_digit("03600029145") == 2
        assert upc_check_digit("01234567890") == 5
        assert upc_check_digit("74819600044") == 1

    def test_zero_residue_maps_to_zero(self):
        """A weighted sum divisible by ten yields 0, never 10."""
        # 3 * (0+2+0+0+0+9) + (1+8+0+0+8) = 50
        assert upc_check_digit("01280000089") == 0

    def test_ignores_trailing_check_digit(self):
        """Only the first 11 digits take part in the calculation."""
        assert upc_check_digit("036000291452") == upc_check_digit("036000291459")


class TestEanCheckDigit:
    """Tests for the EAN-13 check digit."""

    def test_known_codes(self):
        """Test checksum calculation for known EAN-13 codes."""
        assert ean_check_digit("400638133393") == 1
        assert ean_check_digit("590123412345") == 7
        assert ean_check_digit("001234567890") == 5

    def test_zero_residue_maps_to_zero(self):
        """A total that is already a multiple of ten yields 0."""
        # 1 + 3 * 3 = 10
        assert ean_check_digit("100000000003") == 0

    def test_upc_as_ean_keeps_check_digit(self):
        """A UPC-A prefixed with 0 is an EAN-13 with the same check digit."""
        assert ean_check_digit("0036000291452") == upc_check_digit("036000291452")


class TestIsbnCheckDigits:
    """Tests for ISBN-10 and ISBN-13 sums."""

    def test_isbn10_sum_divisible_by_eleven(self):
        """A valid ISBN-10 sums to a multiple of 11."""
        assert isbn10_checksum("0306406152") == 132
        assert isbn10_checksum("0306406152") % 11 == 0

    def test_isbn10_check_digit(self):
        """The computed check value completes the first nine characters."""
        assert isbn10_check_digit("030640615") == 2

    def test_isbn10_x_is_ten(self):
        """'X' counts as ten, in either case."""
        assert isbn10_checksum("080442957X") == 209
        assert isbn10_checksum("080442957x") == 209
        assert isbn10_check_digit("080442957") == 10

    def test_isbn13_sum_divisible_by_ten(self):
        """A valid ISBN-13 sums to a multiple of 10 including its check digit."""
        assert isbn13_checksum("9780306406157") == 100
        assert isbn13_checksum("9780306406158") % 10 != 0

    def test_isbn13_check_digit(self):
        """The computed check digit completes the first twelve digits."""
        assert isbn13_check_digit("978030640615") == 7

    def test_check_digit_char(self):
        """Ten renders as 'X', everything else as its digit."""
        assert check_digit_char(10) == "X"
        assert check_digit_char(0) == "0"
        assert check_digit_char(7) == "7"
