"""
Tests for result models.
"""

import pytest
from pydantic import ValidationError

from productcode.models import DetectionResult, IsbnParts, IsbnValidation, ProductCodeType


class TestIsbnParts:
    """Tests for IsbnParts model."""

    def test_create_isbn10_parts(self):
        """ISBN-10 parts have no EAN prefix."""
        parts = IsbnParts(group="03", publisher="0640", title="615", check_digit="2")

        assert parts.ean is None
        assert parts.to_dict() == {
            "group": "03",
            "publisher": "0640",
            "title": "615",
            "check_digit": "2",
        }

    def test_frozen(self):
        """Parts cannot be modified after construction."""
        parts = IsbnParts(group="03", publisher="0640", title="615", check_digit="2")

        with pytest.raises(ValidationError):
            parts.group = "99"

    def test_rejects_unknown_fields(self):
        """Unknown fields are an error."""
        with pytest.raises(ValidationError):
            IsbnParts(group="03", publisher="0640", title="615", check_digit="2", isbn="x")


class TestIsbnValidation:
    """Tests for IsbnValidation model."""

    def test_invalid_has_no_parts(self):
        """A negative result defaults to no parts."""
        result = IsbnValidation(valid=False)

        assert result.valid is False
        assert result.parts is None


class TestDetectionResult:
    """Tests for DetectionResult model."""

    def test_create_detection(self):
        """Test creating a detection result."""
        result = DetectionResult(
            code="748196000441",
            code_type=ProductCodeType.UPC_A,
            check_digit=1,
        )

        assert result.code_type == ProductCodeType.UPC_A
        assert result.is_isbn is False

    def test_to_dict(self):
        """Serialization uses enum values and drops empty parts."""
        result = DetectionResult(
            code="748196000441",
            code_type=ProductCodeType.UPC_A,
            check_digit=1,
        )

        assert result.to_dict() == {
            "code": "748196000441",
            "code_type": "UPC-A",
            "check_digit": 1,
        }

    def test_check_digit_range(self):
        """Check digits run 0-10."""
        with pytest.raises(ValidationError):
            DetectionResult(code="x", code_type=ProductCodeType.ISBN, check_digit=11)
        with pytest.raises(ValidationError):
            DetectionResult(code="x", code_type=ProductCodeType.EAN, check_digit=-1)

    def test_code_type_from_string(self):
        """Code types accept their string values."""
        result = DetectionResult(code="0306406152", code_type="ISBN", check_digit=2)
        assert result.code_type is ProductCodeType.ISBN
