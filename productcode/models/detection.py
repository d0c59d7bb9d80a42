"""
Detection result model for product code classification.
"""

from enum import Enum

from pydantic import Field

from productcode.models.base import ValueModel
from productcode.models.isbn import IsbnParts


class ProductCodeType(str, Enum):
    """Supported product code formats, in detection priority order."""

    UPC_A = "UPC-A"
    UPC_E = "UPC-E"
    EAN = "EAN"
    ISBN = "ISBN"


class DetectionResult(ValueModel):
    """Classification of a raw code by the detector."""

    code: str = Field(..., description="The input code, whitespace-trimmed")
    code_type: ProductCodeType = Field(..., description="First format that validated")
    check_digit: int = Field(..., ge=0, le=10, description="Recomputed check digit, 10 for ISBN 'X'")
    isbn_parts: IsbnParts | None = Field(None, description="Set only when code_type is ISBN")

    @property
    def is_isbn(self) -> bool:
        """Check if the code was classified as an ISBN."""
        return self.code_type == ProductCodeType.ISBN
