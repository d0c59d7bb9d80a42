"""
Pydantic value models returned by validators and the detector.
"""

from productcode.models.detection import DetectionResult, ProductCodeType
from productcode.models.isbn import IsbnParts, IsbnValidation

__all__ = [
    # Detection
    "DetectionResult",
    "ProductCodeType",
    # ISBN
    "IsbnParts",
    "IsbnValidation",
]
