"""
ISBN decomposition models.
"""

from pydantic import Field

from productcode.models.base import ValueModel


class IsbnParts(ValueModel):
    """
    Fixed-width split of a validated ISBN.

    Real ISBNs use variable-width registrant ranges; these slices are the
    simplified fixed positions (group 2, publisher 4, title 3).
    """

    ean: str | None = Field(None, description="Bookland prefix, ISBN-13 only")
    group: str = Field(..., description="Registration group")
    publisher: str = Field(..., description="Registrant/publisher")
    title: str = Field(..., description="Publication element")
    check_digit: str = Field(..., description="Check character, 'X' for ten")


class IsbnValidation(ValueModel):
    """Outcome of validating an ISBN; parts are set only when valid."""

    valid: bool
    parts: IsbnParts | None = None
