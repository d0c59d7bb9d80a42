"""
Common base model for immutable value types.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """Base model for results handed back to callers. Instances are frozen."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a JSON-compatible dict, dropping unset optionals."""
        return self.model_dump(mode="json", exclude_none=True)
