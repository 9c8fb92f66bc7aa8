"""Boolean and null values.

Neither is legal inside a calculation; both fall back to the failing
narrowing methods of Value.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from sasscalc.values.base import Value


class SassBoolean(Value, BaseModel):
    """Boolean value."""

    kind: ClassVar[str] = "boolean"

    value: bool = Field(..., description="Boolean value")

    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, value: bool) -> None:
        super().__init__(value=value)

    @property
    def is_truthy(self) -> bool:
        return self.value


class SassNull(Value, BaseModel):
    """The null value."""

    kind: ClassVar[str] = "null"

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def is_truthy(self) -> bool:
        return False
