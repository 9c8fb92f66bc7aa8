"""SassString: quoted or unquoted string values."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from sasscalc.errors import InvalidOperandError
from sasscalc.values.base import CalculationValue, Value


class SassString(CalculationValue, Value, BaseModel):
    """String value.

    Only unquoted strings are legal calculation operands: an unquoted string
    such as ``var(--gap)`` is raw CSS text that the browser resolves, while a
    quoted string is a literal that can never be a number.
    """

    kind: ClassVar[str] = "string"

    text: str = Field(..., description="String contents without quotes")
    quoted: bool = Field(default=True, description="Whether the string is quoted")

    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, text: str, quoted: bool = True) -> None:
        super().__init__(text=text, quoted=quoted)

    def assert_calculation_value(self, name: str | None = None) -> SassString:
        if self.quoted:
            raise InvalidOperandError(
                f"Expected {self!r} to be an unquoted string.",
                value=self,
                kind="quoted string",
                argument_name=name,
            )
        return self

    def assert_string(self, name: str | None = None) -> SassString:
        return self
