"""SassNumber: a dimensioned number that may appear inside calculations."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from sasscalc.values.base import CalculationValue, Value

_UNIT_RE = re.compile(r"^(%|[A-Za-z]+)$")


class SassNumber(CalculationValue, Value, BaseModel):
    """Number with an optional unit (e.g. 5px, 50%, 1.5).

    The value is held as Decimal so that equality and hashing are exact.
    No arithmetic or unit conversion is performed.
    """

    kind: ClassVar[str] = "number"

    value: Decimal = Field(..., description="Numeric value as Decimal")
    unit: str | None = Field(
        default=None,
        description="Unit token (e.g. 'px', 'em', '%'), None when unitless",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, value: object, unit: str | None = None) -> None:
        super().__init__(value=value, unit=unit)

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: object) -> Decimal:
        """Coerce value to Decimal."""
        if isinstance(v, bool):
            raise ValueError("Cannot convert bool to Decimal")
        if isinstance(v, Decimal):
            result = v
        elif isinstance(v, (int, float, str)):
            try:
                result = Decimal(str(v))
            except InvalidOperation as e:
                raise ValueError(f"Cannot convert '{v}' to Decimal") from e
        else:
            raise ValueError(f"Cannot convert {type(v).__name__} to Decimal")
        if not result.is_finite():
            raise ValueError(f"Number must be finite, got {result}")
        return result

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, v: str | None) -> str | None:
        """Reject empty or malformed unit tokens."""
        if v is not None and not _UNIT_RE.match(v):
            raise ValueError(f"Invalid unit: '{v}'")
        return v

    @property
    def has_unit(self) -> bool:
        return self.unit is not None

    def assert_number(self, name: str | None = None) -> SassNumber:
        return self
