"""CalculationInterpolation: a deferred text substitution inside a calculation."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from sasscalc.values.base import CalculationValue, Value


class CalculationInterpolation(CalculationValue, Value, BaseModel):
    """Placeholder for interpolated text (``#{...}``) not yet resolved.

    The text may expand to several comma-separated arguments once
    substituted, which is why clamp() accepts it in place of missing
    arguments.
    """

    kind: ClassVar[str] = "calculation interpolation"

    value: str = Field(..., description="Interpolated text")

    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, value: str) -> None:
        super().__init__(value=value)
