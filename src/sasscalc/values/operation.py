"""CalculationOperation: a binary arithmetic node inside a calculation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from sasscalc.errors import InvalidOperandError
from sasscalc.values.base import CalculationValue, Value, assert_calculation_value


class ArithmeticOperator(StrEnum):
    """Operators allowed between calculation operands."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDED_BY = "/"


@dataclass(frozen=True)
class CalculationOperation(CalculationValue, Value):
    """Binary operation such as ``100% - 2px``, kept unevaluated.

    Attributes:
        operator: One of +, -, *, /.
        left: Left-hand calculation-capable operand.
        right: Right-hand calculation-capable operand.
    """

    kind: ClassVar[str] = "calculation operation"

    operator: ArithmeticOperator
    left: Any
    right: Any

    def __post_init__(self) -> None:
        """Validate the operator and both operands."""
        try:
            operator = ArithmeticOperator(self.operator)
        except ValueError as e:
            raise InvalidOperandError(
                f"Invalid operator: {self.operator!r}. "
                f"Supported: {[op.value for op in ArithmeticOperator]}",
                value=self.operator,
                kind=type(self.operator).__name__,
            ) from e
        object.__setattr__(self, "operator", operator)
        assert_calculation_value(self.left, "left")
        assert_calculation_value(self.right, "right")
