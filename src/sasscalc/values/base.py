"""Capability contract shared by every value kind.

Every value in the system answers the same narrowing questions
(assert_calculation, assert_calculation_value, assert_number, assert_string).
The default answer is a typed failure; value kinds that satisfy a capability
override the matching method. Calculation capability is mixed in through
CalculationValue rather than checked against a closed list of types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from sasscalc.errors import InvalidOperandError, TypeMismatchError

if TYPE_CHECKING:
    from sasscalc.values.calculation import Calculation
    from sasscalc.values.number import SassNumber
    from sasscalc.values.string import SassString


class Value:
    """Base capability contract for all values."""

    kind: ClassVar[str] = "value"

    @property
    def is_truthy(self) -> bool:
        """Whether the value counts as true in a condition."""
        return True

    def assert_calculation(self, name: str | None = None) -> Calculation:
        """Narrow to a Calculation or raise TypeMismatchError."""
        raise TypeMismatchError(
            f"{self!r} is not a calculation.",
            value=self,
            expected="calculation",
            argument_name=name,
        )

    def assert_calculation_value(self, name: str | None = None) -> CalculationValue:
        """Narrow to a calculation-capable value or raise InvalidOperandError."""
        raise InvalidOperandError(
            f"Expected {self!r} to be a calculation value, got {self.kind}.",
            value=self,
            kind=self.kind,
            argument_name=name,
        )

    def assert_number(self, name: str | None = None) -> SassNumber:
        """Narrow to a SassNumber or raise TypeMismatchError."""
        raise TypeMismatchError(
            f"{self!r} is not a number.",
            value=self,
            expected="number",
            argument_name=name,
        )

    def assert_string(self, name: str | None = None) -> SassString:
        """Narrow to a SassString or raise TypeMismatchError."""
        raise TypeMismatchError(
            f"{self!r} is not a string.",
            value=self,
            expected="string",
            argument_name=name,
        )


class CalculationValue:
    """Mixin for value kinds that may appear as a calculation operand.

    Must precede Value in the bases so its assert_calculation_value wins.
    """

    def assert_calculation_value(self, name: str | None = None) -> CalculationValue:
        return self


def assert_calculation_value(value: Any, name: str | None = None) -> CalculationValue:
    """Check that any object is a calculation-capable value.

    Objects outside the value system (plain ints, strings, None) are
    rejected with InvalidOperandError naming their Python type.

    Args:
        value: Candidate operand.
        name: Optional argument name for the error message.

    Returns:
        The value itself, narrowed.

    Raises:
        InvalidOperandError: If the value is not calculation-capable.
    """
    if isinstance(value, Value):
        return value.assert_calculation_value(name)
    kind = type(value).__name__
    raise InvalidOperandError(
        f"Expected {value!r} to be a calculation value, got {kind}.",
        value=value,
        kind=kind,
        argument_name=name,
    )
