"""Calculation: immutable calc()/min()/max()/clamp() expression trees.

A Calculation is only obtainable through the four named constructors, each
of which validates its operands before the node exists. Nothing is evaluated
or simplified; the operand tree is kept verbatim, in order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import InitVar, dataclass, field
from enum import StrEnum
from typing import Any, ClassVar

from sasscalc.errors import InvalidClampShapeError, InvalidOperandError, ScriptError
from sasscalc.values.base import CalculationValue, Value, assert_calculation_value
from sasscalc.values.interpolation import CalculationInterpolation
from sasscalc.values.string import SassString

logger = logging.getLogger(__name__)

_CONSTRUCTION_KEY = object()

_CLAMP_ARGUMENT_NAMES = ("min", "value", "max")


class CalculationOperator(StrEnum):
    """Calculation functions this value system can represent."""

    CALC = "calc"
    MIN = "min"
    MAX = "max"
    CLAMP = "clamp"


@dataclass(frozen=True, eq=False)
class Calculation(CalculationValue, Value):
    """An unevaluated CSS calculation.

    Use Calculation.calc(), .min(), .max() or .clamp() (also exported as
    module functions); calling the class directly raises TypeError.

    Attributes:
        operator: Which calculation function this is.
        operands: Ordered, immutable tuple of calculation-capable values.
    """

    kind: ClassVar[str] = "calculation"

    operator: CalculationOperator
    operands: tuple[Any, ...]
    _key: InitVar[object] = None
    _hash: int | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self, _key: object) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError(
                "Calculation cannot be instantiated directly; "
                "use calc(), min(), max() or clamp()"
            )

    @property
    def name(self) -> str:
        """The calculation function name, e.g. 'clamp'."""
        return self.operator.value

    @property
    def arguments(self) -> tuple[Any, ...]:
        return self.operands

    def assert_calculation(self, name: str | None = None) -> Calculation:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculation):
            return NotImplemented
        return self.operator == other.operator and self.operands == other.operands

    def __hash__(self) -> int:
        # Racing first reads store the same int.
        cached = self._hash
        if cached is None:
            cached = hash((self.operator, self.operands))
            object.__setattr__(self, "_hash", cached)
        return cached

    @classmethod
    def calc(cls, argument: Any) -> Calculation:
        """Create ``calc(argument)``.

        Raises:
            InvalidOperandError: If argument is not calculation-capable.
        """
        return _build(CalculationOperator.CALC, (argument,))

    @classmethod
    def min(cls, arguments: Iterable[Any]) -> Calculation:
        """Create ``min(arguments...)``, keeping argument order.

        Raises:
            InvalidOperandError: If arguments is empty or any element is not
                calculation-capable. The first failing element is reported.
        """
        return _build(CalculationOperator.MIN, tuple(arguments))

    @classmethod
    def max(cls, arguments: Iterable[Any]) -> Calculation:
        """Create ``max(arguments...)``, keeping argument order.

        Raises:
            InvalidOperandError: If arguments is empty or any element is not
                calculation-capable. The first failing element is reported.
        """
        return _build(CalculationOperator.MAX, tuple(arguments))

    @classmethod
    def clamp(cls, min: Any, value: Any = None, max: Any = None) -> Calculation:
        """Create ``clamp(min, value, max)`` with one, two or three arguments.

        With value or max missing, the supplied arguments must leave room for
        the rest to come from an interpolation or an unquoted string (for
        example ``clamp(#{$args})`` or ``clamp(var(--lo), 5px)``). Omitted
        arguments are left out of the operands; the rest keep the order
        min, value, max.

        Args:
            min: Lower bound, or the only argument.
            value: Preferred value.
            max: Upper bound.

        Raises:
            InvalidClampShapeError: If value is missing and min is not
                relaxed-kind, or max is missing and neither min nor value is.
            InvalidOperandError: If any supplied argument is not
                calculation-capable.
        """
        supplied = [
            (name, arg)
            for name, arg in zip(_CLAMP_ARGUMENT_NAMES, (min, value, max), strict=True)
            if name == "min" or arg is not None
        ]
        names = tuple(name for name, _ in supplied)
        operands = tuple(arg for _, arg in supplied)
        return _build(CalculationOperator.CLAMP, operands, names)


def is_relaxed_clamp_argument(value: Any) -> bool:
    """Whether value may stand in for missing clamp() arguments."""
    if isinstance(value, CalculationInterpolation):
        return True
    return isinstance(value, SassString) and not value.quoted


def _validate_operands(operands: tuple[Any, ...], names: tuple[str, ...] = ()) -> None:
    for index, operand in enumerate(operands):
        name = names[index] if index < len(names) else None
        assert_calculation_value(operand, name)


def _validate_calc(operands: tuple[Any, ...], names: tuple[str, ...]) -> None:
    _validate_operands(operands, names)


def _validate_min_max(operands: tuple[Any, ...], names: tuple[str, ...]) -> None:
    if not operands:
        raise InvalidOperandError("At least one argument must be passed.")
    _validate_operands(operands, names)


def _validate_clamp(operands: tuple[Any, ...], names: tuple[str, ...]) -> None:
    by_name = dict(zip(names, operands, strict=True))
    if "value" not in by_name and not is_relaxed_clamp_argument(by_name["min"]):
        raise InvalidClampShapeError()
    if "max" not in by_name and not any(is_relaxed_clamp_argument(arg) for arg in operands):
        raise InvalidClampShapeError()
    _validate_operands(operands, names)


_VALIDATORS: dict[
    CalculationOperator, Callable[[tuple[Any, ...], tuple[str, ...]], None]
] = {
    CalculationOperator.CALC: _validate_calc,
    CalculationOperator.MIN: _validate_min_max,
    CalculationOperator.MAX: _validate_min_max,
    CalculationOperator.CLAMP: _validate_clamp,
}


def _build(
    operator: CalculationOperator,
    operands: tuple[Any, ...],
    names: tuple[str, ...] = (),
) -> Calculation:
    try:
        _VALIDATORS[operator](operands, names)
    except ScriptError as e:
        logger.debug("Refused %s() construction: %s (%s)", operator.value, e, e.code)
        raise
    return Calculation(operator, operands, _CONSTRUCTION_KEY)


calc = Calculation.calc
min = Calculation.min
max = Calculation.max
clamp = Calculation.clamp
