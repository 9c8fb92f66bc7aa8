"""Value kinds that make up calculation trees."""

from sasscalc.values.base import CalculationValue, Value, assert_calculation_value
from sasscalc.values.boolean import SassBoolean, SassNull
from sasscalc.values.calculation import (
    Calculation,
    CalculationOperator,
    calc,
    clamp,
    is_relaxed_clamp_argument,
    max,
    min,
)
from sasscalc.values.interpolation import CalculationInterpolation
from sasscalc.values.number import SassNumber
from sasscalc.values.operation import ArithmeticOperator, CalculationOperation
from sasscalc.values.string import SassString

__all__ = [
    "ArithmeticOperator",
    "Calculation",
    "CalculationInterpolation",
    "CalculationOperation",
    "CalculationOperator",
    "CalculationValue",
    "SassBoolean",
    "SassNull",
    "SassNumber",
    "SassString",
    "Value",
    "assert_calculation_value",
    "calc",
    "clamp",
    "is_relaxed_clamp_argument",
]
