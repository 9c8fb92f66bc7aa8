"""sasscalc: immutable Sass/CSS calculation values.

This package provides:
- Calculation: calc(), min(), max() and clamp() expression trees with
  construction-time validation and structural equality/hashing
- Value kinds usable as operands: SassNumber, SassString,
  CalculationInterpolation, CalculationOperation
- Typed errors for invalid operands, clamp() shapes and type narrowing
"""

from sasscalc.config import LoggingConfig, configure_logging, load_logging_config
from sasscalc.errors import (
    ConfigError,
    InvalidClampShapeError,
    InvalidOperandError,
    ScriptError,
    TypeMismatchError,
)
from sasscalc.values import (
    ArithmeticOperator,
    Calculation,
    CalculationInterpolation,
    CalculationOperation,
    CalculationOperator,
    CalculationValue,
    SassBoolean,
    SassNull,
    SassNumber,
    SassString,
    Value,
    calc,
    clamp,
    max,
    min,
)

__version__ = "0.1.0"

__all__ = [
    "ArithmeticOperator",
    "Calculation",
    "CalculationInterpolation",
    "CalculationOperation",
    "CalculationOperator",
    "CalculationValue",
    "ConfigError",
    "InvalidClampShapeError",
    "InvalidOperandError",
    "LoggingConfig",
    "SassBoolean",
    "SassNull",
    "SassNumber",
    "SassString",
    "ScriptError",
    "TypeMismatchError",
    "Value",
    "calc",
    "clamp",
    "configure_logging",
    "load_logging_config",
]
