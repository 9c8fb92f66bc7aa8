"""Error taxonomy for the sasscalc value system.

Every failure is raised synchronously at the point of violation and carries a
stable machine-readable code so callers (script-error surfaces, compiler
hosts) can map it to a user-facing diagnostic:

- invalid_operand: value is not legal inside a calculation
- invalid_clamp_shape: clamp() arity/kind rule violated
- type_mismatch: value narrowed to a kind it is not
"""

from __future__ import annotations

from typing import Any


class ScriptError(Exception):
    """Base error for value-system violations.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message without the argument prefix.
        argument_name: Name of the offending argument, if known.
    """

    code = "script_error"

    def __init__(self, message: str, argument_name: str | None = None) -> None:
        self.message = message
        self.argument_name = argument_name
        if argument_name:
            super().__init__(f"${argument_name}: {message}")
        else:
            super().__init__(message)


class InvalidOperandError(ScriptError):
    """Raised when a value is not legal as an operand of a calculation."""

    code = "invalid_operand"

    def __init__(
        self,
        message: str,
        value: Any = None,
        kind: str | None = None,
        argument_name: str | None = None,
    ) -> None:
        self.value = value
        self.kind = kind
        super().__init__(message, argument_name)


class InvalidClampShapeError(ScriptError):
    """Raised when clamp() is called with too few relaxed-kind arguments."""

    code = "invalid_clamp_shape"

    def __init__(
        self,
        message: str = (
            "Argument must be an unquoted string literal or a calculation "
            "interpolation placeholder."
        ),
        argument_name: str | None = None,
    ) -> None:
        super().__init__(message, argument_name)


class TypeMismatchError(ScriptError):
    """Raised when a value is asserted to be a kind it is not."""

    code = "type_mismatch"

    def __init__(
        self,
        message: str,
        value: Any = None,
        expected: str | None = None,
        argument_name: str | None = None,
    ) -> None:
        self.value = value
        self.expected = expected
        super().__init__(message, argument_name)


class ConfigError(Exception):
    """Raised when environment configuration is missing or invalid."""
