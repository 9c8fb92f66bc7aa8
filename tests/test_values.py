"""Tests for the primitive value kinds used as calculation operands.

Tests verify:
- SassNumber coerces to Decimal and validates units
- Only unquoted strings are calculation values
- Narrowing helpers succeed for the matching kind only
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from sasscalc.errors import InvalidOperandError, TypeMismatchError
from sasscalc.values import (
    CalculationInterpolation,
    SassBoolean,
    SassNull,
    SassNumber,
    SassString,
    assert_calculation_value,
)


class TestSassNumber:
    """Tests for SassNumber."""

    @pytest.mark.parametrize("raw", [5, "5", 5.0, Decimal("5")])
    def test_coerces_to_decimal(self, raw: object) -> None:
        """int, str, float and Decimal inputs become equal Decimals."""
        number = SassNumber(raw, "px")
        assert isinstance(number.value, Decimal)
        assert number == SassNumber(Decimal("5"), "px")

    def test_float_keeps_decimal_text(self) -> None:
        """Floats go through str() so 0.1 stays 0.1."""
        assert SassNumber(0.1).value == Decimal("0.1")

    def test_unitless(self) -> None:
        """Unit defaults to None."""
        number = SassNumber(1.5)
        assert number.unit is None
        assert not number.has_unit

    @pytest.mark.parametrize("unit", ["px", "em", "%", "Q", "vmin"])
    def test_valid_units(self, unit: str) -> None:
        """Letter tokens and % are accepted."""
        assert SassNumber(1, unit).unit == unit

    @pytest.mark.parametrize("unit", ["", "5px", "p x", "px%"])
    def test_invalid_units_rejected(self, unit: str) -> None:
        """Malformed unit tokens are refused."""
        with pytest.raises(ValidationError):
            SassNumber(1, unit)

    @pytest.mark.parametrize("raw", [True, "abc", "NaN", "Infinity", None, [1]])
    def test_invalid_values_rejected(self, raw: object) -> None:
        """Non-numeric and non-finite values are refused."""
        with pytest.raises(ValidationError):
            SassNumber(raw)

    def test_units_distinguish(self) -> None:
        """Same value with different units is unequal."""
        assert SassNumber(1, "px") != SassNumber(1, "em")
        assert SassNumber(1, "px") != SassNumber(1)

    def test_narrowing(self, five_px: SassNumber) -> None:
        """A number narrows to number and calculation value only."""
        assert five_px.assert_number() is five_px
        assert five_px.assert_calculation_value() is five_px
        with pytest.raises(TypeMismatchError):
            five_px.assert_string()


class TestSassString:
    """Tests for SassString."""

    def test_quoted_by_default(self) -> None:
        """Strings are quoted unless stated otherwise."""
        assert SassString("a").quoted

    def test_unquoted_is_calculation_value(self, unquoted: SassString) -> None:
        """Unquoted strings pass the calculation check."""
        assert unquoted.assert_calculation_value() is unquoted

    def test_quoted_is_not_calculation_value(self, quoted: SassString) -> None:
        """Quoted strings fail with a message about quoting."""
        with pytest.raises(InvalidOperandError) as exc_info:
            quoted.assert_calculation_value("value")

        assert "unquoted string" in str(exc_info.value)
        assert exc_info.value.kind == "quoted string"
        assert exc_info.value.argument_name == "value"

    def test_quoting_distinguishes(self) -> None:
        """Quoted and unquoted strings with the same text are unequal."""
        assert SassString("a") != SassString("a", quoted=False)

    def test_narrowing(self, quoted: SassString) -> None:
        """A string narrows to string but not number."""
        assert quoted.assert_string() is quoted
        with pytest.raises(TypeMismatchError):
            quoted.assert_number()


class TestOtherValues:
    """Tests for interpolation, boolean and null values."""

    def test_interpolation_is_calculation_value(
        self, interpolation: CalculationInterpolation
    ) -> None:
        """Interpolations are legal operands and compare by text."""
        assert interpolation.assert_calculation_value() is interpolation
        assert interpolation == CalculationInterpolation("$args")
        assert hash(interpolation) == hash(CalculationInterpolation("$args"))

    def test_truthiness(self, five_px: SassNumber) -> None:
        """Only false and null are falsey."""
        assert five_px.is_truthy
        assert SassBoolean(True).is_truthy
        assert not SassBoolean(False).is_truthy
        assert not SassNull().is_truthy

    @pytest.mark.parametrize("value", [SassBoolean(True), SassNull()])
    def test_not_calculation_values(self, value: object) -> None:
        """Booleans and null are refused as operands."""
        with pytest.raises(InvalidOperandError):
            assert_calculation_value(value)

    def test_null_equality(self) -> None:
        """All nulls are equal."""
        assert SassNull() == SassNull()
        assert hash(SassNull()) == hash(SassNull())
