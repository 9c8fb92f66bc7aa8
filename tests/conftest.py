"""Pytest configuration and fixtures for sasscalc tests.

This module provides common operand fixtures for all tests.
"""

from __future__ import annotations

import pytest

from sasscalc.config import ENV_LOG_LEVEL
from sasscalc.values import (
    CalculationInterpolation,
    SassNumber,
    SassString,
)


@pytest.fixture(autouse=True)
def clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without a configured log level."""
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


@pytest.fixture
def five_px() -> SassNumber:
    """A concrete number operand."""
    return SassNumber(5, "px")


@pytest.fixture
def ten_px() -> SassNumber:
    """A second concrete number operand, unequal to five_px."""
    return SassNumber(10, "px")


@pytest.fixture
def interpolation() -> CalculationInterpolation:
    """An interpolation placeholder (relaxed kind)."""
    return CalculationInterpolation("$args")


@pytest.fixture
def unquoted() -> SassString:
    """An unquoted string (relaxed kind)."""
    return SassString("var(--gap)", quoted=False)


@pytest.fixture
def quoted() -> SassString:
    """A quoted string (never calculation-capable)."""
    return SassString("gap", quoted=True)
