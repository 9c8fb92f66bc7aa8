"""Environment configuration for the sasscalc package logger.

Environment variables:
    SASSCALC_LOG_LEVEL: Level for the ``sasscalc`` logger (default: WARNING).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

from sasscalc.errors import ConfigError

ENV_LOG_LEVEL: Final[str] = "SASSCALC_LOG_LEVEL"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOGGER_NAME: Final[str] = "sasscalc"

_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration (immutable).

    Attributes:
        level: Upper-case level name, one of DEBUG/INFO/WARNING/ERROR/CRITICAL.
    """

    level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate the level name."""
        if self.level not in _LEVELS:
            raise ConfigError(
                f"{ENV_LOG_LEVEL} must be one of {sorted(_LEVELS)}, got '{self.level}'"
            )

    @property
    def numeric_level(self) -> int:
        return _LEVELS[self.level]


def load_logging_config() -> LoggingConfig:
    """Load logging configuration from the environment.

    Unset or blank values fall back to the default level. Level names are
    case-insensitive.

    Returns:
        LoggingConfig with a validated level.

    Raises:
        ConfigError: If SASSCALC_LOG_LEVEL names an unknown level.
    """
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip()
    if not raw:
        return LoggingConfig()
    return LoggingConfig(level=raw.upper())


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Apply the configured level to the package logger.

    Safe to call repeatedly. Handlers are left to the host application.

    Args:
        config: Configuration to apply. Defaults to load_logging_config().

    Returns:
        The ``sasscalc`` logger.
    """
    if config is None:
        config = load_logging_config()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(config.numeric_level)
    return package_logger
