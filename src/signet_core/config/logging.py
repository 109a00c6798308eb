"""Logging configuration sourced from the environment."""

from __future__ import annotations

import logging

from signet_core.common.logging import configure_logging

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV = "SIGNET_LOG_LEVEL"


def get_log_level() -> int:
    value = optional_env_var(LOG_LEVEL_ENV)
    if value is None:
        return logging.INFO
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Invalid log level for {LOG_LEVEL_ENV}: {value!r}", source=LOG_LEVEL_ENV
        )
    return level


__all__ = ["configure_logging", "get_log_level"]
