"""
Environment-driven settings for dialectkit.
"""

from __future__ import annotations

import logging
import os

from ..errors import DialectConfigurationError

LOG_LEVEL_ENV = "DIALECTKIT_LOG_LEVEL"
SLOW_PROBE_ENV = "DIALECTKIT_SLOW_PROBE_MS"


def resolve_log_level(default: int = logging.INFO) -> int:
    value = os.getenv(LOG_LEVEL_ENV)
    if not value:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise DialectConfigurationError(f"Invalid log level for {LOG_LEVEL_ENV}: {value!r}")
    return level


def resolve_slow_probe_ms(default: int = 100, override: int | None = None) -> int:
    """
    Threshold in milliseconds above which a version/metadata probe is logged
    as slow. An explicit ``override`` wins over the environment.
    """
    if override is not None:
        return override
    value = os.getenv(SLOW_PROBE_ENV)
    if not value:
        return default
    try:
        threshold = int(value)
    except ValueError as exc:
        raise DialectConfigurationError(
            f"Invalid integer value for {SLOW_PROBE_ENV}: {value!r}"
        ) from exc
    if threshold < 0:
        raise DialectConfigurationError(f"{SLOW_PROBE_ENV} must be non-negative, got {threshold}")
    return threshold
