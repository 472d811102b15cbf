"""
Utility helpers shared across dialectkit packages.
"""

from .logging import configure_logging, get_logger, time_call
from .settings import resolve_log_level, resolve_slow_probe_ms

__all__ = [
    "configure_logging",
    "get_logger",
    "resolve_log_level",
    "resolve_slow_probe_ms",
    "time_call",
]
