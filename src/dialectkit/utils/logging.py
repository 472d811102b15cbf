"""
Logging helpers for dialectkit.

Importing the package only attaches a ``NullHandler`` to the ``dialectkit``
logger. Applications that want dialectkit's own output call
:func:`configure_logging`, which installs a stream handler tagging every
record with the current correlation id.
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, TextIO

from .settings import resolve_log_level

ROOT_LOGGER_NAME = "dialectkit"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


class _DialectkitStreamHandler(logging.StreamHandler):
    """Marker type so repeated configuration does not stack handlers."""


def configure_logging(level: int | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """
    Install the dialectkit stream handler once and set the package level.

    Without an explicit ``level`` the ``DIALECTKIT_LOG_LEVEL`` environment
    variable is consulted.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level if level is not None else resolve_log_level())
    if any(isinstance(handler, _DialectkitStreamHandler) for handler in logger.handlers):
        return logger
    handler = _DialectkitStreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or str(uuid.uuid4())
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid


@contextmanager
def time_call(
    name: str,
    logger: logging.Logger,
    *,
    sql: str | None = None,
    threshold_ms: int = 100,
) -> Iterator[None]:
    """
    Log how long the block took: DEBUG normally, WARNING at or above
    ``threshold_ms``. Exceptions propagate after the timing is logged.
    """
    start = time.monotonic()
    failed = False
    try:
        yield
    except BaseException:
        failed = True
        raise
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
        extra = {"sql": sql, "elapsed_ms": elapsed_ms, "failed": failed}
        logger.log(level, "%s took %.2fms%s", name, elapsed_ms, " (failed)" if failed else "", extra=extra)
