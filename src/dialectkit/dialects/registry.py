"""
Dialect registry and engine detection.

The process-wide catalog is built once, on first use, from the explicit
``KNOWN_DIALECTS`` tuple and may be extended at runtime with
:func:`register`. It is read-mostly afterwards; callers that prefer not to
rely on module state can build and pass around their own
:class:`DialectRegistry`.
"""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from ..connection import Connection
from ..errors import UnsupportedDialectError
from ..utils import get_logger
from .base import SqlDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect
from .sqlserver import SqlServerDialect

KNOWN_DIALECTS: tuple[type[SqlDialect], ...] = (
    SQLiteDialect,
    PostgresDialect,
    MySQLDialect,
    SqlServerDialect,
)


class DialectRegistry:
    """
    Ordered catalog of dialect instances guarded by a single lock.
    """

    def __init__(self, dialects: Iterable[SqlDialect] = ()) -> None:
        self._lock = threading.Lock()
        self._dialects: List[SqlDialect] = list(dialects)
        self.logger = get_logger("dialects.registry")

    @classmethod
    def with_known_dialects(cls) -> "DialectRegistry":
        return cls(dialect_cls() for dialect_cls in KNOWN_DIALECTS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._dialects)

    def register(self, dialect: SqlDialect) -> None:
        with self._lock:
            self._dialects.append(dialect)
        self.logger.debug("Registered dialect %r", dialect)

    def get_all_dialects(self) -> List[SqlDialect]:
        """
        Snapshot of the catalog ordered by ascending priority; dialects with
        equal priority keep their registration order.
        """
        with self._lock:
            snapshot = list(self._dialects)
        return sorted(snapshot, key=lambda dialect: dialect.priority)

    def get_dialect_for(self, connection: Connection) -> Optional[SqlDialect]:
        for dialect in self.get_all_dialects():
            if dialect.supports_this_dialect(connection):
                self.logger.info("Detected %s dialect for connection", dialect.name)
                return dialect
        self.logger.warning("No registered dialect supports the connection")
        return None

    def require_dialect_for(self, connection: Connection) -> SqlDialect:
        dialect = self.get_dialect_for(connection)
        if dialect is None:
            names = ", ".join(d.name for d in self.get_all_dialects())
            raise UnsupportedDialectError(
                f"Connection is not served by any registered dialect (tried: {names})."
            )
        return dialect

    def get_by_name(self, name: str) -> SqlDialect:
        """
        Look a dialect up by name; a URL scheme such as ``postgresql+psycopg``
        is accepted and its driver suffix ignored.
        """
        normalized = (name or "").split("+")[0].lower()
        for dialect in self.get_all_dialects():
            if dialect.name == normalized:
                return dialect
        raise UnsupportedDialectError(f"Unsupported dialect: {name}")


_default_registry: DialectRegistry | None = None
_default_registry_lock = threading.Lock()


def default_registry() -> DialectRegistry:
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = DialectRegistry.with_known_dialects()
        return _default_registry


def register(dialect: SqlDialect) -> None:
    default_registry().register(dialect)


def get_all_dialects() -> List[SqlDialect]:
    return default_registry().get_all_dialects()


def get_dialect_for(connection: Connection) -> Optional[SqlDialect]:
    return default_registry().get_dialect_for(connection)
