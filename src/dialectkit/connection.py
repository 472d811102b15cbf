"""
Probing helpers over PEP 249 (DB-API 2.0) connections.

Dialects only need two capabilities from a connection: running a scalar
query for version probes and reading one column of rows for metadata
introspection. Both are expressed here in terms of ``connection.cursor()``
so any DB-API driver (sqlite3, psycopg, PyMySQL, pyodbc) can be probed.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence

from .utils import get_logger, resolve_slow_probe_ms, time_call

logger = get_logger("connection")


class Cursor(Protocol):
    def execute(self, sql: str, params: Sequence[Any] = ...) -> Any: ...

    def fetchone(self) -> Sequence[Any] | None: ...

    def fetchall(self) -> Sequence[Sequence[Any]]: ...

    def close(self) -> None: ...


class Connection(Protocol):
    """
    Minimal connection surface consumed by dialect probes.
    """

    def cursor(self) -> Cursor: ...


def execute_scalar(connection: Connection, sql: str, *, threshold_ms: int | None = None) -> Any:
    """
    Execute ``sql`` and return the first column of the first row, or
    ``None`` when the statement produced no rows.

    ``threshold_ms`` defaults to the configured slow-probe threshold, which
    is resolved before the statement runs.
    """
    if threshold_ms is None:
        threshold_ms = resolve_slow_probe_ms()
    cursor = connection.cursor()
    try:
        with time_call("execute_scalar", logger, sql=sql, threshold_ms=threshold_ms):
            cursor.execute(sql)
            row = cursor.fetchone()
    finally:
        cursor.close()
    if not row:
        return None
    return row[0]


def fetch_column(connection: Connection, sql: str, *, threshold_ms: int | None = None) -> List[Any]:
    """
    Execute ``sql`` and return the first column of every row.
    """
    if threshold_ms is None:
        threshold_ms = resolve_slow_probe_ms()
    cursor = connection.cursor()
    try:
        with time_call("fetch_column", logger, sql=sql, threshold_ms=threshold_ms):
            cursor.execute(sql)
            rows = cursor.fetchall()
    finally:
        cursor.close()
    return [row[0] for row in rows]
