"""
Bootstrap example: detect the engine behind a connection and create tables.
"""

from __future__ import annotations

import sqlite3
from typing import Dict, List

from dialectkit import SqlDialect, Table, TypeCode, default_registry
from dialectkit.utils import configure_logging


def build_tables() -> List[Table]:
    users = (
        Table("Users")
        .add_column("Id", TypeCode.INT32, nullable=False)
        .add_column("Name", TypeCode.STRING, length=100)
        .add_column("Email", TypeCode.ANSI_STRING, length=320, nullable=False)
        .set_primary_key("Id")
        .add_index("IX_Users_Name", ["Name"])
    )
    audit = (
        Table("AuditLog")
        .add_column("Id", TypeCode.GUID, nullable=False)
        .add_column("UserId", TypeCode.INT32, nullable=False)
        .add_column("OccurredAt", TypeCode.DATE_TIME, nullable=False)
        .add_column("Payload", TypeCode.STRING)
        .set_primary_key("Id")
        .add_index("IX_AuditLog_User", ["UserId", "OccurredAt"])
    )
    return [users, audit]


def detect_dialect(connection) -> SqlDialect:
    return default_registry().require_dialect_for(connection)


def bootstrap_schema(connection) -> Dict[str, object]:
    dialect = detect_dialect(connection)
    existing = set(dialect.get_table_names(connection))
    created: List[str] = []
    for table in build_tables():
        if table.name in existing:
            continue
        connection.executescript(dialect.format_create_table(table))
        created.append(table.name)
    return {
        "dialect": dialect.name,
        "version": dialect.get_database_version(connection),
        "created": created,
        "tables": dialect.get_table_names(connection),
    }


def run_demo(path: str = ":memory:") -> Dict[str, object]:
    connection = sqlite3.connect(path)
    try:
        return bootstrap_schema(connection)
    finally:
        connection.close()


if __name__ == "__main__":
    configure_logging()
    print(run_demo())
