"""
Dialect strategy registry.
"""

from .base import MAX_PRIORITY, SqlDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .registry import (
    KNOWN_DIALECTS,
    DialectRegistry,
    default_registry,
    get_all_dialects,
    get_dialect_for,
    register,
)
from .sqlite import SQLiteDialect
from .sqlserver import SqlServerDialect
from .type_names import TypeNames

__all__ = [
    "MAX_PRIORITY",
    "KNOWN_DIALECTS",
    "SqlDialect",
    "TypeNames",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "SqlServerDialect",
    "DialectRegistry",
    "default_registry",
    "get_all_dialects",
    "get_dialect_for",
    "register",
]
