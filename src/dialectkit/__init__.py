"""
dialectkit public package initialization.

Per-engine SQL dialects: type name resolution, identifier quoting, engine
detection over DB-API connections and CREATE TABLE / CREATE INDEX synthesis.
"""

from .dialects import (  # noqa: F401
    KNOWN_DIALECTS,
    MAX_PRIORITY,
    DialectRegistry,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    SqlDialect,
    SqlServerDialect,
    TypeNames,
    default_registry,
    get_all_dialects,
    get_dialect_for,
    register,
)
from .errors import (  # noqa: F401
    DialectConfigurationError,
    DialectError,
    DialectProbeError,
    SchemaDefinitionError,
    UnmappedTypeError,
    UnsupportedDialectError,
)
from .schema import Column, Index, Table  # noqa: F401
from .types import TypeCode  # noqa: F401

__all__ = [
    "SqlDialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "SqlServerDialect",
    "TypeNames",
    "TypeCode",
    "MAX_PRIORITY",
    "KNOWN_DIALECTS",
    "DialectRegistry",
    "default_registry",
    "get_all_dialects",
    "get_dialect_for",
    "register",
    "Table",
    "Column",
    "Index",
    "DialectError",
    "DialectConfigurationError",
    "DialectProbeError",
    "SchemaDefinitionError",
    "UnmappedTypeError",
    "UnsupportedDialectError",
]
