"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..types import TypeCode
from .base import SqlDialect


class SQLiteDialect(SqlDialect):
    """
    SQLite dialect using named (``:name``) parameters and type affinities.
    """

    name: Final[str] = "sqlite"
    parameter_placeholder: Final[str] = ":"
    param_style: Final[str] = "named"
    version_query: Final[str] = "SELECT sqlite_version()"
    table_names_query: Final[str] = (
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' "
        "ORDER BY name"
    )

    def register_column_types(self) -> None:
        self.register_column_type(TypeCode.BINARY, "BLOB")
        self.register_column_type(TypeCode.BYTE, "TINYINT")
        self.register_column_type(TypeCode.INT16, "SMALLINT")
        self.register_column_type(TypeCode.INT32, "INT")
        self.register_column_type(TypeCode.INT64, "BIGINT")
        self.register_column_type(TypeCode.SBYTE, "INTEGER")
        self.register_column_type(TypeCode.UINT16, "INTEGER")
        self.register_column_type(TypeCode.UINT32, "INTEGER")
        self.register_column_type(TypeCode.UINT64, "INTEGER")
        self.register_column_type(TypeCode.CURRENCY, "NUMERIC")
        self.register_column_type(TypeCode.DECIMAL, "NUMERIC")
        self.register_column_type(TypeCode.DOUBLE, "DOUBLE")
        self.register_column_type(TypeCode.SINGLE, "DOUBLE")
        self.register_column_type(TypeCode.VAR_NUMERIC, "NUMERIC")
        self.register_column_type(TypeCode.ANSI_STRING, "TEXT")
        self.register_column_type(TypeCode.STRING, "TEXT")
        self.register_column_type(TypeCode.ANSI_STRING_FIXED_LENGTH, "TEXT")
        self.register_column_type(TypeCode.STRING_FIXED_LENGTH, "TEXT")
        self.register_column_type(TypeCode.XML, "TEXT")
        self.register_column_type(TypeCode.DATE, "DATE")
        self.register_column_type(TypeCode.DATE_TIME, "DATETIME")
        self.register_column_type(TypeCode.DATE_TIME2, "DATETIME")
        self.register_column_type(TypeCode.DATE_TIME_OFFSET, "DATETIME")
        self.register_column_type(TypeCode.TIME, "TIME")
        self.register_column_type(TypeCode.BOOLEAN, "BOOL")
        self.register_column_type(TypeCode.GUID, "UNIQUEIDENTIFIER")
