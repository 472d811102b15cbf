"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..types import TypeCode
from .base import SqlDialect


class PostgresDialect(SqlDialect):
    """
    PostgreSQL dialect using pyformat (``%(name)s``) parameters.

    Probed first: a failed statement aborts an open PostgreSQL transaction,
    while ``SHOW server_version`` failing on the other engines leaves their
    sessions usable.
    """

    name: Final[str] = "postgresql"
    parameter_placeholder: Final[str] = "%"
    param_style: Final[str] = "pyformat"
    priority: Final[int] = 50
    version_query: Final[str] = "SHOW server_version"
    table_names_query: Final[str] = (
        "SELECT table_name FROM information_schema.tables "
        "WHERE table_schema = current_schema() AND table_type = 'BASE TABLE' "
        "ORDER BY table_name"
    )

    def register_column_types(self) -> None:
        self.register_column_type(TypeCode.BINARY, "BYTEA")
        self.register_column_type(TypeCode.BOOLEAN, "BOOLEAN")
        self.register_column_type(TypeCode.BYTE, "SMALLINT")
        self.register_column_type(TypeCode.SBYTE, "SMALLINT")
        self.register_column_type(TypeCode.INT16, "SMALLINT")
        self.register_column_type(TypeCode.UINT16, "INTEGER")
        self.register_column_type(TypeCode.INT32, "INTEGER")
        self.register_column_type(TypeCode.UINT32, "BIGINT")
        self.register_column_type(TypeCode.INT64, "BIGINT")
        self.register_column_type(TypeCode.UINT64, "NUMERIC(20, 0)")
        self.register_column_type(TypeCode.SINGLE, "REAL")
        self.register_column_type(TypeCode.DOUBLE, "DOUBLE PRECISION")
        self.register_column_type(TypeCode.CURRENCY, "MONEY")
        self.register_column_type(TypeCode.DECIMAL, "NUMERIC(19, 5)")
        self.register_column_type(TypeCode.DECIMAL, "NUMERIC($p, $s)", capacity=1000)
        self.register_column_type(TypeCode.VAR_NUMERIC, "NUMERIC")
        self.register_column_type(TypeCode.ANSI_STRING_FIXED_LENGTH, "CHAR(255)")
        self.register_column_type(TypeCode.ANSI_STRING_FIXED_LENGTH, "CHAR($l)", capacity=8000)
        self.register_column_type(TypeCode.STRING_FIXED_LENGTH, "CHAR(255)")
        self.register_column_type(TypeCode.STRING_FIXED_LENGTH, "CHAR($l)", capacity=8000)
        self.register_column_type(TypeCode.ANSI_STRING, "TEXT")
        self.register_column_type(TypeCode.ANSI_STRING, "VARCHAR($l)", capacity=10485760)
        self.register_column_type(TypeCode.STRING, "TEXT")
        self.register_column_type(TypeCode.STRING, "VARCHAR($l)", capacity=10485760)
        self.register_column_type(TypeCode.XML, "XML")
        self.register_column_type(TypeCode.DATE, "DATE")
        self.register_column_type(TypeCode.TIME, "TIME")
        self.register_column_type(TypeCode.DATE_TIME, "TIMESTAMP")
        self.register_column_type(TypeCode.DATE_TIME2, "TIMESTAMP")
        self.register_column_type(TypeCode.DATE_TIME_OFFSET, "TIMESTAMP WITH TIME ZONE")
        self.register_column_type(TypeCode.GUID, "UUID")

    def escape_parameter(self, parameter_name: str) -> str:
        return f"%({parameter_name})s"
