"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..types import TypeCode
from .base import SqlDialect


class MySQLDialect(SqlDialect):
    """
    MySQL dialect using backtick quoting and pyformat parameters.

    ``SELECT @@version`` is also understood by SQL Server, which is why the
    SQL Server dialect is probed first.
    """

    name: Final[str] = "mysql"
    open_quote: Final[str] = "`"
    close_quote: Final[str] = "`"
    parameter_placeholder: Final[str] = "%"
    param_style: Final[str] = "pyformat"
    version_query: Final[str] = "SELECT @@version"
    table_names_query: Final[str] = (
        "SELECT table_name FROM information_schema.tables "
        "WHERE table_schema = DATABASE() AND table_type = 'BASE TABLE' "
        "ORDER BY table_name"
    )

    def register_column_types(self) -> None:
        self.register_column_type(TypeCode.BINARY, "LONGBLOB")
        self.register_column_type(TypeCode.BINARY, "VARBINARY($l)", capacity=8000)
        self.register_column_type(TypeCode.BINARY, "MEDIUMBLOB", capacity=16777215)
        self.register_column_type(TypeCode.BOOLEAN, "TINYINT(1)")
        self.register_column_type(TypeCode.BYTE, "TINYINT UNSIGNED")
        self.register_column_type(TypeCode.SBYTE, "TINYINT")
        self.register_column_type(TypeCode.INT16, "SMALLINT")
        self.register_column_type(TypeCode.UINT16, "SMALLINT UNSIGNED")
        self.register_column_type(TypeCode.INT32, "INTEGER")
        self.register_column_type(TypeCode.UINT32, "INTEGER UNSIGNED")
        self.register_column_type(TypeCode.INT64, "BIGINT")
        self.register_column_type(TypeCode.UINT64, "BIGINT UNSIGNED")
        self.register_column_type(TypeCode.SINGLE, "FLOAT")
        self.register_column_type(TypeCode.DOUBLE, "DOUBLE")
        self.register_column_type(TypeCode.CURRENCY, "DECIMAL(19, 4)")
        self.register_column_type(TypeCode.DECIMAL, "DECIMAL(19, 5)")
        self.register_column_type(TypeCode.DECIMAL, "DECIMAL($p, $s)", capacity=65)
        self.register_column_type(TypeCode.VAR_NUMERIC, "DECIMAL(65, 30)")
        self.register_column_type(TypeCode.ANSI_STRING_FIXED_LENGTH, "CHAR(255)")
        self.register_column_type(TypeCode.ANSI_STRING_FIXED_LENGTH, "CHAR($l)", capacity=255)
        self.register_column_type(TypeCode.STRING_FIXED_LENGTH, "CHAR(255)")
        self.register_column_type(TypeCode.STRING_FIXED_LENGTH, "CHAR($l)", capacity=255)
        self.register_column_type(TypeCode.ANSI_STRING, "LONGTEXT")
        self.register_column_type(TypeCode.ANSI_STRING, "VARCHAR($l)", capacity=255)
        self.register_column_type(TypeCode.ANSI_STRING, "TEXT", capacity=65535)
        self.register_column_type(TypeCode.ANSI_STRING, "MEDIUMTEXT", capacity=16777215)
        self.register_column_type(TypeCode.STRING, "LONGTEXT")
        self.register_column_type(TypeCode.STRING, "VARCHAR($l)", capacity=255)
        self.register_column_type(TypeCode.STRING, "TEXT", capacity=65535)
        self.register_column_type(TypeCode.STRING, "MEDIUMTEXT", capacity=16777215)
        self.register_column_type(TypeCode.XML, "LONGTEXT")
        self.register_column_type(TypeCode.DATE, "DATE")
        self.register_column_type(TypeCode.TIME, "TIME")
        self.register_column_type(TypeCode.DATE_TIME, "DATETIME")
        self.register_column_type(TypeCode.DATE_TIME2, "DATETIME(6)")
        self.register_column_type(TypeCode.DATE_TIME_OFFSET, "TIMESTAMP")
        self.register_column_type(TypeCode.GUID, "CHAR(36)")

    def escape_parameter(self, parameter_name: str) -> str:
        return f"%({parameter_name})s"
