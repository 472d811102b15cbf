"""
SQL Server dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..types import TypeCode
from .base import SqlDialect


class SqlServerDialect(SqlDialect):
    """
    SQL Server dialect using bracket quoting and ``@name`` parameters.

    Probed ahead of MySQL and SQLite because its probe is specific to SQL
    Server while MySQL's ``@@version`` probe would also match it.
    """

    name: Final[str] = "sqlserver"
    open_quote: Final[str] = "["
    close_quote: Final[str] = "]"
    parameter_placeholder: Final[str] = "@"
    param_style: Final[str] = "named"
    priority: Final[int] = 100
    version_query: Final[str] = "SELECT CAST(SERVERPROPERTY('ProductVersion') AS NVARCHAR(128))"

    def register_column_types(self) -> None:
        self.register_column_type(TypeCode.BINARY, "VARBINARY(MAX)")
        self.register_column_type(TypeCode.BINARY, "VARBINARY($l)", capacity=8000)
        self.register_column_type(TypeCode.BOOLEAN, "BIT")
        self.register_column_type(TypeCode.BYTE, "TINYINT")
        self.register_column_type(TypeCode.SBYTE, "SMALLINT")
        self.register_column_type(TypeCode.INT16, "SMALLINT")
        self.register_column_type(TypeCode.UINT16, "INT")
        self.register_column_type(TypeCode.INT32, "INT")
        self.register_column_type(TypeCode.UINT32, "BIGINT")
        self.register_column_type(TypeCode.INT64, "BIGINT")
        self.register_column_type(TypeCode.UINT64, "DECIMAL(20, 0)")
        self.register_column_type(TypeCode.SINGLE, "REAL")
        self.register_column_type(TypeCode.DOUBLE, "FLOAT")
        self.register_column_type(TypeCode.CURRENCY, "MONEY")
        self.register_column_type(TypeCode.DECIMAL, "DECIMAL(19, 5)")
        self.register_column_type(TypeCode.DECIMAL, "DECIMAL($p, $s)", capacity=38)
        self.register_column_type(TypeCode.VAR_NUMERIC, "DECIMAL(38, 10)")
        self.register_column_type(TypeCode.ANSI_STRING_FIXED_LENGTH, "CHAR(255)")
        self.register_column_type(TypeCode.ANSI_STRING_FIXED_LENGTH, "CHAR($l)", capacity=8000)
        self.register_column_type(TypeCode.STRING_FIXED_LENGTH, "NCHAR(255)")
        self.register_column_type(TypeCode.STRING_FIXED_LENGTH, "NCHAR($l)", capacity=4000)
        self.register_column_type(TypeCode.ANSI_STRING, "VARCHAR(MAX)")
        self.register_column_type(TypeCode.ANSI_STRING, "VARCHAR($l)", capacity=8000)
        self.register_column_type(TypeCode.STRING, "NVARCHAR(MAX)")
        self.register_column_type(TypeCode.STRING, "NVARCHAR($l)", capacity=4000)
        self.register_column_type(TypeCode.XML, "XML")
        self.register_column_type(TypeCode.DATE, "DATE")
        self.register_column_type(TypeCode.TIME, "TIME")
        self.register_column_type(TypeCode.DATE_TIME, "DATETIME")
        self.register_column_type(TypeCode.DATE_TIME2, "DATETIME2")
        self.register_column_type(TypeCode.DATE_TIME_OFFSET, "DATETIMEOFFSET")
        self.register_column_type(TypeCode.GUID, "UNIQUEIDENTIFIER")
