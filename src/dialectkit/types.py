"""
Abstract column type codes, independent of any engine's type names.
"""

from __future__ import annotations

from enum import Enum


class TypeCode(Enum):
    ANSI_STRING = "ansi_string"
    ANSI_STRING_FIXED_LENGTH = "ansi_string_fixed_length"
    BINARY = "binary"
    BOOLEAN = "boolean"
    BYTE = "byte"
    CURRENCY = "currency"
    DATE = "date"
    DATE_TIME = "date_time"
    DATE_TIME2 = "date_time2"
    DATE_TIME_OFFSET = "date_time_offset"
    DECIMAL = "decimal"
    DOUBLE = "double"
    GUID = "guid"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    SBYTE = "sbyte"
    SINGLE = "single"
    STRING = "string"
    STRING_FIXED_LENGTH = "string_fixed_length"
    TIME = "time"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    VAR_NUMERIC = "var_numeric"
    XML = "xml"

    def __str__(self) -> str:
        return self.name
