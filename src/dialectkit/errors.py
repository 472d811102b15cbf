"""
Error hierarchy raised by dialectkit.
"""

from __future__ import annotations


class DialectError(RuntimeError):
    """Base error for dialect-related failures."""


class DialectConfigurationError(DialectError):
    """Raised when environment settings are invalid."""


class UnmappedTypeError(DialectError, LookupError):
    """Raised when a dialect has no type name for a type code and length."""

    def __init__(self, type_code, length: int = 0, dialect: str | None = None) -> None:
        self.type_code = type_code
        self.length = length
        self.dialect = dialect
        message = f"No type mapping for {type_code} of length {length}"
        if dialect:
            message = f"{message} in dialect '{dialect}'"
        super().__init__(message)


class DialectProbeError(DialectError):
    """Raised when a version probe runs but yields no value."""


class UnsupportedDialectError(DialectError):
    """Raised when no registered dialect matches a connection or name."""


class SchemaDefinitionError(DialectError, ValueError):
    """Raised when a table definition cannot be rendered as DDL."""
