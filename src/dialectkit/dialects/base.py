"""
Base dialect strategy: type mapping, identifier quoting, version probing and
DDL synthesis shared by every engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from ..connection import Connection, execute_scalar, fetch_column
from ..errors import DialectProbeError, SchemaDefinitionError, UnmappedTypeError
from ..schema import Table
from ..types import TypeCode
from ..utils import get_logger, resolve_slow_probe_ms
from .type_names import TypeNames

MAX_PRIORITY = 65535


class SqlDialect(ABC):
    """
    Strategy object encapsulating one database engine's SQL syntax.

    Subclasses fill the type table in :meth:`register_column_types` and
    override the class attributes below where the engine differs. Instances
    are not mutated after construction and can be shared across threads.
    """

    name: str = "generic"
    open_quote: str = '"'
    close_quote: str = '"'
    parameter_placeholder: str = "@"
    param_style: str = "named"
    priority: int = MAX_PRIORITY
    version_query: str = (
        "SELECT CHARACTER_VALUE "
        "FROM INFORMATION_SCHEMA.SQL_IMPLEMENTATION_INFO "
        "WHERE IMPLEMENTATION_INFO_NAME = 'DBMS VERSION'"
    )
    table_names_query: str = (
        "SELECT TABLE_NAME FROM INFORMATION_SCHEMA.TABLES WHERE TABLE_TYPE = 'BASE TABLE'"
    )

    def __init__(self) -> None:
        self._type_names = TypeNames()
        self.logger = get_logger(f"dialects.{self.name}")
        self.register_column_types()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"

    # ------------------------------------------------------------------ #
    # Version probing
    # ------------------------------------------------------------------ #
    def get_database_version(self, connection: Connection, *, threshold_ms: int | None = None) -> str:
        result = execute_scalar(connection, self.version_query, threshold_ms=threshold_ms)
        if result is None:
            raise DialectProbeError(f"Version probe for '{self.name}' returned no value.")
        return str(result)

    def supports_this_dialect(self, connection: Connection) -> bool:
        threshold_ms = resolve_slow_probe_ms()
        try:
            version = self.get_database_version(connection, threshold_ms=threshold_ms)
        except Exception as exc:
            self.logger.debug("Connection rejected %s probe: %s", self.name, exc)
            return False
        self.logger.debug("Connection accepted %s probe (version %s)", self.name, version)
        return True

    # ------------------------------------------------------------------ #
    # Type mapping
    # ------------------------------------------------------------------ #
    @abstractmethod
    def register_column_types(self) -> None:
        """
        Populate the type table through :meth:`register_column_type`.
        """

    def register_column_type(self, code: TypeCode, name: str, capacity: int | None = None) -> None:
        """
        Register ``name`` for ``code``. With a ``capacity`` the mapping only
        applies to lengths up to that bound; ``$l`` in ``name`` is replaced
        by the requested length.
        """
        self._type_names.put(code, name, capacity)

    def get_type_name(
        self,
        code: TypeCode,
        length: int | None = None,
        precision: int = 0,
        scale: int = 0,
    ) -> str:
        """
        Resolve the type name for ``code``.

        Precision-sized types such as ``NUMERIC($p, $s)`` are looked up by
        precision when no length is given, and a bare length doubles as the
        precision.
        """
        if length is None and precision:
            length = precision
        elif length and not precision:
            precision = length
        result = self._type_names.get(code, length, precision, scale)
        if result is None:
            raise UnmappedTypeError(code, length or 0, dialect=self.name)
        return result

    def get_longest_type_name(self, code: TypeCode) -> Optional[str]:
        return self._type_names.get_longest(code)

    # ------------------------------------------------------------------ #
    # Identifier quoting
    # ------------------------------------------------------------------ #
    def is_quoted(self, name: str) -> bool:
        if not name or len(name) < 2:
            return False
        return name[0] == self.open_quote and name[-1] == self.close_quote

    def quote(self, name: str) -> str:
        """
        Escape embedded quote characters by doubling them and wrap the result.

        The name is assumed to be unquoted, so a leading quote character is
        escaped rather than treated as already quoted.
        """
        specials = {self.open_quote, self.close_quote}
        escaped = "".join(ch * 2 if ch in specials else ch for ch in name)
        return f"{self.open_quote}{escaped}{self.close_quote}"

    def unquote(self, quoted: str) -> str:
        """
        Strip wrapping quotes (if present) and collapse doubled quote characters.

        ``"quoted"`` -> ``quoted``, ``"quote""d"`` -> ``quote"d`` and
        ``quote""d`` -> ``quote"d``.
        """
        text = quoted[1:-1] if self.is_quoted(quoted) else quoted
        specials = {self.open_quote, self.close_quote}
        pieces: List[str] = []
        index = 0
        while index < len(text):
            ch = text[index]
            if ch in specials and index + 1 < len(text) and text[index + 1] == ch:
                index += 2
            else:
                index += 1
            pieces.append(ch)
        return "".join(pieces)

    def unquote_all(self, names: Iterable[str]) -> List[str]:
        return [self.unquote(name) for name in names]

    def quote_for_table_name(self, table_name: str) -> str:
        return table_name if self.is_quoted(table_name) else self.quote(table_name)

    def quote_for_column_name(self, column_name: str) -> str:
        return column_name if self.is_quoted(column_name) else self.quote(column_name)

    def quote_for_alias_name(self, alias_name: str) -> str:
        return alias_name if self.is_quoted(alias_name) else self.quote(alias_name)

    def qualify(self, catalog: str | None, schema: str | None, table: str) -> str:
        segments = [segment for segment in (catalog, schema) if segment]
        segments.append(table)
        return ".".join(segments)

    # ------------------------------------------------------------------ #
    # Parameters
    # ------------------------------------------------------------------ #
    def escape_parameter(self, parameter_name: str) -> str:
        return f"{self.parameter_placeholder}{parameter_name}"

    # ------------------------------------------------------------------ #
    # Metadata
    # ------------------------------------------------------------------ #
    def get_table_names(self, connection: Connection) -> List[str]:
        return [str(name) for name in fetch_column(connection, self.table_names_query)]

    # ------------------------------------------------------------------ #
    # DDL
    # ------------------------------------------------------------------ #
    def format_create_table(self, table: Table) -> str:
        if not table.columns:
            raise SchemaDefinitionError(f"Table '{table.name}' has no columns.")
        table_name = self.quote_for_table_name(table.name)
        parts = [f"CREATE TABLE {table_name} ("]
        last = len(table.columns) - 1
        for position, column in enumerate(table.columns):
            type_name = self.get_type_name(
                column.type_code, column.length, column.precision, column.scale
            )
            parts.append(
                " {0} {1} {2}{3}".format(
                    self.quote_for_column_name(column.name),
                    type_name,
                    "" if column.nullable else "NOT NULL",
                    "" if position == last else ",",
                )
            )
        if table.primary_key:
            parts.append(f", PRIMARY KEY({self._column_list(table.primary_key)})")
        parts.append(") ;")
        for index in table.indexes or ():
            if not index.columns:
                self.logger.warning(
                    "Skipping index %r on %s: no columns declared.", index.name, table_name
                )
                continue
            index_name = self.quote_for_table_name(index.name) if index.name else ""
            parts.append(
                f"CREATE INDEX {index_name} ON {table_name} ({self._column_list(index.columns)});"
            )
        return "".join(parts)

    def format_drop_table(self, table_name: str) -> str:
        quoted = self.quote_for_table_name(table_name)
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive migration before applying.",
            quoted,
        )
        return f"DROP TABLE {quoted};"

    def _column_list(self, columns: Sequence[str]) -> str:
        return ", ".join(self.quote_for_column_name(column) for column in columns)
