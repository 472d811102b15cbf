"""
Engine-agnostic table definitions consumed by DDL synthesis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..types import TypeCode


@dataclass
class Column:
    name: str
    type_code: TypeCode
    length: Optional[int] = None
    precision: int = 0
    scale: int = 0
    nullable: bool = True


@dataclass
class Index:
    name: Optional[str]
    columns: List[str] = field(default_factory=list)


@dataclass
class Table:
    """
    In-memory description of a table: ordered columns, an optional primary
    key and optional secondary indexes.
    """

    name: str
    columns: List[Column] = field(default_factory=list)
    primary_key: Optional[List[str]] = None
    indexes: Optional[List[Index]] = None

    def add_column(
        self,
        name: str,
        type_code: TypeCode,
        *,
        length: Optional[int] = None,
        precision: int = 0,
        scale: int = 0,
        nullable: bool = True,
    ) -> "Table":
        self.columns.append(
            Column(
                name=name,
                type_code=type_code,
                length=length,
                precision=precision,
                scale=scale,
                nullable=nullable,
            )
        )
        return self

    def set_primary_key(self, *columns: str) -> "Table":
        self.primary_key = list(columns)
        return self

    def add_index(self, name: Optional[str], columns: Sequence[str]) -> "Table":
        if self.indexes is None:
            self.indexes = []
        self.indexes.append(Index(name=name, columns=list(columns)))
        return self

    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]
