"""Parsing models - entities extracted from DDL source files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ddlbind.parsing.primitives import Primitive


@dataclass(frozen=True, slots=True)
class Field:
    """One column of a table declaration."""

    name: str
    raw_type: str  # "varchar(21)", "text[]", "user_status"
    base_type: str  # lookup key: params and [] stripped
    required: bool = False
    array_depth: int = 0
    primitive: Primitive | None = None  # None for custom (enum) types
    override_type: str | None = None  # from /* @use T */

    @property
    def is_array(self) -> bool:
        return self.array_depth > 0


@dataclass(frozen=True, slots=True)
class Table:
    name: str
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True, slots=True)
class EnumType:
    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Everything extracted from one input .sql document."""

    name: str  # file name, e.g. "users.sql"
    tables: tuple[Table, ...] = ()
    enums: tuple[EnumType, ...] = ()
    skipped: tuple[str, ...] = ()  # statements matching no supported shape

    @property
    def stem(self) -> str:
        return self.name.rsplit(".", 1)[0]


@dataclass(frozen=True, slots=True)
class SchemaSnapshot:
    """Immutable merge of every source file, in input order.

    The single input of type resolution: an enum declared in one file may
    be referenced by a table in another.
    """

    files: tuple[SourceFile, ...] = field(default_factory=tuple)

    @property
    def tables(self) -> Iterator[Table]:
        for source in self.files:
            yield from source.tables

    @property
    def enums(self) -> Iterator[EnumType]:
        for source in self.files:
            yield from source.enums
