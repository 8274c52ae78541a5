"""Runtime support imported by generated bindings.

Generated descriptor constants are ``TableSchema`` instances::

    Users = TableSchema(
        table='users',
        fields={'id': 'id', 'roleNames': 'role_names'},
        field_keys=('id', 'roleNames'),
    )

so query builders can refer to ``Users.fields["roleNames"]`` instead of a
string literal that silently goes stale when the DDL changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class TableSchema:
    """Table name plus the mapping of generated field keys to column names."""

    table: str
    fields: Mapping[str, str]
    field_keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        if not self.field_keys:
            object.__setattr__(self, "field_keys", tuple(self.fields))

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in declaration order."""
        return tuple(self.fields[key] for key in self.field_keys)

    def column(self, key: str) -> str:
        """Column name for a generated field key."""
        return self.fields[key]
