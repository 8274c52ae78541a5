"""Mapping from SQL built-in scalar types to Python annotations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrimitiveCategory(Enum):
    """Category of a built-in scalar type."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    STRUCTURED = "structured"
    BINARY = "binary"


@dataclass(frozen=True, slots=True)
class Primitive:
    """Python rendition of a SQL scalar type.

    ``imports`` lists (module, name) pairs the annotation needs.
    """

    category: PrimitiveCategory
    annotation: str
    imports: tuple[tuple[str, str], ...] = ()


_STR = Primitive(PrimitiveCategory.STRING, "str")
_INT = Primitive(PrimitiveCategory.NUMBER, "int")
_FLOAT = Primitive(PrimitiveCategory.NUMBER, "float")
_DECIMAL = Primitive(PrimitiveCategory.NUMBER, "Decimal", (("decimal", "Decimal"),))
_BOOL = Primitive(PrimitiveCategory.BOOLEAN, "bool")
_DATETIME = Primitive(PrimitiveCategory.TIMESTAMP, "datetime", (("datetime", "datetime"),))
_DATE = Primitive(PrimitiveCategory.TIMESTAMP, "date", (("datetime", "date"),))
_TIME = Primitive(PrimitiveCategory.TIMESTAMP, "time", (("datetime", "time"),))
_JSON = Primitive(PrimitiveCategory.STRUCTURED, "dict[str, Any]", (("typing", "Any"),))
_BYTES = Primitive(PrimitiveCategory.BINARY, "bytes")

PRIMITIVES: dict[str, Primitive] = {
    # Strings
    "char": _STR,
    "bpchar": _STR,
    "character": _STR,
    "varchar": _STR,
    "character varying": _STR,
    "text": _STR,
    "citext": _STR,
    "uuid": _STR,
    "name": _STR,
    "inet": _STR,
    "cidr": _STR,
    # Numbers
    "smallint": _INT,
    "int": _INT,
    "integer": _INT,
    "bigint": _INT,
    "int2": _INT,
    "int4": _INT,
    "int8": _INT,
    "serial": _INT,
    "smallserial": _INT,
    "bigserial": _INT,
    "serial2": _INT,
    "serial4": _INT,
    "serial8": _INT,
    "real": _FLOAT,
    "float": _FLOAT,
    "float4": _FLOAT,
    "float8": _FLOAT,
    "double": _FLOAT,
    "double precision": _FLOAT,
    "numeric": _DECIMAL,
    "decimal": _DECIMAL,
    "money": _DECIMAL,
    # Booleans
    "bool": _BOOL,
    "boolean": _BOOL,
    # Timestamps
    "timestamp": _DATETIME,
    "timestamptz": _DATETIME,
    "date": _DATE,
    "time": _TIME,
    "timetz": _TIME,
    # Structured
    "json": _JSON,
    "jsonb": _JSON,
    # Binary
    "bytea": _BYTES,
}


def lookup_primitive(base_type: str) -> Primitive | None:
    """Return the primitive for a lowercase base type, or None for custom types."""
    return PRIMITIVES.get(base_type)
