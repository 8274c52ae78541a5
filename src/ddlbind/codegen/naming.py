"""Generated-name strategies.

Every identifier the emitter writes is derived here, so switching the key
style of the bindings is a config change rather than an emitter change.
"""

from __future__ import annotations

import keyword
import re
from typing import Protocol

import inflect

from ddlbind.config.constants import RECORD_SUFFIX

_ENGINE = inflect.engine()
_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")
_INVALID_MODULE_CHARS = re.compile(r"\W")


def split_words(name: str) -> list[str]:
    """Split a SQL name on underscores, dashes, spaces and punctuation."""
    return [w for w in _WORD_SPLIT.split(name) if w]


def singularize(word: str) -> str:
    """Singular form of *word*; words that are already singular are unchanged."""
    if not word:
        return word
    singular = _ENGINE.singular_noun(word)
    return singular if singular else word


def pascal_case(name: str) -> str:
    return "".join(w[:1].upper() + w[1:] for w in split_words(name))


def camel_case(name: str) -> str:
    pascal = pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


class NamingStrategy(Protocol):
    """Maps SQL names to generated Python names."""

    def type_name(self, sql_name: str) -> str: ...

    def field_key(self, column: str) -> str: ...

    def record_name(self, table: str) -> str: ...

    def descriptor_name(self, table: str) -> str: ...

    def module_name(self, file_stem: str) -> str: ...


class CamelCaseNaming:
    """Default naming: ``role_names`` becomes the key ``roleNames``."""

    record_suffix = RECORD_SUFFIX

    def type_name(self, sql_name: str) -> str:
        return pascal_case(sql_name)

    def field_key(self, column: str) -> str:
        return camel_case(column) or column

    def record_name(self, table: str) -> str:
        words = split_words(table)
        if not words:
            return ""
        words[-1] = singularize(words[-1])
        return pascal_case("_".join(words)) + self.record_suffix

    def descriptor_name(self, table: str) -> str:
        return pascal_case(table)

    def module_name(self, file_stem: str) -> str:
        words = file_stem.replace("-", "_").split("_")
        words[-1] = singularize(words[-1])
        name = _INVALID_MODULE_CHARS.sub("_", "_".join(words))
        if not name or name[0].isdigit():
            name = "_" + name
        if keyword.iskeyword(name):
            name += "_"
        return name


class SnakeCaseNaming(CamelCaseNaming):
    """Record keys equal the SQL column names."""

    def field_key(self, column: str) -> str:
        return column


_STRATEGIES: dict[str, type[CamelCaseNaming]] = {
    "camel": CamelCaseNaming,
    "snake": SnakeCaseNaming,
}


def get_naming(name: str = "camel") -> NamingStrategy:
    """Return the naming strategy registered under *name*.

    Raises:
        KeyError: If no strategy has that name.
    """
    try:
        return _STRATEGIES[name]()
    except KeyError:
        choices = ", ".join(sorted(_STRATEGIES))
        raise KeyError(f"Unknown naming strategy {name!r}, expected one of: {choices}") from None
