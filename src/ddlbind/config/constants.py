"""Configuration constants.

Values here are part of the generated-code contract and are NOT
user-configurable. For configurable values, see models.py.
"""

CONFIG_FILENAME = "ddlbind.yaml"
"""Project config file, looked up in the project root."""

SCHEMA_SUFFIX = ".sql"
"""Only files with this suffix in the input directory are compiled."""

GENERATED_HEADER = "# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.\n\n"
"""Prefix of every emitted file."""

INDEX_MODULE = "__init__"
"""Aggregating index re-exporting every other generated module."""

RUNTIME_IMPORT = "from ddlbind.runtime import TableSchema"
"""Import line generated bindings use for schema descriptors."""

RECORD_SUFFIX = "DBEntry"
"""Suffix of generated record type names (users -> UserDBEntry)."""

TABLE_CONSTRAINT_KEYWORDS = frozenset(
    {"primary", "foreign", "unique", "exclude", "check", "constraint"}
)
"""Leading words of table-level constraint clauses inside a column list."""
