"""Per-file extraction: statement splitting plus table/enum extraction."""

from __future__ import annotations

from ddlbind.core.errors import SchemaError
from ddlbind.core.logging import get_logger
from ddlbind.parsing.enums import extract_enum, is_create_type
from ddlbind.parsing.models import EnumType, SourceFile, Table
from ddlbind.parsing.statements import split_statements
from ddlbind.parsing.tables import extract_table, is_create_table

log = get_logger("parsing")


def parse_source(name: str, text: str, *, strict: bool = False) -> SourceFile:
    """Extract every table and enum declared in one DDL document.

    Statements that are neither CREATE TABLE nor CREATE TYPE are skipped
    with a warning, or rejected when *strict* is set. Comment-only
    statements are ignored silently.

    Raises:
        SchemaError: Tagged with *name* as ``details["source"]``.
    """
    tables: list[Table] = []
    enums: list[EnumType] = []
    skipped: list[str] = []

    try:
        for statement in split_statements(text):
            if is_create_table(statement):
                tables.append(extract_table(statement))
            elif is_create_type(statement):
                enums.append(extract_enum(statement))
            elif not statement.is_comment_only:
                if strict:
                    raise SchemaError.unrecognized_statement(statement.text)
                log.warning("statement_skipped", source=name, statement=statement.text[:80])
                skipped.append(statement.text)
    except SchemaError as e:
        raise e.with_source(name) from e

    log.debug("source_parsed", source=name, tables=len(tables), enums=len(enums))
    return SourceFile(
        name=name,
        tables=tuple(tables),
        enums=tuple(enums),
        skipped=tuple(skipped),
    )
