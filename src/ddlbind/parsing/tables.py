"""CREATE TABLE extraction.

Grammar handled (keywords case-insensitive)::

    CREATE TABLE [IF NOT EXISTS] [schema.]name ( element [, element]* ) ...
    element  := constraint-clause | column
    column   := name type [modifier]*
    type     := [schema.]word [word] [( params )] [WITH|WITHOUT TIME ZONE] [ '[' [n] ']' ]*

Anything after the column list (``WITH (...)``, ``PARTITION BY``) is ignored.
"""

from __future__ import annotations

import keyword
from collections.abc import Sequence

from ddlbind.config.constants import TABLE_CONSTRAINT_KEYWORDS
from ddlbind.core.errors import SchemaError
from ddlbind.parsing.cursor import TokenCursor, split_top_level, top_level
from ddlbind.parsing.lexer import Token, TokenKind, render_tokens
from ddlbind.parsing.models import Field, Table
from ddlbind.parsing.primitives import lookup_primitive
from ddlbind.parsing.statements import Statement

# Two-word type names folded into one base type
_MULTIWORD_TYPES = {
    ("double", "precision"): "double precision",
    ("character", "varying"): "character varying",
}

_ZONED_TYPES = {"timestamp": "timestamptz", "time": "timetz"}


def is_create_table(statement: Statement) -> bool:
    return statement.starts_with("create", "table")


def extract_table(statement: Statement) -> Table:
    """Extract a table and its columns from a CREATE TABLE statement.

    Raises:
        SchemaError: MISSING_IDENTIFIER, UNBALANCED_PARENTHESES,
            MALFORMED_COLUMN, INVALID_OVERRIDE or DUPLICATE_DEFINITION.
    """
    cursor = TokenCursor(statement.tokens)
    cursor.accept_keywords("create", "table")
    cursor.accept_keywords("if", "not", "exists")

    name = cursor.read_name()
    if name is None:
        raise SchemaError.missing_identifier("table", statement.text)

    body = cursor.take_group()
    if body is None:
        raise SchemaError.unbalanced_parentheses(statement.text)

    fields: list[Field] = []
    seen: set[str] = set()
    clauses = split_top_level(body) if TokenCursor(body).peek() is not None else []
    for clause in clauses:
        column = _parse_element(name, clause)
        if column is None:
            continue
        if column.name in seen:
            raise SchemaError.duplicate_definition("column", column.name, f"table '{name}'")
        seen.add(column.name)
        fields.append(column)

    return Table(name=name, fields=tuple(fields))


def _parse_element(table: str, clause: list[Token]) -> Field | None:
    """Parse one column-list element; None for table-level constraints."""
    cursor = TokenCursor(clause)
    first = cursor.peek()
    if (
        first is not None
        and first.kind is TokenKind.IDENT
        and first.lower in TABLE_CONSTRAINT_KEYWORDS
        and cursor.peek(1) is not None
    ):
        return None

    name_token, type_token = cursor.peek(), cursor.peek(1)
    if name_token is None or type_token is None or not (name_token.is_word and type_token.is_word):
        raise SchemaError.malformed_column(table, render_tokens(clause))

    name = name_token.lower if name_token.kind is TokenKind.IDENT else name_token.value
    cursor.advance()
    raw_type, base_type, array_depth = _parse_type(table, clause, cursor)

    modifiers = cursor.rest()
    outer = [t for t in top_level(modifiers) if t.kind is not TokenKind.COMMENT]
    words = [t.lower for t in outer if t.kind is TokenKind.IDENT]

    # CAUTION: "array" only adds one dimension; use [][] for more
    if array_depth == 0 and "array" in words:
        array_depth = 1
    required = any(a.is_keyword("not") and b.is_keyword("null") for a, b in zip(outer, outer[1:]))

    override = _find_override(table, name, modifiers)
    primitive = lookup_primitive(base_type)
    if override is not None and primitive is None:
        raise SchemaError.invalid_override(
            table, name, override, f"only primitive columns accept overrides, found '{base_type}'"
        )

    return Field(
        name=name,
        raw_type=raw_type,
        base_type=base_type,
        required=required,
        array_depth=array_depth,
        primitive=primitive,
        override_type=override,
    )


def _parse_type(table: str, clause: list[Token], cursor: TokenCursor) -> tuple[str, str, int]:
    """Consume the column type; return (raw_type, base_type, array_depth)."""
    head = cursor.peek()
    if head is None:
        raise SchemaError.malformed_column(table, render_tokens(clause))
    cursor.advance()
    consumed = [head]
    base = _type_word(head)

    # Schema-qualified types resolve by their last part, like declared names
    while (dot := cursor.peek()) is not None and dot.kind is TokenKind.DOT:
        part = cursor.peek(1)
        if part is None or not part.is_word:
            raise SchemaError.malformed_column(table, render_tokens(clause))
        cursor.advance(2)
        consumed.extend((dot, part))
        base = _type_word(part)

    second = cursor.peek()
    if second is not None and (base, second.lower) in _MULTIWORD_TYPES:
        base = _MULTIWORD_TYPES[(base, second.lower)]
        consumed.append(second)
        cursor.advance()

    opener = cursor.peek()
    if opener is not None and opener.kind is TokenKind.LPAREN:
        params = cursor.take_group()
        if params is None:
            raise SchemaError.malformed_column(table, render_tokens(clause))
        consumed.extend(_wrap(opener, params))

    if base in _ZONED_TYPES:
        if cursor.accept_keywords("with", "time", "zone"):
            base = _ZONED_TYPES[base]
            consumed.extend(_synthetic_words("with time zone"))
        elif cursor.accept_keywords("without", "time", "zone"):
            consumed.extend(_synthetic_words("without time zone"))

    depth = 0
    while (bracket := cursor.accept(TokenKind.LBRACKET)) is not None:
        size = cursor.accept(TokenKind.NUMBER)
        if cursor.accept(TokenKind.RBRACKET) is None:
            raise SchemaError.malformed_column(table, render_tokens(clause))
        consumed.append(bracket)
        if size is not None:
            consumed.append(size)
        consumed.append(Token(TokenKind.RBRACKET, "]", bracket.offset))
        depth += 1

    return render_tokens(consumed).lower(), base, depth


def _type_word(token: Token) -> str:
    return token.lower if token.kind is TokenKind.IDENT else token.value


def _wrap(opener: Token, params: Sequence[Token]) -> list[Token]:
    return [opener, *params, Token(TokenKind.RPAREN, ")", opener.offset)]


def _synthetic_words(phrase: str) -> list[Token]:
    return [Token(TokenKind.IDENT, word, -1, spaced=True) for word in phrase.split()]


def _find_override(table: str, column: str, modifiers: Sequence[Token]) -> str | None:
    """Return the type named by a ``/* @use <Type> */`` annotation, if any."""
    found: str | None = None
    for token in modifiers:
        if token.kind is not TokenKind.COMMENT:
            continue
        words = token.text[2:-2].split()
        if not words or words[0] != "@use":
            continue
        candidate = " ".join(words[1:])
        if len(words) != 2 or not candidate.isidentifier() or keyword.iskeyword(candidate):
            raise SchemaError.invalid_override(
                table, column, candidate, "expected /* @use <Identifier> */"
            )
        if found is not None and found != candidate:
            raise SchemaError.invalid_override(
                table, column, candidate, f"conflicts with earlier override '{found}'"
            )
        found = candidate
    return found
