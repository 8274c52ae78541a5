"""CREATE TYPE ... AS ENUM extraction.

Only enum custom types are supported; composite, range and base type
declarations are rejected rather than silently skipped.
"""

from __future__ import annotations

from ddlbind.core.errors import SchemaError
from ddlbind.parsing.cursor import TokenCursor, split_top_level
from ddlbind.parsing.lexer import Token, TokenKind, render_tokens
from ddlbind.parsing.models import EnumType
from ddlbind.parsing.statements import Statement


def is_create_type(statement: Statement) -> bool:
    return statement.starts_with("create", "type")


def extract_enum(statement: Statement) -> EnumType:
    """Extract the name and labels of a CREATE TYPE ... AS ENUM statement.

    Raises:
        SchemaError: MISSING_IDENTIFIER, UNSUPPORTED_CUSTOM_TYPE,
            UNBALANCED_PARENTHESES, MALFORMED_ENUM_VALUE or DUPLICATE_DEFINITION.
    """
    cursor = TokenCursor(statement.tokens)
    cursor.accept_keywords("create", "type")

    name = cursor.read_name()
    if name is None:
        raise SchemaError.missing_identifier("type", statement.text)

    if not cursor.accept_keywords("as", "enum"):
        raise SchemaError.unsupported_custom_type(name, statement.text)

    body = cursor.take_group()
    if body is None:
        raise SchemaError.unbalanced_parentheses(statement.text)

    values: list[str] = []
    if TokenCursor(body).peek() is not None:
        for piece in split_top_level(body):
            label = _label(name, piece)
            if label in values:
                raise SchemaError.duplicate_definition("enum value", label, f"type '{name}'")
            values.append(label)

    return EnumType(name=name, values=tuple(values))


def _label(enum_name: str, piece: list[Token]) -> str:
    """Literal value of one list element, with one layer of quotes stripped."""
    tokens = [t for t in piece if t.kind is not TokenKind.COMMENT]
    if len(tokens) == 1 and tokens[0].kind in (TokenKind.STRING, TokenKind.QUOTED_IDENT):
        return tokens[0].value
    if len(tokens) == 1 and tokens[0].kind is TokenKind.IDENT:
        return tokens[0].text
    raise SchemaError.malformed_enum_value(enum_name, render_tokens(piece))
