"""DDL parsing: tokenizer, statement splitter, table and enum extractors."""

from ddlbind.parsing.enums import extract_enum, is_create_type
from ddlbind.parsing.lexer import Token, TokenKind, tokenize
from ddlbind.parsing.models import EnumType, Field, SchemaSnapshot, SourceFile, Table
from ddlbind.parsing.ops import parse_source
from ddlbind.parsing.primitives import Primitive, PrimitiveCategory, lookup_primitive
from ddlbind.parsing.statements import Statement, normalize_whitespace, split_statements
from ddlbind.parsing.tables import extract_table, is_create_table

__all__ = [
    "EnumType",
    "Field",
    "Primitive",
    "PrimitiveCategory",
    "SchemaSnapshot",
    "SourceFile",
    "Statement",
    "Table",
    "Token",
    "TokenKind",
    "extract_enum",
    "extract_table",
    "is_create_table",
    "is_create_type",
    "lookup_primitive",
    "normalize_whitespace",
    "parse_source",
    "split_statements",
    "tokenize",
]
