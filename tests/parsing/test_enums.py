"""Tests for CREATE TYPE ... AS ENUM extraction."""

import pytest

from ddlbind.core.errors import ErrorCode, SchemaError
from ddlbind.parsing.enums import extract_enum, is_create_type
from ddlbind.parsing.models import EnumType
from ddlbind.parsing.statements import split_statements


def parse(sql: str) -> EnumType:
    return extract_enum(split_statements(sql)[0])


class TestExtractEnum:
    """Enum extraction tests."""

    def test_given_enum_when_extracted_then_values_in_order(self) -> None:
        # Given
        sql = "CREATE TYPE user_status AS ENUM ('active', 'banned', 'pending');"

        # When
        enum = parse(sql)

        # Then
        assert enum.name == "user_status"
        assert enum.values == ("active", "banned", "pending")

    def test_given_escaped_quote_when_extracted_then_one_layer_stripped(self) -> None:
        enum = parse("create type t as enum ('it''s');")

        assert enum.values == ("it's",)

    def test_given_schema_qualified_name_when_extracted_then_bare_name(self) -> None:
        enum = parse("create type public.mood as enum ('sad');")

        assert enum.name == "mood"

    def test_given_multiline_enum_when_extracted_then_whitespace_ignored(self) -> None:
        enum = parse("create type mood as enum (\n  'sad',\n  'ok' /* default */\n);")

        assert enum.values == ("sad", "ok")

    def test_given_empty_enum_when_extracted_then_no_values(self) -> None:
        assert parse("create type mood as enum ();").values == ()

    def test_is_create_type(self) -> None:
        create, other = split_statements("create type a as enum ('x'); create table t (id int);")

        assert is_create_type(create)
        assert not is_create_type(other)


class TestExtractEnumErrors:
    """Malformed CREATE TYPE statements."""

    @pytest.mark.parametrize(
        ("sql", "code"),
        [
            ("create type;", ErrorCode.MISSING_IDENTIFIER),
            ("create type point as (x int, y int);", ErrorCode.UNSUPPORTED_CUSTOM_TYPE),
            ("create type span as range (subtype = int4);", ErrorCode.UNSUPPORTED_CUSTOM_TYPE),
            ("create type mood as enum ('sad';", ErrorCode.UNBALANCED_PARENTHESES),
            ("create type mood as enum ('sad', 'sad');", ErrorCode.DUPLICATE_DEFINITION),
            ("create type level as enum (1, 2);", ErrorCode.MALFORMED_ENUM_VALUE),
        ],
    )
    def test_error_codes(self, sql: str, code: ErrorCode) -> None:
        with pytest.raises(SchemaError) as exc_info:
            parse(sql)

        assert exc_info.value.code == code
