"""Tests for error types and codes."""

import pytest

from ddlbind.core.errors import (
    ConfigError,
    DdlBindError,
    ErrorCode,
    InternalError,
    SchemaError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.MISSING_IDENTIFIER, 3000),
            (ErrorCode.UNRESOLVED_FIELD_TYPE, 3000),
            (ErrorCode.MALFORMED_ENUM_VALUE, 3000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestDdlBindError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        # Given
        error = DdlBindError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_code_name_and_message(self) -> None:
        error = SchemaError.unresolved_field_type("users", "geo", "geometry")

        assert str(error) == (
            "[3005] UNRESOLVED_FIELD_TYPE: Type 'geometry' of users.geo is neither "
            "a primitive nor a declared enum"
        )

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(DdlBindError):
            raise ConfigError.missing_required("generator.input_dir")


class TestSchemaError:
    """Schema error factory tests."""

    def test_with_source_prefixes_message_and_tags_details(self) -> None:
        # Given
        error = SchemaError.malformed_column("users", "id")

        # When
        tagged = error.with_source("users.sql")

        # Then
        assert tagged is not error
        assert isinstance(tagged, SchemaError)
        assert tagged.code == ErrorCode.MALFORMED_COLUMN
        assert tagged.message == f"users.sql: {error.message}"
        assert tagged.details == {"table": "users", "clause": "id", "source": "users.sql"}
        assert "source" not in error.details

    def test_long_statements_are_excerpted_in_message(self) -> None:
        statement = "create table " + "x" * 200

        error = SchemaError.unbalanced_parentheses(statement)

        assert len(error.message) < 120
        assert error.message.endswith("...")
        assert error.details["statement"] == statement

    def test_ambiguous_generated_name_lists_sources(self) -> None:
        error = SchemaError.ambiguous_generated_name("User", ["users", "user"])

        assert "'users'" in error.message
        assert "'user'" in error.message
        assert error.details == {"generated": "User", "sources": ["users", "user"]}

    def test_duplicate_definition_with_scope(self) -> None:
        error = SchemaError.duplicate_definition("column", "id", "table 'users'")

        assert error.message == "Duplicate column 'id' in table 'users'"

    def test_duplicate_definition_without_scope(self) -> None:
        assert SchemaError.duplicate_definition("table", "users").message == (
            "Duplicate table 'users'"
        )


class TestInternalError:
    def test_unexpected_carries_details(self) -> None:
        error = InternalError.unexpected("boom", stage="render")

        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {"stage": "render"}
