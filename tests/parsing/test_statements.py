"""Tests for statement splitting."""

from ddlbind.parsing.statements import normalize_whitespace, split_statements


class TestSplitStatements:
    """Top-level semicolon splitting tests."""

    def test_given_two_statements_when_split_then_two_results(self) -> None:
        # Given
        text = "create table a (id int);\ncreate table b (id int);"

        # When
        statements = split_statements(text)

        # Then
        assert [s.text for s in statements] == [
            "create table a (id int)",
            "create table b (id int)",
        ]

    def test_given_semicolon_in_string_when_split_then_not_a_boundary(self) -> None:
        """Semicolons in literals and comments never split statements."""
        text = "create type t as enum ('a;b'); /* x; y */ create table c (id int);"

        statements = split_statements(text)

        assert len(statements) == 2
        assert statements[0].text == "create type t as enum ('a;b')"
        assert statements[1].starts_with("create", "table")

    def test_given_empty_statements_when_split_then_dropped(self) -> None:
        statements = split_statements(";;  \n ; create table a (id int);;")

        assert len(statements) == 1

    def test_given_missing_final_semicolon_when_split_then_trailing_statement_kept(self) -> None:
        statements = split_statements("create table a (id int)")

        assert [s.text for s in statements] == ["create table a (id int)"]

    def test_given_line_comment_only_when_split_then_nothing(self) -> None:
        assert split_statements("-- nothing to see;\n") == []

    def test_given_block_comment_statement_when_split_then_comment_only(self) -> None:
        statements = split_statements("/* header */;")

        assert len(statements) == 1
        assert statements[0].is_comment_only

    def test_whitespace_is_normalised(self) -> None:
        statements = split_statements("CREATE   TABLE\n\n  a\t(id int);")

        assert statements[0].text == "CREATE TABLE a (id int)"


class TestStartsWith:
    """Leading keyword matching tests."""

    def test_given_mixed_case_when_matched_then_true(self) -> None:
        statement = split_statements("Create Table a (id int);")[0]

        assert statement.starts_with("create", "table")
        assert not statement.starts_with("create", "type")

    def test_given_leading_comment_when_matched_then_comment_ignored(self) -> None:
        statement = split_statements("/* users */ create table a (id int);")[0]

        assert statement.starts_with("create", "table")

    def test_given_shorter_statement_when_matched_then_false(self) -> None:
        statement = split_statements("create;")[0]

        assert not statement.starts_with("create", "table")


def test_normalize_whitespace() -> None:
    assert normalize_whitespace("  a \n\t b  ") == "a b"
