"""Tests for the DDL tokenizer."""

import pytest

from ddlbind.core.errors import ErrorCode, SchemaError
from ddlbind.parsing.lexer import TokenKind, render_tokens, tokenize


def kinds(text: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(text)]


class TestTokenize:
    """Token classification tests."""

    def test_given_column_definition_when_tokenized_then_kinds_in_order(self) -> None:
        """Identifiers, punctuation and numbers are classified."""
        # Given
        text = "id varchar(21) not null,"

        # When
        result = kinds(text)

        # Then
        assert result == [
            TokenKind.IDENT,
            TokenKind.IDENT,
            TokenKind.LPAREN,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
            TokenKind.IDENT,
            TokenKind.IDENT,
            TokenKind.COMMA,
        ]

    def test_given_semicolon_in_string_when_tokenized_then_single_string_token(self) -> None:
        """A semicolon inside a string literal stays inside the literal."""
        tokens = tokenize("'a;b'")

        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.STRING
        assert tokens[0].value == "a;b"

    def test_given_doubled_quote_when_tokenized_then_value_unescaped(self) -> None:
        tokens = tokenize("'it''s'")

        assert tokens[0].value == "it's"

    def test_given_escape_string_prefix_when_tokenized_then_value_unquoted(self) -> None:
        tokens = tokenize("E'tab'")

        assert tokens[0].kind is TokenKind.STRING
        assert tokens[0].value == "tab"

    def test_given_quoted_identifier_when_tokenized_then_value_keeps_case(self) -> None:
        tokens = tokenize('"UserName"')

        assert tokens[0].kind is TokenKind.QUOTED_IDENT
        assert tokens[0].value == "UserName"
        assert tokens[0].is_word

    def test_given_line_comment_when_tokenized_then_dropped(self) -> None:
        """-- comments never reach the token stream, even with semicolons."""
        result = kinds("a -- b; c\nd")

        assert result == [TokenKind.IDENT, TokenKind.IDENT]

    def test_given_block_comment_when_tokenized_then_kept(self) -> None:
        """Block comments are kept because they carry override annotations."""
        tokens = tokenize("text /* @use RoleNames; */")

        assert [t.kind for t in tokens] == [TokenKind.IDENT, TokenKind.COMMENT]
        assert tokens[1].text == "/* @use RoleNames; */"

    @pytest.mark.parametrize(
        "text",
        ["'unclosed", '"unclosed', "/* unclosed"],
    )
    def test_given_unterminated_literal_when_tokenized_then_raises(self, text: str) -> None:
        with pytest.raises(SchemaError) as exc_info:
            tokenize(text)

        assert exc_info.value.code == ErrorCode.UNTERMINATED_LITERAL

    def test_is_keyword_is_case_insensitive(self) -> None:
        token = tokenize("CREATE")[0]

        assert token.is_keyword("create")
        assert not token.is_keyword("table")


class TestRenderTokens:
    """Whitespace-normalised rendering tests."""

    def test_collapses_whitespace_runs(self) -> None:
        tokens = tokenize("id   varchar( 21 )\n\tnot   null")

        assert render_tokens(tokens) == "id varchar( 21 ) not null"

    def test_keeps_adjacent_tokens_joined(self) -> None:
        tokens = tokenize("numeric(10,2)")

        assert render_tokens(tokens) == "numeric(10,2)"
