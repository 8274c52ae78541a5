"""Statement splitting.

Slices a DDL document into statements on top-level semicolons. Semicolons
inside string literals, quoted identifiers and comments never split.
"""

from __future__ import annotations

from dataclasses import dataclass

from ddlbind.parsing.lexer import Token, TokenKind, render_tokens, tokenize


@dataclass(frozen=True, slots=True)
class Statement:
    """One DDL statement: its tokens plus whitespace-normalised text."""

    tokens: tuple[Token, ...]
    text: str

    @property
    def is_comment_only(self) -> bool:
        return all(t.kind is TokenKind.COMMENT for t in self.tokens)

    def starts_with(self, *words: str) -> bool:
        """Case-insensitive match of the leading keywords, ignoring comments."""
        leading = [t for t in self.tokens if t.kind is not TokenKind.COMMENT][: len(words)]
        return len(leading) == len(words) and all(
            t.is_keyword(w) for t, w in zip(leading, words, strict=True)
        )


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return " ".join(text.split())


def split_statements(text: str) -> list[Statement]:
    """Split DDL text into normalised statements, dropping empty ones."""
    statements: list[Statement] = []
    current: list[Token] = []

    for token in tokenize(text):
        if token.kind is TokenKind.SEMICOLON:
            if current:
                statements.append(Statement(tuple(current), render_tokens(current)))
            current = []
            continue
        current.append(token)

    if current:
        statements.append(Statement(tuple(current), render_tokens(current)))

    return statements
