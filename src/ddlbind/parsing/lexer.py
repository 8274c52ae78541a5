"""DDL tokenizer.

Produces a flat token stream for the statement splitter and extractors.
Block comments are kept as tokens because they carry ``/* @use T */``
override annotations; ``--`` line comments are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ddlbind.core.errors import SchemaError


class TokenKind(Enum):
    IDENT = "ident"
    QUOTED_IDENT = "quoted_ident"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    SEMICOLON = ";"
    DOT = "."
    OP = "op"


_PUNCTUATION = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ".": TokenKind.DOT,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical token.

    ``spaced`` is True when whitespace or a comment separated this token
    from the previous one; it drives whitespace-normalised rendering.
    """

    kind: TokenKind
    text: str
    offset: int
    spaced: bool = False

    @property
    def is_word(self) -> bool:
        return self.kind in (TokenKind.IDENT, TokenKind.QUOTED_IDENT)

    @property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def value(self) -> str:
        """Unquoted value of identifiers and string literals."""
        if self.kind is TokenKind.QUOTED_IDENT:
            return self.text[1:-1].replace('""', '"')
        if self.kind is TokenKind.STRING:
            body = self.text[1:] if self.text[0] in "eE" else self.text
            return body[1:-1].replace("''", "'")
        return self.text

    def is_keyword(self, word: str) -> bool:
        return self.kind is TokenKind.IDENT and self.lower == word


def _is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_ident_part(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


def _scan_quoted(text: str, start: int, quote: str) -> int:
    """Return the index just past the closing quote; doubled quotes escape."""
    i = start + 1
    length = len(text)
    while i < length:
        if text[i] == quote:
            if i + 1 < length and text[i + 1] == quote:
                i += 2
                continue
            return i + 1
        i += 1
    kind = "string literal" if quote == "'" else "quoted identifier"
    raise SchemaError.unterminated_literal(kind, start)


def tokenize(text: str) -> list[Token]:
    """Split DDL text into tokens.

    Raises:
        SchemaError: UNTERMINATED_LITERAL for an unclosed string, quoted
            identifier or block comment.
    """
    tokens: list[Token] = []
    i = 0
    length = len(text)
    spaced = False

    while i < length:
        ch = text[i]

        if ch.isspace():
            spaced = True
            i += 1
            continue

        if text.startswith("--", i):
            end = text.find("\n", i)
            i = length if end == -1 else end + 1
            spaced = True
            continue

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise SchemaError.unterminated_literal("block comment", i)
            tokens.append(Token(TokenKind.COMMENT, text[i : end + 2], i, spaced))
            i = end + 2
            spaced = True
            continue

        start = i
        if ch == "'" or (ch in "eE" and text.startswith("'", i + 1)):
            quote_at = i if ch == "'" else i + 1
            i = _scan_quoted(text, quote_at, "'")
            kind = TokenKind.STRING
        elif ch == '"':
            i = _scan_quoted(text, i, '"')
            kind = TokenKind.QUOTED_IDENT
        elif _is_ident_start(ch):
            while i < length and _is_ident_part(text[i]):
                i += 1
            kind = TokenKind.IDENT
        elif ch.isdigit():
            while i < length and (text[i].isdigit() or text[i] == "."):
                i += 1
            kind = TokenKind.NUMBER
        elif ch in _PUNCTUATION:
            i += 1
            kind = _PUNCTUATION[ch]
        else:
            i += 1
            kind = TokenKind.OP

        tokens.append(Token(kind, text[start:i], start, spaced))
        spaced = False

    return tokens


def render_tokens(tokens: list[Token] | tuple[Token, ...]) -> str:
    """Render tokens back to text with whitespace runs collapsed to one space."""
    parts: list[str] = []
    for token in tokens:
        if parts and token.spaced:
            parts.append(" ")
        parts.append(token.text)
    return "".join(parts)
