"""Recursive-descent helpers over a token list.

Depth counting, not regex, locates parenthesis groups so nested type
parameters such as ``numeric(10,2)`` never split a column list.
"""

from __future__ import annotations

from collections.abc import Sequence

from ddlbind.parsing.lexer import Token, TokenKind

_OPENERS = (TokenKind.LPAREN, TokenKind.LBRACKET)
_CLOSERS = (TokenKind.RPAREN, TokenKind.RBRACKET)


class TokenCursor:
    """Forward-only cursor over a statement's tokens.

    Keyword and name lookups step over block comments; ``take_group`` and
    ``rest`` return raw tokens so annotations inside them survive.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _index(self, ahead: int) -> int | None:
        """Index of the *ahead*-th non-comment token from the cursor."""
        seen = -1
        for i in range(self._pos, len(self._tokens)):
            if self._tokens[i].kind is TokenKind.COMMENT:
                continue
            seen += 1
            if seen == ahead:
                return i
        return None

    def at_end(self) -> bool:
        return self._index(0) is None

    def peek(self, ahead: int = 0) -> Token | None:
        index = self._index(ahead)
        return None if index is None else self._tokens[index]

    def advance(self, count: int = 1) -> None:
        index = self._index(count - 1)
        self._pos = len(self._tokens) if index is None else index + 1

    def accept_keywords(self, *words: str) -> bool:
        """Consume a case-insensitive keyword sequence if it is next."""
        for offset, word in enumerate(words):
            token = self.peek(offset)
            if token is None or not token.is_keyword(word):
                return False
        self.advance(len(words))
        return True

    def accept(self, kind: TokenKind) -> Token | None:
        token = self.peek()
        if token is not None and token.kind is kind:
            self.advance()
            return token
        return None

    def read_name(self) -> str | None:
        """Read a possibly schema-qualified name and return its last part.

        Bare identifiers are returned as written; quoted identifiers are
        unquoted.
        """
        token = self.peek()
        if token is None or not token.is_word:
            return None
        self.advance()
        name = token.value
        while (dot := self.peek()) is not None and dot.kind is TokenKind.DOT:
            part = self.peek(1)
            if part is None or not part.is_word:
                break
            self.advance(2)
            name = part.value
        return name

    def take_group(self) -> list[Token] | None:
        """Consume the first balanced parenthesis group at or after the cursor.

        Returns the tokens between the outer parentheses, or None when no
        group opens or it never closes.
        """
        span = find_group(self._tokens, self._pos)
        if span is None:
            return None
        open_index, close_index = span
        self._pos = close_index + 1
        return self._tokens[open_index + 1 : close_index]

    def rest(self) -> list[Token]:
        remaining = self._tokens[self._pos :]
        self._pos = len(self._tokens)
        return remaining


def find_group(tokens: Sequence[Token], start: int = 0) -> tuple[int, int] | None:
    """Locate the first balanced ``( ... )`` group at or after *start*.

    Returns (open_index, close_index), or None if there is no opening
    parenthesis or it is never balanced.
    """
    open_index = next(
        (i for i in range(start, len(tokens)) if tokens[i].kind is TokenKind.LPAREN),
        None,
    )
    if open_index is None:
        return None

    depth = 0
    for i in range(open_index, len(tokens)):
        kind = tokens[i].kind
        if kind is TokenKind.LPAREN:
            depth += 1
        elif kind is TokenKind.RPAREN:
            depth -= 1
            if depth == 0:
                return open_index, i
    return None


def split_top_level(
    tokens: Sequence[Token], separator: TokenKind = TokenKind.COMMA
) -> list[list[Token]]:
    """Split on *separator* tokens that are not nested in ( ) or [ ]."""
    pieces: list[list[Token]] = [[]]
    depth = 0
    for token in tokens:
        if token.kind in _OPENERS:
            depth += 1
        elif token.kind in _CLOSERS:
            depth = max(0, depth - 1)
        elif token.kind is separator and depth == 0:
            pieces.append([])
            continue
        pieces[-1].append(token)
    return pieces


def top_level(tokens: Sequence[Token]) -> list[Token]:
    """Tokens outside any ( ) or [ ] nesting."""
    result: list[Token] = []
    depth = 0
    for token in tokens:
        if token.kind in _OPENERS:
            depth += 1
        elif token.kind in _CLOSERS:
            depth = max(0, depth - 1)
        elif depth == 0:
            result.append(token)
    return result
