"""Whitespace, operator and punctuation scanner mixin."""

from __future__ import annotations

from sql_lexer.charsets import (
    PUNCTUATION,
    THREE_CHAR_OPERATORS,
    TWO_CHAR_OPERATORS,
    WHITESPACE,
)
from sql_lexer.tokens import Token, TokenKind


class SymbolScannerMixin:
    """Mixin scanning whitespace runs and symbol tokens.

    Compound operators match greedily: three characters, then two, then a
    single character. Punctuation is always a single character.

    """

    _source: str
    _source_len: int
    _pos: int

    def _commit(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start: int) -> Token:
        raise NotImplementedError

    def _scan_whitespace(self) -> Token:
        """Scan a maximal run of whitespace into one token."""
        source = self._source
        source_len = self._source_len
        start = self._pos

        pos = start + 1
        while pos < source_len and source[pos] in WHITESPACE:
            pos += 1

        self._commit(pos)
        return self._make_token(TokenKind.WHITESPACE, start)

    def _scan_symbol(self) -> Token:
        """Scan punctuation or an operator at the current position."""
        source = self._source
        start = self._pos

        if source[start] in PUNCTUATION:
            self._commit(start + 1)
            return self._make_token(TokenKind.PUNCTUATION, start)

        if source[start : start + 3] in THREE_CHAR_OPERATORS:
            end = start + 3
        elif source[start : start + 2] in TWO_CHAR_OPERATORS:
            end = start + 2
        else:
            end = start + 1

        self._commit(end)
        return self._make_token(TokenKind.OPERATOR, start)
