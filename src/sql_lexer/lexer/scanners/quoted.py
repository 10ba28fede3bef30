"""Quoted region scanner mixin (strings and quoted identifiers)."""

from __future__ import annotations

from sql_lexer.config import Dialect
from sql_lexer.tokens import Token, TokenKind


class QuotedScannerMixin:
    """Mixin scanning '...', "..." and `...` regions.

    A doubled quote character is an escaped quote. A backslash followed by
    any character is an escape pair, but only inside string literals and
    only when the dialect enables backslash escapes. A region still open at
    end of input becomes a single MALFORMED token.

    """

    _source: str
    _source_len: int
    _pos: int
    _dialect: Dialect

    def _commit(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start: int) -> Token:
        raise NotImplementedError

    def _make_malformed(self, start: int, construct: str) -> Token:
        raise NotImplementedError

    def _quote_kind(self, quote: str) -> TokenKind:
        """Token kind a quote character opens under the current dialect."""
        if quote == "'":
            return TokenKind.STRING_LITERAL
        if quote == '"' and self._dialect.double_quote_strings:
            return TokenKind.STRING_LITERAL
        return TokenKind.QUOTED_IDENTIFIER

    def _scan_quoted(self, quote: str) -> Token:
        """Scan a quoted region starting at the current position."""
        source = self._source
        source_len = self._source_len
        start = self._pos
        kind = self._quote_kind(quote)
        backslash_escapes = (
            kind is TokenKind.STRING_LITERAL and self._dialect.backslash_escapes
        )

        pos = start + 1
        while pos < source_len:
            char = source[pos]
            if char == "\\" and backslash_escapes:
                pos += 2
                continue
            if char == quote:
                if pos + 1 < source_len and source[pos + 1] == quote:
                    pos += 2
                    continue
                self._commit(pos + 1)
                return self._make_token(kind, start)
            pos += 1

        self._commit(source_len)
        construct = "string literal" if kind is TokenKind.STRING_LITERAL else "quoted identifier"
        return self._make_malformed(start, construct)
