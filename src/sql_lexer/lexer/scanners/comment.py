"""Comment scanner mixin."""

from __future__ import annotations

from sql_lexer.charsets import LINE_TERMINATORS
from sql_lexer.tokens import Token, TokenKind


class CommentScannerMixin:
    """Mixin scanning line comments (-- and #) and block comments (/* */).

    Line comments run to the end of the line; the line terminator is not
    part of the comment. Block comments do not nest. An unclosed block
    comment becomes a MALFORMED token covering the rest of the input.

    """

    _source: str
    _source_len: int
    _pos: int

    def _commit(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start: int) -> Token:
        raise NotImplementedError

    def _make_malformed(self, start: int, construct: str) -> Token:
        raise NotImplementedError

    def _scan_line_comment(self) -> Token:
        """Scan a comment running to the end of the line."""
        source = self._source
        source_len = self._source_len
        start = self._pos

        pos = start + 1
        while pos < source_len and source[pos] not in LINE_TERMINATORS:
            pos += 1

        self._commit(pos)
        return self._make_token(TokenKind.COMMENT, start)

    def _scan_block_comment(self) -> Token:
        """Scan a /* ... */ comment."""
        start = self._pos
        close = self._source.find("*/", start + 2)
        if close == -1:
            self._commit(self._source_len)
            return self._make_malformed(start, "block comment")

        self._commit(close + 2)
        return self._make_token(TokenKind.COMMENT, start)
