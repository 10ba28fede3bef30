"""Word and placeholder scanner mixin."""

from __future__ import annotations

from sql_lexer.charsets import DIGITS, is_word_char
from sql_lexer.tokens import Token, TokenKind


class WordScannerMixin:
    """Mixin scanning words and bound-parameter placeholders.

    Words are runs of letters, digits and underscores. No keyword table is
    consulted: SELECT and users are both WORD tokens.

    Placeholders:
    - ? and its numbered form ?1
    - :name, $1, @name (marker followed by a word run)

    """

    _source: str
    _source_len: int
    _pos: int

    def _commit(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start: int) -> Token:
        raise NotImplementedError

    def _word_end(self, pos: int) -> int:
        """Position just past the word run starting at pos."""
        source = self._source
        source_len = self._source_len
        while pos < source_len and is_word_char(source[pos]):
            pos += 1
        return pos

    def _scan_word(self) -> Token:
        """Scan an identifier or keyword."""
        start = self._pos
        self._commit(self._word_end(start + 1))
        return self._make_token(TokenKind.WORD, start)

    def _scan_question_placeholder(self) -> Token:
        """Scan ? with its optional position digits (?1)."""
        source = self._source
        source_len = self._source_len
        start = self._pos

        pos = start + 1
        while pos < source_len and source[pos] in DIGITS:
            pos += 1

        self._commit(pos)
        return self._make_token(TokenKind.PLACEHOLDER, start)

    def _scan_named_placeholder(self) -> Token:
        """Scan a :name, $n or @name placeholder.

        The caller has checked that a word character follows the marker.
        """
        start = self._pos
        self._commit(self._word_end(start + 1))
        return self._make_token(TokenKind.PLACEHOLDER, start)
