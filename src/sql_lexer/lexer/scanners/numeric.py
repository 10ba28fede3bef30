"""Numeric literal scanner mixin."""

from __future__ import annotations

from sql_lexer.charsets import BINARY_DIGITS, DIGITS, EXPONENT_MARKERS, HEX_DIGITS, SIGNS
from sql_lexer.tokens import Token, TokenKind


class NumericScannerMixin:
    """Mixin scanning numeric literals.

    Accepted forms:
    - integers: 42
    - decimals: 2.5, 1., .5 (at most one dot)
    - exponents: 1e10, 2.5E-3 (exponent needs at least one digit)
    - hex and binary: 0xFF, 0b101

    Scanning stops at the first character that cannot extend the literal;
    that character starts the next token.

    """

    _source: str
    _source_len: int
    _pos: int

    def _commit(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start: int) -> Token:
        raise NotImplementedError

    def _scan_radix_end(self, start: int) -> int:
        """End of a 0x/0b literal at start, or -1 if there is none."""
        source = self._source
        source_len = self._source_len
        if source[start] != "0" or start + 2 >= source_len:
            return -1

        marker = source[start + 1]
        if marker in "xX":
            digits = HEX_DIGITS
        elif marker in "bB":
            digits = BINARY_DIGITS
        else:
            return -1

        pos = start + 2
        if source[pos] not in digits:
            return -1
        while pos < source_len and source[pos] in digits:
            pos += 1
        return pos

    def _scan_number(self) -> Token:
        """Scan a numeric literal starting with a digit or '.' + digit."""
        source = self._source
        source_len = self._source_len
        start = self._pos

        radix_end = self._scan_radix_end(start)
        if radix_end != -1:
            self._commit(radix_end)
            return self._make_token(TokenKind.NUMBER_LITERAL, start)

        pos = start
        while pos < source_len and source[pos] in DIGITS:
            pos += 1

        if pos < source_len and source[pos] == ".":
            pos += 1
            while pos < source_len and source[pos] in DIGITS:
                pos += 1

        # Exponent: only consumed when at least one digit follows
        if pos < source_len and source[pos] in EXPONENT_MARKERS:
            exp = pos + 1
            if exp < source_len and source[exp] in SIGNS:
                exp += 1
            if exp < source_len and source[exp] in DIGITS:
                pos = exp
                while pos < source_len and source[pos] in DIGITS:
                    pos += 1

        self._commit(pos)
        return self._make_token(TokenKind.NUMBER_LITERAL, start)
