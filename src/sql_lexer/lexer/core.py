"""State-machine SQL lexer with O(n) guaranteed performance.

A single left-to-right scan. At each position the current character is
classified and dispatched to one scanner, which consumes at least one
character and returns a token. There is no backtracking; lookahead is at
most a few characters (comment openers, compound operators, exponents).

Malformed input never raises: an unterminated string, quoted identifier
or block comment becomes a MALFORMED token holding the rest of the input.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from sql_lexer.charsets import DIGITS, is_word_char
from sql_lexer.config import DEFAULT_DIALECT, Dialect
from sql_lexer.lexer.charclass import CharClass, classify_char
from sql_lexer.lexer.scanners import (
    CommentScannerMixin,
    NumericScannerMixin,
    QuotedScannerMixin,
    SymbolScannerMixin,
    WordScannerMixin,
)
from sql_lexer.tokens import Token, TokenKind, TokenSequence
from sql_lexer.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    QuotedScannerMixin,
    NumericScannerMixin,
    CommentScannerMixin,
    WordScannerMixin,
    SymbolScannerMixin,
):
    """State-machine SQL lexer.

    Usage:
            >>> lexer = Lexer("SELECT 1")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(WORD, 'SELECT', 0:6)
        Token(WHITESPACE, ' ', 6:7)
        Token(NUMBER_LITERAL, '1', 7:8)
        Token(EOF, '', 8:8)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_saved_lineno",
        "_saved_col",
        "_dialect",
    )

    def __init__(self, source: str, dialect: Dialect | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: SQL text
            dialect: Quoting/comment conventions (DEFAULT_DIALECT if None)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1
        self._dialect = dialect or DEFAULT_DIALECT

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream ending in EOF.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            self._save_location()
            yield self._dispatch_char()

        yield self._make_token_at_current(TokenKind.EOF)

    def _dispatch_char(self) -> Token:
        """Pick the scanner for the character at the current position."""
        char = self._source[self._pos]
        char_class = classify_char(char)

        if char_class is CharClass.WHITESPACE:
            return self._scan_whitespace()
        if char_class is CharClass.WORD:
            return self._scan_word()
        if char_class is CharClass.DIGIT:
            return self._scan_number()
        if char_class is CharClass.QUOTE:
            return self._scan_quoted(char)

        next_char = self._peek(1)
        if char_class is CharClass.DOT:
            if next_char in DIGITS:
                return self._scan_number()
        elif char_class is CharClass.DASH:
            if next_char == "-":
                return self._scan_line_comment()
        elif char_class is CharClass.SLASH:
            if next_char == "*":
                return self._scan_block_comment()
        elif char_class is CharClass.HASH:
            if self._dialect.hash_comments and next_char != ">":
                return self._scan_line_comment()
        elif char_class is CharClass.QUESTION:
            return self._scan_question_placeholder()
        elif char_class is CharClass.PARAMETER_MARKER:
            if next_char and is_word_char(next_char):
                return self._scan_named_placeholder()

        return self._scan_symbol()

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Character at pos + offset, or empty string past the end."""
        pos = self._pos + offset
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _commit(self, end: int) -> None:
        """Advance position to end, updating line/column tracking.

        Line breaks are \\n, \\r\\n and a lone \\r. No scanner stops between
        the two characters of a \\r\\n pair, so counting per segment is exact.

        Uses C-optimized str.count/str.rfind on the consumed segment
        instead of a character-by-character loop.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if "\r" in segment:
            newline_count += segment.count("\r") - segment.count("\r\n")
        if newline_count:
            self._lineno += newline_count
            self._col = len(segment) - max(segment.rfind("\n"), segment.rfind("\r"))
        else:
            self._col += len(segment)
        self._pos = end

    # =========================================================================
    # Token construction
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location; call before scanning each token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, kind: TokenKind, start: int) -> Token:
        """Create a token covering source[start:pos]."""
        return Token(
            kind=kind,
            text=self._source[start : self._pos],
            start=start,
            end=self._pos,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _end_lineno=self._lineno,
            _end_col=self._col,
        )

    def _make_malformed(self, start: int, construct: str) -> Token:
        """Create a MALFORMED token covering source[start:pos]."""
        token = self._make_token(TokenKind.MALFORMED, start)
        logger.debug(
            "Unterminated %s at %s (%d characters to end of input)",
            construct,
            token.location,
            len(token.text),
        )
        return token

    def _make_token_at_current(self, kind: TokenKind) -> Token:
        """Create a zero-width token at the current position (EOF)."""
        return Token(
            kind=kind,
            text="",
            start=self._pos,
            end=self._pos,
            _lineno=self._lineno,
            _col=self._col,
            _end_lineno=self._lineno,
            _end_col=self._col,
        )


def lex(source: str, *, dialect: Dialect | None = None) -> TokenSequence:
    """Lex SQL text into an immutable TokenSequence.

    Never raises; unterminated constructs become MALFORMED tokens.

    Args:
        source: SQL text
        dialect: Quoting/comment conventions (DEFAULT_DIALECT if None)

    Returns:
        TokenSequence ending in a single EOF token
    """
    return TokenSequence(tuple(Lexer(source, dialect).tokenize()))
