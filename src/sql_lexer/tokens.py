"""Token, TokenKind and TokenSequence definitions for the SQL lexer.

The lexer produces a TokenSequence of Token objects that the writer and
sanitizer consume. Each Token has a kind, the exact source text it covers,
and its span in the original input.

Thread Safety:
Token and TokenSequence are frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens are written or sanitized without their location ever being read.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from sql_lexer.config import SanitizeConfig
    from sql_lexer.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    A closed set; no keyword table is involved, so SELECT and a table
    name are both WORD tokens.

    """

    # Identifiers and keywords
    WORD = auto()  # SELECT, users, _tmp1
    QUOTED_IDENTIFIER = auto()  # `table` or "table"

    # Literals
    STRING_LITERAL = auto()  # 'it''s'
    NUMBER_LITERAL = auto()  # 1, 2.5, .5, 1e-3, 0xFF

    # Symbols
    OPERATOR = auto()  # = <> <= || :: + - *
    PUNCTUATION = auto()  # . , ( ) ; [ ] { }

    # Bound parameters
    PLACEHOLDER = auto()  # ?, :name, $1, @name

    # Trivia
    COMMENT = auto()  # -- line, # line, /* block */
    WHITESPACE = auto()  # run of spaces, tabs, newlines

    # Unterminated quoted region or block comment at end of input
    MALFORMED = auto()

    # Zero-width terminal sentinel
    EOF = auto()


LITERAL_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.STRING_LITERAL, TokenKind.NUMBER_LITERAL}
)

TRIVIA_KINDS: frozenset[TokenKind] = frozenset({TokenKind.WHITESPACE, TokenKind.COMMENT})


@dataclass(frozen=True, slots=True)
class Token:
    """One classified unit of lexical text.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The exact source text (replacement text for sanitized tokens)
        start: Start offset in the original input
        end: End offset in the original input (exclusive)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _end_lineno: End line number (for multi-line tokens)
        _end_col: End column

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy location cache uses an idempotent write.

    """

    kind: TokenKind
    text: str
    start: int
    end: int
    _lineno: int = 1
    _col: int = 1
    _end_lineno: int | None = None
    _end_col: int | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) offsets into the original input."""
        return (self.start, self.end)

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from sql_lexer.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.start,
            end_offset=self.end,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def is_literal(self) -> bool:
        """True for string and number literals (the sensitive kinds)."""
        return self.kind in LITERAL_KINDS

    @property
    def is_trivia(self) -> bool:
        """True for whitespace and comments."""
        return self.kind in TRIVIA_KINDS

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.start}:{self.end})"


@dataclass(frozen=True, slots=True)
class TokenSequence:
    """Ordered, immutable collection of tokens.

    Produced by the lexer (one per input string) and by the sanitizer (a
    new, independent sequence). Both always end in a single EOF token.

    Usage:
            >>> from sql_lexer import lex
            >>> seq = lex("SELECT 1")
            >>> [t.kind.name for t in seq]
            ['WORD', 'WHITESPACE', 'NUMBER_LITERAL', 'EOF']
            >>> seq.write()
            'SELECT 1'

    """

    tokens: tuple[Token, ...] = ()

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Token, ...]: ...

    def __getitem__(self, index: int | slice) -> Token | tuple[Token, ...]:
        return self.tokens[index]

    def kinds(self) -> list[TokenKind]:
        """Token kinds in order (handy for assertions and debugging)."""
        return [token.kind for token in self.tokens]

    def significant(self) -> list[Token]:
        """Tokens that are neither trivia nor the EOF sentinel."""
        return [t for t in self.tokens if not t.is_trivia and t.kind is not TokenKind.EOF]

    def write(self) -> str:
        """Serialize back to text. See sql_lexer.writer.write."""
        from sql_lexer.writer import write

        return write(self)

    def sanitize(self, config: SanitizeConfig | None = None) -> TokenSequence:
        """Return a sanitized copy. See sql_lexer.sanitizer.sanitize."""
        from sql_lexer.sanitizer import sanitize

        return sanitize(self, config=config)
