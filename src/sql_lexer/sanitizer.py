"""Structural scrubbing of SQL token sequences.

Replaces every literal value with a placeholder and drops comments while
keeping the statement's shape, so monitoring tools can record queries
without persisting the data inside them.

Example:
    >>> from sql_lexer import sanitize_string
    >>> sanitize_string("SELECT * FROM `users` WHERE id = 1 -- trace=abc")
    'SELECT * FROM `users` WHERE id = ?'

Policy (one pass over the tokens):
- STRING_LITERAL and NUMBER_LITERAL become one PLACEHOLDER each. Literals
  touching the previous replaced literal with no separator at all (only
  possible as a lexer artifact, e.g. ``1.2.3``) share its placeholder.
- COMMENT tokens are dropped. A dropped comment still separates its
  neighbours, so ``a/*x*/b`` becomes ``a b`` rather than ``ab``.
- Whitespace between two retained tokens becomes a single space; leading
  and trailing whitespace is dropped.
- MALFORMED fragments pass through unchanged unless redact_malformed is set.
- Everything else (words, identifiers, operators, punctuation, existing
  placeholders) passes through unchanged.

Thread Safety:
All functions are pure; Sanitizer holds only its immutable config.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from sql_lexer.config import DEFAULT_SANITIZE_CONFIG, Dialect, SanitizeConfig
from sql_lexer.lexer import lex
from sql_lexer.tokens import Token, TokenKind, TokenSequence
from sql_lexer.utils.logger import get_logger
from sql_lexer.writer import write

logger = get_logger(__name__)


class Sanitizer:
    """Applies a SanitizeConfig to token sequences.

    Usage:
            >>> from sql_lexer import lex
            >>> sanitizer = Sanitizer(SanitizeConfig(placeholder=":v"))
            >>> sanitizer.sanitize(lex("LIMIT 10")).write()
            'LIMIT :v'

    """

    __slots__ = ("_config",)

    def __init__(self, config: SanitizeConfig | None = None) -> None:
        self._config = config or DEFAULT_SANITIZE_CONFIG

    @property
    def config(self) -> SanitizeConfig:
        return self._config

    def sanitize(self, tokens: Iterable[Token]) -> TokenSequence:
        """Return a new, sanitized TokenSequence ending in EOF."""
        config = self._config
        out: list[Token] = []
        # First whitespace run or dropped comment since the last retained token
        gap: Token | None = None
        previous_replaced = False
        eof: Token | None = None

        for token in tokens:
            kind = token.kind
            if kind is TokenKind.EOF:
                eof = token
                break
            if kind is TokenKind.WHITESPACE or (
                kind is TokenKind.COMMENT and config.strip_comments
            ):
                if gap is None:
                    gap = token
                continue

            redact = token.is_literal or (
                kind is TokenKind.MALFORMED and config.redact_malformed
            )
            if redact and previous_replaced and gap is None:
                out[-1] = self._extend(out[-1], token)
                continue

            if kind is TokenKind.MALFORMED and not redact:
                logger.debug(
                    "Passing through malformed fragment at %s (%d characters)",
                    token.location,
                    len(token.text),
                )

            if gap is not None and out:
                out.append(self._separator(gap, out[-1]))
            gap = None
            out.append(self._placeholder(token) if redact else token)
            previous_replaced = redact

        if eof is None:
            end = out[-1].end if out else 0
            eof = Token(kind=TokenKind.EOF, text="", start=end, end=end)
        out.append(eof)
        return TokenSequence(tuple(out))

    def _placeholder(self, token: Token) -> Token:
        """PLACEHOLDER token standing in for a literal, keeping its span."""
        return dataclasses.replace(
            token,
            kind=TokenKind.PLACEHOLDER,
            text=self._config.placeholder,
            _location_cache=None,
        )

    def _extend(self, placeholder: Token, token: Token) -> Token:
        """Widen a placeholder's span over a directly touching literal."""
        return dataclasses.replace(
            placeholder,
            end=token.end,
            _end_lineno=token._end_lineno,
            _end_col=token._end_col,
            _location_cache=None,
        )

    def _separator(self, gap: Token, previous: Token) -> Token:
        """WHITESPACE token placed between two retained tokens."""
        if previous.kind is TokenKind.COMMENT and not previous.text.startswith("/*"):
            # A kept line comment must stay terminated by a line break
            text = "\n"
        elif self._config.collapse_whitespace or gap.kind is not TokenKind.WHITESPACE:
            text = " "
        else:
            text = gap.text
        return dataclasses.replace(
            gap, kind=TokenKind.WHITESPACE, text=text, _location_cache=None
        )


def sanitize(
    tokens: TokenSequence | Iterable[Token],
    *,
    config: SanitizeConfig | None = None,
) -> TokenSequence:
    """Scrub literals and comments from a token sequence.

    Never raises. The input sequence is not modified.

    Args:
        tokens: Lexer output (or any iterable of tokens)
        config: Sanitizer policy (DEFAULT_SANITIZE_CONFIG if None)

    Returns:
        New TokenSequence ending in EOF
    """
    return Sanitizer(config).sanitize(tokens)


def sanitize_string(
    source: str,
    *,
    dialect: Dialect | None = None,
    config: SanitizeConfig | None = None,
) -> str:
    """Lex, sanitize and write SQL text in one call.

    Args:
        source: SQL text
        dialect: Quoting/comment conventions for lexing
        config: Sanitizer policy

    Returns:
        Sanitized SQL text

    Example:
        >>> sanitize_string("INSERT INTO t VALUES (1, 2.5, 'x')")
        'INSERT INTO t VALUES (?, ?, ?)'
    """
    return write(sanitize(lex(source, dialect=dialect), config=config))
