"""Token sequence serialization.

write() is pure concatenation of token texts: no escaping, no
re-validation, no normalization. For lexer output the result is the
original input, byte for byte (MALFORMED tokens keep their raw text, so
this holds even for truncated SQL). For sanitizer output it is the
sanitized query.

Thread Safety:
SqlWriter instances are local to each write() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable

from sql_lexer.tokens import Token


class SqlWriter:
    """Accumulates token texts and joins once at the end.

    O(n) total vs O(n²) for repeated string concatenation, which matters
    for multi-megabyte INSERT ... VALUES batches.

    Usage:
            >>> from sql_lexer import lex
            >>> writer = SqlWriter()
            >>> writer.extend(lex("SELECT 1")).build()
            'SELECT 1'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, token: Token) -> SqlWriter:
        """Append one token's text (zero-width tokens are skipped)."""
        if token.text:
            self._parts.append(token.text)
        return self

    def extend(self, tokens: Iterable[Token]) -> SqlWriter:
        """Append every token's text in order."""
        self._parts.extend(token.text for token in tokens if token.text)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)


def write(tokens: Iterable[Token]) -> str:
    """Serialize tokens back into SQL text.

    Args:
        tokens: A TokenSequence or any iterable of tokens

    Returns:
        Concatenation of the token texts in order
    """
    return SqlWriter().extend(tokens).build()
