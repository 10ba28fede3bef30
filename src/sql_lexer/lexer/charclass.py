"""Character classes driving the lexer's dispatch.

Every token is classified by its first character. A few classes (DOT,
DASH, SLASH, HASH, PARAMETER_MARKER) need one character of lookahead to
pick between two token kinds; the lexer core resolves those.
"""

from __future__ import annotations

from enum import Enum, auto

from sql_lexer.charsets import (
    DIGITS,
    PARAMETER_MARKERS,
    PUNCTUATION,
    QUOTES,
    WHITESPACE,
    is_word_start,
)


class CharClass(Enum):
    """Class of the character at the scan position."""

    WHITESPACE = auto()
    QUOTE = auto()  # ' " `
    DIGIT = auto()  # 0-9
    DOT = auto()  # . (number or punctuation)
    WORD = auto()  # letter, underscore
    DASH = auto()  # - (line comment or operator)
    SLASH = auto()  # / (block comment or operator)
    HASH = auto()  # # (line comment or operator)
    QUESTION = auto()  # ?
    PARAMETER_MARKER = auto()  # : $ @ (placeholder or operator)
    PUNCTUATION = auto()
    SYMBOL = auto()  # anything else


def _classify_slow(char: str) -> CharClass:
    if char in WHITESPACE:
        return CharClass.WHITESPACE
    if char in QUOTES:
        return CharClass.QUOTE
    if char in DIGITS:
        return CharClass.DIGIT
    if char == ".":
        return CharClass.DOT
    if is_word_start(char):
        return CharClass.WORD
    if char == "-":
        return CharClass.DASH
    if char == "/":
        return CharClass.SLASH
    if char == "#":
        return CharClass.HASH
    if char == "?":
        return CharClass.QUESTION
    if char in PARAMETER_MARKERS:
        return CharClass.PARAMETER_MARKER
    if char in PUNCTUATION:
        return CharClass.PUNCTUATION
    return CharClass.SYMBOL


# Precomputed table for ASCII, the overwhelmingly common case
_ASCII_CLASSES: dict[str, CharClass] = {chr(i): _classify_slow(chr(i)) for i in range(128)}


def classify_char(char: str) -> CharClass:
    """Classify a single character.

    O(1) dict lookup for ASCII; Unicode falls back to str.isalnum().
    """
    char_class = _ASCII_CLASSES.get(char)
    if char_class is None:
        return _classify_slow(char)
    return char_class
