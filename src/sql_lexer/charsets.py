"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from sql_lexer.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

# Whitespace collapsed into a single WHITESPACE token
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Line comments end before either of these
LINE_TERMINATORS: frozenset[str] = frozenset("\n\r")

# ASCII digits start numeric literals; Unicode digits are word characters
DIGITS: frozenset[str] = frozenset("0123456789")

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

BINARY_DIGITS: frozenset[str] = frozenset("01")

EXPONENT_MARKERS: frozenset[str] = frozenset("eE")

SIGNS: frozenset[str] = frozenset("+-")

# Quote characters that open a quoted region
QUOTES: frozenset[str] = frozenset("'\"`")

# Markers that start a named or numbered placeholder when a word follows
PARAMETER_MARKERS: frozenset[str] = frozenset(":$@")

# Structural punctuation (everything else that is a symbol is an operator)
PUNCTUATION: frozenset[str] = frozenset(".,();[]{}")

# Compound operators, matched greedily (longest first)
THREE_CHAR_OPERATORS: frozenset[str] = frozenset({"<=>", "->>", "#>>"})

TWO_CHAR_OPERATORS: frozenset[str] = frozenset(
    {
        "<=",
        ">=",
        "<>",
        "!=",
        "==",
        "=>",
        "||",
        "&&",
        "::",
        ":=",
        "<<",
        ">>",
        "->",
        "#>",
        "@>",
        "<@",
        "!~",
        "~*",
    }
)


def is_word_start(char: str) -> bool:
    """Check if character can start a word (letter, underscore, Unicode alnum)."""
    return char == "_" or (char.isalnum() and char not in DIGITS)


def is_word_char(char: str) -> bool:
    """Check if character can continue a word (letters, digits, underscore)."""
    return char == "_" or char.isalnum()
