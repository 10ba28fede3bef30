"""State-machine lexer for SQL text.

This package provides a character-class dispatch lexer with O(n)
guaranteed performance. Every scan step consumes at least one character,
so lexing terminates on any input.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, lex, CharClass
├── core.py              # Lexer class (mixin composition + navigation)
├── charclass.py         # CharClass enum and classify_char
└── scanners/            # Token-family scanners
    ├── quoted.py        # '...', "...", `...`
    ├── numeric.py       # 1, 2.5, 1e-3, 0xFF
    ├── comment.py       # -- line, # line, /* block */
    ├── word.py          # words and placeholders
    └── symbol.py        # whitespace, operators, punctuation

Usage:
    >>> from sql_lexer.lexer import Lexer
    >>> for token in Lexer("id = ?").tokenize():
    ...     print(token)
Token(WORD, 'id', 0:2)
Token(WHITESPACE, ' ', 2:3)
Token(OPERATOR, '=', 3:4)
Token(WHITESPACE, ' ', 4:5)
Token(PLACEHOLDER, '?', 5:6)
Token(EOF, '', 6:6)

"""

from sql_lexer.lexer.charclass import CharClass, classify_char
from sql_lexer.lexer.core import Lexer, lex

__all__ = ["CharClass", "Lexer", "classify_char", "lex"]
