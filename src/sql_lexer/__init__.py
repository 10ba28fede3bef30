"""
sql_lexer: SQL tokenizer and query sanitizer for monitoring tools

Lexes SQL text into a lossless token stream, writes it back byte for
byte, and renders a sanitized query shape with every literal replaced by
a placeholder. Never raises on malformed SQL. Zero runtime dependencies.

Quick Start:
    >>> from sql_lexer import lex, sanitize_string
    >>> sanitize_string("SELECT * FROM `table` WHERE id = 1")
    'SELECT * FROM `table` WHERE id = ?'

    >>> tokens = lex("SELECT * FROM `table`")
    >>> tokens.write()
    'SELECT * FROM `table`'

Dialects:
    >>> from sql_lexer import MYSQL
    >>> sanitize_string('SELECT * FROM t WHERE name = "bob"', dialect=MYSQL)
    'SELECT * FROM t WHERE name = ?'
"""

from sql_lexer.config import (
    ANSI,
    DEFAULT_DIALECT,
    DEFAULT_SANITIZE_CONFIG,
    MYSQL,
    POSTGRESQL,
    Dialect,
    SanitizeConfig,
    get_dialect,
)
from sql_lexer.errors import ConfigError, SourceReadError, SqlLexerError
from sql_lexer.lexer import Lexer, lex
from sql_lexer.location import SourceLocation
from sql_lexer.sanitizer import Sanitizer, sanitize, sanitize_string
from sql_lexer.tokens import Token, TokenKind, TokenSequence
from sql_lexer.writer import SqlWriter, write

__version__ = "0.3.0"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "lex",
    "write",
    "sanitize",
    "sanitize_string",
    # Components
    "Lexer",
    "SqlWriter",
    "Sanitizer",
    # Tokens
    "Token",
    "TokenKind",
    "TokenSequence",
    # Configuration
    "Dialect",
    "DEFAULT_DIALECT",
    "MYSQL",
    "POSTGRESQL",
    "ANSI",
    "get_dialect",
    "SanitizeConfig",
    "DEFAULT_SANITIZE_CONFIG",
    # Errors
    "SqlLexerError",
    "ConfigError",
    "SourceReadError",
    # Location
    "SourceLocation",
]
