"""Exception classes for sql_lexer.

The core operations (lex, write, sanitize, sanitize_string) never raise:
malformed SQL is reified as MALFORMED tokens. Exceptions here cover the
edges of the library, configuration values and reading SQL from disk.
"""

from __future__ import annotations


class SqlLexerError(Exception):
    """Base exception for all sql_lexer errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(SqlLexerError):
    """Invalid configuration value or unknown dialect name."""

    def __init__(self, message: str, option: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            option: Name of the offending option (optional)
        """
        self.option = option
        prefix = f"{option}: " if option else ""
        super().__init__(f"{prefix}{message}")


class SourceReadError(SqlLexerError):
    """SQL source file could not be read.

    Raised by the command-line loader; wraps the underlying OSError or
    UnicodeDecodeError as __cause__.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize source read error.

        Args:
            path: Path that failed to load
            reason: Short description of why (e.g. the OSError strerror)
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")
