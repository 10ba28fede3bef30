"""Dialect and sanitizer configuration for sql_lexer.

Both configs are frozen dataclasses: built once, passed explicitly to
lex() / sanitize(), and safe to share between threads. There is no
process-wide "current config"; every call is a pure function of its
arguments.

Usage:
    from sql_lexer import lex, sanitize
    from sql_lexer.config import MYSQL, SanitizeConfig

    tokens = lex('SELECT * FROM t WHERE name = "bob"', dialect=MYSQL)
    clean = sanitize(tokens, config=SanitizeConfig(redact_malformed=True))

    # From external settings (unknown keys are ignored)
    config = SanitizeConfig.from_dict({"placeholder": "$?", "extra": 1})

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sql_lexer.errors import ConfigError


@dataclass(frozen=True, slots=True)
class Dialect:
    """Quoting, escaping and comment conventions applied by the lexer.

    Attributes:
        name: Dialect name (informational)
        double_quote_strings: Lex "..." as STRING_LITERAL instead of
            QUOTED_IDENTIFIER (MySQL without ANSI_QUOTES)
        backslash_escapes: Honor backslash escape pairs inside string literals
        hash_comments: Treat # as a line comment start (MySQL); #> and #>>
            stay JSON operators either way

    """

    name: str = "default"
    double_quote_strings: bool = False
    backslash_escapes: bool = True
    hash_comments: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> Dialect:
        """Create Dialect from dictionary, ignoring unknown keys."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


DEFAULT_DIALECT = Dialect()
MYSQL = Dialect(name="mysql", double_quote_strings=True)
POSTGRESQL = Dialect(name="postgresql", backslash_escapes=False, hash_comments=False)
ANSI = Dialect(name="ansi", backslash_escapes=False, hash_comments=False)

DIALECTS: dict[str, Dialect] = {
    dialect.name: dialect for dialect in (DEFAULT_DIALECT, MYSQL, POSTGRESQL, ANSI)
}


def get_dialect(name: str) -> Dialect:
    """Look up a built-in dialect by name (case-insensitive).

    Raises:
        ConfigError: If no dialect with that name exists.
    """
    try:
        return DIALECTS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(DIALECTS))
        raise ConfigError(f"unknown dialect {name!r} (known: {known})", "dialect") from None


@dataclass(frozen=True, slots=True)
class SanitizeConfig:
    """Sanitizer policy.

    Attributes:
        placeholder: Text that replaces each literal
        strip_comments: Drop COMMENT tokens
        collapse_whitespace: Turn each retained whitespace gap into one space;
            when False the gap keeps the text of its first whitespace run
        redact_malformed: Replace MALFORMED fragments with the placeholder
            instead of passing them through

    """

    placeholder: str = "?"
    strip_comments: bool = True
    collapse_whitespace: bool = True
    redact_malformed: bool = False

    def __post_init__(self) -> None:
        if not self.placeholder:
            raise ConfigError("must be a non-empty string", "placeholder")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> SanitizeConfig:
        """Create SanitizeConfig from dictionary.

        Only includes keys that are valid SanitizeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = SanitizeConfig.from_dict({
            ...     "redact_malformed": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.redact_malformed
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


DEFAULT_SANITIZE_CONFIG = SanitizeConfig()


__all__ = [
    "ANSI",
    "DEFAULT_DIALECT",
    "DEFAULT_SANITIZE_CONFIG",
    "DIALECTS",
    "Dialect",
    "MYSQL",
    "POSTGRESQL",
    "SanitizeConfig",
    "get_dialect",
]
