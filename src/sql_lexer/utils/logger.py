"""Logger lookup for sql_lexer modules.

Every module logs through a logger under the "sql_lexer" namespace, so a
host application can raise or silence all of them with one
``logging.getLogger("sql_lexer").setLevel(...)`` call.

sql_lexer never attaches handlers and only emits DEBUG records: an
unterminated string or block comment, or a malformed fragment the sanitizer
passes through. Queries can carry user data, so nothing is logged at INFO
or above where a default handler would print it.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for name under "sql_lexer".

    Module names already inside the package are used as is; anything else
    gets the "sql_lexer." prefix.

    Example:
        >>> get_logger("sql_lexer.sanitizer").name
        'sql_lexer.sanitizer'
        >>> get_logger("monitoring").name
        'sql_lexer.monitoring'
    """
    if not (name == "sql_lexer" or name.startswith("sql_lexer.")):
        name = f"sql_lexer.{name}"
    return logging.getLogger(name)
