"""Command-line interface: sanitize (or dump the tokens of) a SQL file.

Usage:
    sql-lexer query.sql
    sql-lexer --dialect mysql --keep-comments query.sql
    sql-lexer --tokens query.sql
    python -m sql_lexer query.sql

Exit codes:
    0  success
    1  the file could not be read
    2  usage error (argparse)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sql_lexer.config import DIALECTS, SanitizeConfig, get_dialect
from sql_lexer.errors import SourceReadError
from sql_lexer.lexer import lex
from sql_lexer.sanitizer import sanitize
from sql_lexer.tokens import TokenSequence
from sql_lexer.utils.logger import get_logger

logger = get_logger(__name__)


def read_source(path: str) -> str:
    """Read a SQL file as UTF-8 text.

    Raises:
        SourceReadError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid UTF-8 ({e.reason})") from e


def format_tokens(tokens: TokenSequence) -> str:
    """One line per token: KIND<TAB>repr(text)."""
    return "\n".join(f"{token.kind.name}\t{token.text!r}" for token in tokens)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sql-lexer",
        description="Print a SQL file with all literal values replaced by placeholders.",
    )
    parser.add_argument("path", help="Path to a file containing SQL")
    parser.add_argument(
        "--dialect",
        choices=sorted(DIALECTS),
        default="default",
        help="Quoting and comment conventions (default: %(default)s)",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream instead of the sanitized query",
    )
    parser.add_argument(
        "--keep-comments",
        action="store_true",
        help="Keep comments in the sanitized output",
    )
    parser.add_argument(
        "--redact-malformed",
        action="store_true",
        help="Replace unterminated strings/comments with a placeholder",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = read_source(args.path)
    except SourceReadError as e:
        print(f"sql-lexer: {e}", file=sys.stderr)
        return 1

    logger.debug("Read %d characters from %s", len(source), args.path)
    tokens = lex(source, dialect=get_dialect(args.dialect))

    if args.tokens:
        print(format_tokens(tokens))
        return 0

    config = SanitizeConfig(
        strip_comments=not args.keep_comments,
        redact_malformed=args.redact_malformed,
    )
    print(sanitize(tokens, config=config).write())
    return 0
