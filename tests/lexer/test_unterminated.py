"""Test unterminated constructs at end of input.

An unterminated string, quoted identifier or block comment must become a
single MALFORMED token holding everything up to the end of input, followed
by EOF, and nothing may be lost on write-back.
"""

import logging

import pytest

from sql_lexer import lex, sanitize_string
from sql_lexer.tokens import TokenKind


class TestUnterminatedQuotes:
    """Quoted regions without a closing quote."""

    def test_unterminated_string(self) -> None:
        tokens = lex("SELECT 'unterminated")
        malformed = [t for t in tokens if t.kind == TokenKind.MALFORMED]
        assert len(malformed) == 1
        assert malformed[0].text == "'unterminated"
        assert malformed[0].span == (7, 20)
        assert tokens.kinds()[-2:] == [TokenKind.MALFORMED, TokenKind.EOF]

    @pytest.mark.parametrize("source", ['"val""ue', "`tbl", '"abc'])
    def test_unterminated_identifier(self, source: str) -> None:
        tokens = lex(source)
        assert tokens.kinds() == [TokenKind.MALFORMED, TokenKind.EOF]
        assert tokens[0].text == source

    def test_backslash_does_not_escape_identifier_quote(self) -> None:
        tokens = lex('"val\\"ue')
        assert [(t.kind, t.text) for t in tokens.significant()] == [
            (TokenKind.QUOTED_IDENTIFIER, '"val\\"'),
            (TokenKind.WORD, "ue"),
        ]

    def test_escaped_closing_quote_leaves_string_open(self) -> None:
        tokens = lex("'value\\'")
        assert tokens.kinds() == [TokenKind.MALFORMED, TokenKind.EOF]

    def test_trailing_backslash(self) -> None:
        tokens = lex("'abc\\")
        assert tokens.kinds() == [TokenKind.MALFORMED, TokenKind.EOF]
        assert tokens[0].text == "'abc\\"

    def test_lone_quote(self) -> None:
        tokens = lex("'")
        assert tokens.kinds() == [TokenKind.MALFORMED, TokenKind.EOF]

    def test_swallows_rest_of_query(self) -> None:
        source = "WHERE a = 'x AND b = 2; -- trailing"
        tokens = lex(source)
        assert tokens.kinds()[-2:] == [TokenKind.MALFORMED, TokenKind.EOF]
        assert tokens[-2].text == "'x AND b = 2; -- trailing"


class TestUnterminatedBlockComment:
    """Block comments without */."""

    def test_unterminated_block_comment(self) -> None:
        tokens = lex("SELECT 1 /* never closed\nstill comment")
        assert tokens.kinds()[-2:] == [TokenKind.MALFORMED, TokenKind.EOF]
        assert tokens[-2].text == "/* never closed\nstill comment"

    def test_opener_only(self) -> None:
        assert lex("/*").kinds() == [TokenKind.MALFORMED, TokenKind.EOF]

    def test_star_slash_overlap_does_not_close(self) -> None:
        assert lex("/*/").kinds() == [TokenKind.MALFORMED, TokenKind.EOF]


class TestWriteBack:
    """Malformed tokens keep their raw text."""

    @pytest.mark.parametrize(
        "source",
        ["SELECT 'unterminated", '"abc', "/* x", "a = 'b\\", "`t` = 'x''"],
    )
    def test_round_trip(self, source: str) -> None:
        assert lex(source).write() == source

    def test_sanitize_keeps_fragment(self) -> None:
        assert sanitize_string("SELECT 'unterminated") == "SELECT 'unterminated"

    def test_sanitize_replaces_literals_before_fragment(self) -> None:
        assert sanitize_string("SELECT 1, 'unterminated") == "SELECT ?, 'unterminated"


class TestLogging:
    """Malformed tokens are reported at DEBUG level."""

    def test_malformed_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sql_lexer"):
            lex("SELECT 'oops")
        assert any("Unterminated string literal" in r.getMessage() for r in caplog.records)
        assert all(r.name.startswith("sql_lexer.") for r in caplog.records)

    def test_well_formed_input_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sql_lexer"):
            lex("SELECT 'fine'")
        assert caplog.records == []
