"""Tests for the high-level sql_lexer API."""


class TestLexFunction:
    """Tests for the lex() function."""

    def test_lex_query(self) -> None:
        """lex() returns a TokenSequence ending in EOF."""
        from sql_lexer import TokenKind, TokenSequence, lex

        tokens = lex("SELECT * FROM `table`")
        assert isinstance(tokens, TokenSequence)
        assert tokens.kinds() == [
            TokenKind.WORD,
            TokenKind.WHITESPACE,
            TokenKind.OPERATOR,
            TokenKind.WHITESPACE,
            TokenKind.WORD,
            TokenKind.WHITESPACE,
            TokenKind.QUOTED_IDENTIFIER,
            TokenKind.EOF,
        ]

    def test_write_back(self) -> None:
        from sql_lexer import lex

        assert lex("SELECT * FROM `table`").write() == "SELECT * FROM `table`"

    def test_lexer_class(self) -> None:
        from sql_lexer import Lexer, TokenKind

        tokens = list(Lexer("SELECT 1").tokenize())
        assert [t.kind for t in tokens] == [
            TokenKind.WORD,
            TokenKind.WHITESPACE,
            TokenKind.NUMBER_LITERAL,
            TokenKind.EOF,
        ]


class TestTokenSequence:
    """Tests for TokenSequence accessors."""

    def test_len_and_index(self) -> None:
        from sql_lexer import TokenKind, lex

        tokens = lex("a b")
        assert len(tokens) == 4
        assert tokens[0].text == "a"
        assert tokens[-1].kind == TokenKind.EOF
        assert [t.text for t in tokens[0:3]] == ["a", " ", "b"]

    def test_significant(self) -> None:
        from sql_lexer import lex

        tokens = lex("SELECT /* c */ 1 -- x")
        assert [t.text for t in tokens.significant()] == ["SELECT", "1"]

    def test_frozen(self) -> None:
        import dataclasses

        import pytest

        from sql_lexer import lex

        tokens = lex("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tokens.tokens = ()  # type: ignore[misc]

    def test_empty_sequence(self) -> None:
        from sql_lexer import TokenSequence

        assert len(TokenSequence()) == 0
        assert TokenSequence().write() == ""


class TestToken:
    """Tests for Token properties."""

    def test_span_and_flags(self) -> None:
        from sql_lexer import lex

        string, _, comment, _ = lex("'a' --c").tokens
        assert string.span == (0, 3)
        assert string.is_literal
        assert not string.is_trivia
        assert comment.is_trivia
        assert not comment.is_literal

    def test_repr(self) -> None:
        from sql_lexer import lex

        assert repr(lex("SELECT")[0]) == "Token(WORD, 'SELECT', 0:6)"

    def test_repr_truncates_long_text(self) -> None:
        from sql_lexer import lex

        token = lex("'" + "x" * 40 + "'")[0]
        assert repr(token) == "Token(STRING_LITERAL, \"'xxxxxxxxxxxxxxxx...\", 0:42)"


class TestSanitizeFunction:
    """Tests for sanitize() and sanitize_string()."""

    def test_sanitize_string(self) -> None:
        from sql_lexer import sanitize_string

        assert (
            sanitize_string("SELECT * FROM `table` WHERE id = 1")
            == "SELECT * FROM `table` WHERE id = ?"
        )

    def test_sanitize_tokens(self) -> None:
        from sql_lexer import lex, sanitize, write

        assert write(sanitize(lex("LIMIT 10 OFFSET 5"))) == "LIMIT ? OFFSET ?"

    def test_malformed_scenario(self) -> None:
        from sql_lexer import TokenKind, lex, sanitize_string

        tokens = lex("SELECT 'unterminated")
        assert tokens.kinds()[-2:] == [TokenKind.MALFORMED, TokenKind.EOF]
        assert tokens.kinds().count(TokenKind.MALFORMED) == 1
        assert tokens[-2].text == "'unterminated"
        assert sanitize_string("SELECT 'unterminated") == "SELECT 'unterminated"
