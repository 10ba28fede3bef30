"""Thread safety tests for lexing and sanitizing.

Nothing in sql_lexer holds process-wide state, so concurrent calls must
produce exactly the results of sequential ones. These tests use real
threading to catch actual concurrency bugs.
"""

from concurrent.futures import ThreadPoolExecutor

from sql_lexer import MYSQL, SanitizeConfig, Sanitizer, lex, sanitize_string, write

QUERIES = [
    "SELECT * FROM `users` WHERE id = 1",
    "INSERT INTO t VALUES (1, 2.5, 'x')",
    'SELECT * FROM t WHERE name = "bob"',
    "UPDATE t SET a = 'it''s' -- note",
    "SELECT 'unterminated",
]


class TestConcurrentUse:
    """Concurrent calls behave like sequential ones."""

    def test_concurrent_sanitize_matches_sequential(self) -> None:
        expected = [sanitize_string(q) for q in QUERIES]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(sanitize_string, QUERIES * 50))

        assert results == expected * 50

    def test_mixed_dialects_do_not_interfere(self) -> None:
        query = 'SELECT "bob"'

        def run(i: int) -> str:
            return sanitize_string(query, dialect=MYSQL if i % 2 else None)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(run, range(200)))

        for i, result in enumerate(results):
            assert result == ("SELECT ?" if i % 2 else 'SELECT "bob"')

    def test_shared_sanitizer_and_tokens(self) -> None:
        sanitizer = Sanitizer(SanitizeConfig(placeholder=":v"))
        tokens = lex("SELECT a FROM t WHERE b = 42 AND c = 'x'")

        def run(_: int) -> tuple[str, str]:
            return write(tokens), sanitizer.sanitize(tokens).write()

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = set(executor.map(run, range(100)))

        assert results == {
            (
                "SELECT a FROM t WHERE b = 42 AND c = 'x'",
                "SELECT a FROM t WHERE b = :v AND c = :v",
            )
        }
