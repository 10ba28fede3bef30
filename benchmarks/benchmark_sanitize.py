"""Benchmark lexing and sanitizing long INSERT ... VALUES queries.

Sanitizing must stay linear in the query length; the 20000-row query
is roughly 100x the 200-row one and should take roughly 100x as long.

Run with:
    python benchmarks/benchmark_sanitize.py
    pytest benchmarks/benchmark_sanitize.py --benchmark-only
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from conftest import long_insert_into_values_query  # noqa: E402

from sql_lexer import lex, sanitize_string  # noqa: E402

ROW_COUNTS = (200, 2000, 20000)


def time_sanitize(query: str, iterations: int = 5) -> float:
    """Best-of-N wall time for sanitize_string, in milliseconds."""
    best = float("inf")
    for _ in range(iterations):
        start = time.perf_counter()
        sanitize_string(query)
        best = min(best, time.perf_counter() - start)
    return best * 1000


def main() -> None:
    print("=" * 60)
    print("sql_lexer: sanitize long INSERT ... VALUES")
    print("=" * 60)
    print(f"{'Rows':>8} {'Chars':>10} {'Tokens':>10} {'Time (ms)':>12} {'µs/row':>10}")
    print("-" * 60)

    for rows in ROW_COUNTS:
        query = long_insert_into_values_query(rows)
        token_count = len(lex(query))
        elapsed_ms = time_sanitize(query)
        print(
            f"{rows:>8} {len(query):>10} {token_count:>10} "
            f"{elapsed_ms:>12.2f} {elapsed_ms * 1000 / rows:>10.2f}"
        )

    print()
    print("Output (200 rows, truncated):")
    print(sanitize_string(long_insert_into_values_query(200))[:120] + "...")


# pytest-benchmark integration
try:
    import pytest

    @pytest.mark.benchmark(group="sanitize-long-insert")
    def test_benchmark_sanitize_long_insert(benchmark, long_insert):
        """Benchmark sanitize_string on long INSERT queries."""
        result = benchmark(sanitize_string, long_insert)
        assert result.endswith("(?, ?, ?);")

    @pytest.mark.benchmark(group="lex-long-insert")
    def test_benchmark_lex_long_insert(benchmark, long_insert):
        """Benchmark lexing alone on long INSERT queries."""
        benchmark(lex, long_insert)

    @pytest.mark.benchmark(group="sanitize-real-world")
    def test_benchmark_sanitize_real_world(benchmark, real_world_queries):
        """Benchmark sanitize_string on a mix of ORM-style queries."""

        def sanitize_all():
            for query in real_world_queries:
                sanitize_string(query)

        benchmark(sanitize_all)

except ImportError:
    pass


if __name__ == "__main__":
    main()
