"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


def long_insert_into_values_query(rows: int) -> str:
    """Multi-row INSERT, the typical worst case for query sanitizing."""
    values = "".join(f"({i}, {i + 1}, {i + 2})," for i in range(rows))
    return f'INSERT INTO "table_name" ("one","two","three") VALUES {values}(0, 0, 0);'


@pytest.fixture(params=[200, 2000, 20000], ids=lambda rows: f"{rows}-rows")
def long_insert(request: pytest.FixtureRequest) -> str:
    """Long INSERT ... VALUES query at several sizes."""
    return long_insert_into_values_query(request.param)


@pytest.fixture
def real_world_queries() -> list[str]:
    """Collection of ORM-style queries."""
    return [
        "SELECT `users`.* FROM `users` WHERE `users`.`id` = 42 LIMIT 1",
        "SELECT \"posts\".* FROM \"posts\" WHERE (created_at >= '2016-01-10 13:34:46')"
        " ORDER BY \"posts\".\"id\" DESC LIMIT 20 OFFSET 40",
        "UPDATE `accounts` SET `balance` = 1042.50, `note` = 'it''s paid'"
        " WHERE `id` IN (1, 2, 3) -- billing job",
        "SELECT a.attname, format_type(a.atttypid, a.atttypmod)\n"
        "  FROM pg_attribute a\n"
        " WHERE a.attrelid = '\"value\"'::regclass AND a.attnum > 0\n"
        " ORDER BY a.attnum",
        "INSERT INTO events (kind, payload) VALUES ('click', '{\"x\": 1}') /* app:web */",
    ]
