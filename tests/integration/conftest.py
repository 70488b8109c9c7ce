"""Fixtures for running generated predicates against real databases.

Seed dates are relative to the frozen clock (Wednesday 2024-01-17).
"""

from __future__ import annotations

import sqlite3
from datetime import datetime

import pytest

from pyreportops import build_filter
from pyreportops.dialect.duckdb import DuckDBDialect
from pyreportops.dialect.sqlite import SQLiteDialect

SEED_ROWS = [
    {
        "name": "Alice",
        "status": "open",
        "subject": "Fix LOGIN bug",
        "amount": 1234.50,
        "due_on": "2024-01-14 12:00:00",
        "approved_on": "2024-01-10 09:00:00",
    },
    {
        "name": "Bob",
        "status": "closed",
        "subject": "Write docs",
        "amount": 10.00,
        "due_on": "2024-01-15 09:00:00",
        "approved_on": None,
    },
    {
        "name": "Carol",
        "status": "open",
        "subject": "50% off banner",
        "amount": 99.99,
        "due_on": "2024-01-13 18:00:00",
        "approved_on": "2024-01-01 10:00:00",
    },
    {
        "name": "Dave",
        "status": None,
        "subject": "login page",
        "amount": 0,
        "due_on": "2024-01-17 08:00:00",
        "approved_on": None,
    },
    {
        "name": "Erin",
        "status": "pending",
        "subject": "Release_notes",
        "amount": 5.00,
        "due_on": "2024-01-20 10:00:00",
        "approved_on": None,
    },
    {
        "name": "Frank",
        "status": "closed",
        "subject": "Misc",
        "amount": 20.00,
        "due_on": "2024-01-22 00:00:00",
        "approved_on": None,
    },
]

ALL_NAMES = {row["name"] for row in SEED_ROWS}

_COLUMNS = ("name", "status", "subject", "amount", "due_on", "approved_on")


def _setup_sqlite(conn) -> None:
    conn.execute("""
        CREATE TABLE tasks (
            name TEXT NOT NULL,
            status TEXT,
            subject TEXT NOT NULL,
            amount REAL NOT NULL,
            due_on TEXT NOT NULL,
            approved_on TEXT
        )
    """)
    conn.executemany(
        "INSERT INTO tasks VALUES (?, ?, ?, ?, ?, ?)",
        [tuple(row[c] for c in _COLUMNS) for row in SEED_ROWS],
    )
    conn.commit()


def _as_timestamp(value: str | None) -> datetime | None:
    return None if value is None else datetime.fromisoformat(value)


def _setup_duckdb(conn) -> None:
    conn.execute("""
        CREATE TABLE tasks (
            name VARCHAR NOT NULL,
            status VARCHAR,
            subject VARCHAR NOT NULL,
            amount DECIMAL(10, 2) NOT NULL,
            due_on TIMESTAMP NOT NULL,
            approved_on TIMESTAMP
        )
    """)
    for row in SEED_ROWS:
        conn.execute(
            "INSERT INTO tasks VALUES ($1, $2, $3, $4, $5, $6)",
            [_as_timestamp(row[c]) if c.endswith("_on") else row[c] for c in _COLUMNS],
        )


@pytest.fixture(params=["sqlite", "duckdb"])
def db(request, frozen_now):
    if request.param == "sqlite":
        conn = sqlite3.connect(":memory:")
        _setup_sqlite(conn)
        dialect = SQLiteDialect()
    else:
        duckdb = pytest.importorskip("duckdb")
        conn = duckdb.connect()
        _setup_duckdb(conn)
        dialect = DuckDBDialect()
    yield conn, dialect
    conn.close()


@pytest.fixture
def all_names():
    return set(ALL_NAMES)


@pytest.fixture
def run_filter(db):
    """Return a function that applies one filter and yields matching names."""
    conn, dialect = db

    def _run(field, operator, *values, parameterize=False):
        result = build_filter(
            field, operator, *values, dialect=dialect, parameterize=parameterize
        )
        sql = "SELECT name FROM tasks"
        if result.sql:
            sql += f" WHERE {result.sql}"
        if result.parameters:
            rows = conn.execute(sql, result.parameters).fetchall()
        else:
            rows = conn.execute(sql).fetchall()
        return {row[0] for row in rows}

    return _run
