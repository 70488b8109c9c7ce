"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from pyreportops import dates
from pyreportops._config import reset_settings
from pyreportops._constants import ENV_DIALECT, ENV_FIRST_DAY_OF_WEEK
from pyreportops.dialect.bigquery import BigQueryDialect
from pyreportops.dialect.duckdb import DuckDBDialect
from pyreportops.dialect.mysql import MySQLDialect
from pyreportops.dialect.postgres import PostgresDialect
from pyreportops.dialect.sqlite import SQLiteDialect

# A Wednesday.
FROZEN_NOW = datetime(2024, 1, 17, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv(ENV_FIRST_DAY_OF_WEEK, raising=False)
    monkeypatch.delenv(ENV_DIALECT, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def frozen_now(monkeypatch):
    monkeypatch.setattr(dates, "now", lambda: FROZEN_NOW)
    return FROZEN_NOW


@pytest.fixture
def pg_dialect():
    return PostgresDialect()


@pytest.fixture
def duckdb_dialect():
    return DuckDBDialect()


@pytest.fixture
def bigquery_dialect():
    return BigQueryDialect()


@pytest.fixture
def mysql_dialect():
    return MySQLDialect()


@pytest.fixture
def sqlite_dialect():
    return SQLiteDialect()
