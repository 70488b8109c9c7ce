"""Abstract base class for SQL dialects."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from datetime import date, datetime
from io import StringIO

from pyreportops._constants import DATE_FORMAT, DATETIME_FORMAT
from pyreportops._utils import escape_like_pattern


class DialectName(enum.StrEnum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    DUCKDB = "duckdb"
    BIGQUERY = "bigquery"


class Dialect(ABC):
    """Abstract base class defining the SQL dialect interface.

    This is the quoting utility operators rely on: every user value passes
    through a dialect before it is embedded in a predicate.
    """

    name: DialectName

    # --- Literals ---

    @abstractmethod
    def quote_string(self, value: str) -> str:
        """Escape ``value`` for a string literal, without surrounding quotes."""

    @abstractmethod
    def write_string_literal(self, w: StringIO, value: str) -> None: ...

    @abstractmethod
    def write_param_placeholder(self, w: StringIO, param_index: int) -> None: ...

    # --- LIKE ---

    @abstractmethod
    def write_like_escape(self, w: StringIO) -> None: ...

    def escape_like(self, value: str) -> str:
        return escape_like_pattern(value)

    # --- Dates ---

    def quoted_date(self, value: date | datetime) -> str:
        """Format a date or datetime the way the database reads it back."""
        if isinstance(value, datetime):
            return value.strftime(DATETIME_FORMAT)
        return value.strftime(DATE_FORMAT)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
