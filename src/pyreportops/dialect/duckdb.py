"""DuckDB dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyreportops._utils import escape_string_literal
from pyreportops.dialect._base import Dialect, DialectName


class DuckDBDialect(Dialect):
    """DuckDB dialect for report filter predicates."""

    name = DialectName.DUCKDB

    # --- Literals ---

    def quote_string(self, value: str) -> str:
        return escape_string_literal(value)

    def write_string_literal(self, w: StringIO, value: str) -> None:
        w.write(f"'{self.quote_string(value)}'")

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write(f"${param_index}")

    # --- LIKE ---

    def write_like_escape(self, w: StringIO) -> None:
        w.write(" ESCAPE '\\'")
