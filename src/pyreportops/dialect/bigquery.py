"""BigQuery dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyreportops.dialect._base import Dialect, DialectName


class BigQueryDialect(Dialect):
    """BigQuery dialect for report filter predicates."""

    name = DialectName.BIGQUERY

    # --- Literals ---

    def quote_string(self, value: str) -> str:
        return value.replace("\\", "\\\\").replace("'", "\\'")

    def write_string_literal(self, w: StringIO, value: str) -> None:
        w.write(f"'{self.quote_string(value)}'")

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write(f"@p{param_index}")

    # --- LIKE ---

    def write_like_escape(self, w: StringIO) -> None:
        pass  # BigQuery uses backslash as default escape
