"""MySQL dialect implementation."""

from __future__ import annotations

from io import StringIO

from pyreportops.dialect._base import Dialect, DialectName


class MySQLDialect(Dialect):
    """MySQL dialect for report filter predicates.

    Backslash is an escape character inside MySQL string literals, so it is
    doubled along with single quotes.
    """

    name = DialectName.MYSQL

    # --- Literals ---

    def quote_string(self, value: str) -> str:
        return value.replace("\\", "\\\\").replace("'", "''")

    def write_string_literal(self, w: StringIO, value: str) -> None:
        w.write(f"'{self.quote_string(value)}'")

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        w.write("?")

    # --- LIKE ---

    def write_like_escape(self, w: StringIO) -> None:
        w.write(" ESCAPE '\\\\'")
