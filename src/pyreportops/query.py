"""Query builder capability consumed by operators, and an in-memory builder."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from io import StringIO
from typing import Any, Protocol, runtime_checkable

from pyreportops._config import get_settings
from pyreportops.dialect import Dialect, get_dialect


@runtime_checkable
class QueryBuilder(Protocol):
    """What an operator needs from the query it filters.

    ``append`` takes either a finished SQL fragment or a template whose
    ``%s`` slots are filled, in order, from ``args``. The builder decides how
    arguments are embedded (inline literals or bind parameters).
    """

    dialect: Dialect

    def append(self, fragment: str, *args: Any) -> QueryBuilder: ...


@dataclass(frozen=True)
class Result:
    """Result of building a filter."""

    sql: str
    parameters: list[Any] = field(default_factory=list)


class Query:
    """Accumulates predicates that are ANDed into a WHERE clause.

    Args:
        dialect: SQL dialect used for quoting. Defaults to the configured
            dialect (PostgreSQL unless ``PYREPORTOPS_DIALECT`` says otherwise).
        parameterize: If True, template arguments become bind parameters
            instead of inline literals.
    """

    def __init__(self, dialect: Dialect | None = None, *, parameterize: bool = False) -> None:
        if dialect is None:
            dialect = get_dialect(get_settings().dialect)
        self.dialect = dialect
        self._parameterize = parameterize
        self._predicates: list[str] = []
        self._parameters: list[Any] = []

    def append(self, fragment: str, *args: Any) -> Query:
        if args:
            fragment = fragment % tuple(self._render(arg) for arg in args)
        self._predicates.append(fragment)
        return self

    @property
    def predicates(self) -> list[str]:
        return list(self._predicates)

    @property
    def parameters(self) -> list[Any]:
        return list(self._parameters)

    @property
    def sql(self) -> str:
        return " AND ".join(self._predicates)

    def build(self) -> Result:
        return Result(sql=self.sql, parameters=self.parameters)

    def __len__(self) -> int:
        return len(self._predicates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __repr__(self) -> str:
        return f"Query({self.sql!r})"

    def _render(self, arg: Any) -> str:
        w = StringIO()
        if self._parameterize:
            self._parameters.append(arg)
            self.dialect.write_param_placeholder(w, len(self._parameters))
        else:
            self._write_literal(w, arg)
        return w.getvalue()

    def _write_literal(self, w: StringIO, arg: Any) -> None:
        if arg is None:
            w.write("NULL")
        elif isinstance(arg, bool):
            w.write("TRUE" if arg else "FALSE")
        elif isinstance(arg, (int, float, Decimal)):
            w.write(str(arg))
        elif isinstance(arg, date):
            self.dialect.write_string_literal(w, self.dialect.quoted_date(arg))
        else:
            self.dialect.write_string_literal(w, str(arg))
