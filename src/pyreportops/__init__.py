"""pyreportops - Report filter operators that build SQL WHERE predicates."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Any

try:
    __version__ = version("pyreportops")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pyreportops._config import Settings, configure, get_settings
from pyreportops._errors import (
    InvalidDateError,
    InvalidNumberError,
    OperatorError,
    OperatorNotFoundError,
    UnknownValidatorError,
    ValidationError,
)
from pyreportops._operator import Operator
from pyreportops._operators import date_range
from pyreportops.dialect import (
    BigQueryDialect,
    Dialect,
    DuckDBDialect,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    get_dialect,
)
from pyreportops.query import Query, QueryBuilder, Result
from pyreportops.registry import (
    OperatorRegistry,
    default_operator,
    default_operators,
    find,
    integer_operators,
    load,
    null_operators,
    operator_for,
    register,
    registry,
    string_operators,
    time_operators,
)
from pyreportops.validation import register_validator

__all__ = [
    "apply_filter",
    "build_filter",
    "date_range",
    "default_operator",
    "default_operators",
    "find",
    "integer_operators",
    "load",
    "null_operators",
    "operator_for",
    "register",
    "register_validator",
    "registry",
    "string_operators",
    "time_operators",
    "configure",
    "get_settings",
    "get_dialect",
    "Operator",
    "OperatorRegistry",
    "Query",
    "QueryBuilder",
    "Result",
    "Settings",
    "OperatorError",
    "OperatorNotFoundError",
    "ValidationError",
    "InvalidDateError",
    "InvalidNumberError",
    "UnknownValidatorError",
    "Dialect",
    "BigQueryDialect",
    "DuckDBDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
]

load()


def apply_filter(
    query: QueryBuilder, field: str, operator: str | Operator, *values: Any
) -> QueryBuilder:
    """Validate ``values`` and append ``operator``'s predicate on ``field``.

    Args:
        query: The query under construction.
        field: Column or SQL expression to filter.
        operator: Operator name (``"="``, ``"t-"``, ...) or an Operator.
        *values: User-supplied values.

    Returns:
        ``query``, with zero or more predicates appended.

    Raises:
        OperatorNotFoundError: If the operator name is unknown.
        ValidationError: If a value fails the operator's validators.
    """
    return operator_for(operator).apply(query, field, *values)


def build_filter(
    field: str,
    operator: str | Operator,
    *values: Any,
    dialect: Dialect | None = None,
    parameterize: bool = False,
) -> Result:
    """Build a single filter on a fresh :class:`Query`.

    Args:
        field: Column or SQL expression to filter.
        operator: Operator name or Operator.
        *values: User-supplied values.
        dialect: SQL dialect to use. Defaults to the configured dialect.
        parameterize: If True, values become bind parameters.

    Returns:
        Result with the WHERE fragment and, when parameterized, its
        parameters. A blank date filter yields an empty ``sql``.
    """
    query = Query(dialect, parameterize=parameterize)
    apply_filter(query, field, operator, *values)
    return query.build()
