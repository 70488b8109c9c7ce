"""Built-in report filter operators."""

from __future__ import annotations

import logging
from datetime import timedelta
from io import StringIO
from typing import TYPE_CHECKING, Any

from pyreportops import dates
from pyreportops._constants import ALWAYS_FALSE
from pyreportops._utils import clean_currency, collection, compact, escape_fragment, is_blank, to_int
from pyreportops.query import QueryBuilder

if TYPE_CHECKING:
    from pyreportops._operator import Operator
    from pyreportops.registry import OperatorRegistry

logger = logging.getLogger(__name__)


# --- Date ranges ---


def date_range(query: QueryBuilder, field: str, from_: int | None, to: int | None) -> QueryBuilder:
    """Bound ``field`` to whole days relative to today.

    ``from_`` and ``to`` are day offsets from today, inclusive on both ends.
    ``None`` leaves that side open.
    """
    if from_ is not None:
        lower = dates.end_of_day(dates.add_days(dates.yesterday(), from_))
        query.append(f"{escape_fragment(field)} > %s", lower)
    if to is not None:
        upper = dates.end_of_day(dates.add_days(dates.today(), to))
        query.append(f"{escape_fragment(field)} <= %s", upper)
    return query


def _modify_today(op: Operator, query: QueryBuilder, field: str) -> QueryBuilder:
    return date_range(query, field, 0, 0)


def _modify_ago(op: Operator, query: QueryBuilder, field: str, value: Any = None) -> QueryBuilder:
    days = to_int(value)
    return date_range(query, field, -days, -days)


def _modify_in(op: Operator, query: QueryBuilder, field: str, value: Any = None) -> QueryBuilder:
    days = to_int(value)
    return date_range(query, field, days, days)


def _modify_more_than_ago(op: Operator, query: QueryBuilder, field: str, value: Any) -> QueryBuilder:
    return date_range(query, field, None, -to_int(value))


def _modify_less_than_ago(op: Operator, query: QueryBuilder, field: str, value: Any) -> QueryBuilder:
    return date_range(query, field, -to_int(value), 0)


def _modify_in_less_than(op: Operator, query: QueryBuilder, field: str, value: Any) -> QueryBuilder:
    return date_range(query, field, 0, to_int(value))


def _modify_in_more_than(op: Operator, query: QueryBuilder, field: str, value: Any) -> QueryBuilder:
    return date_range(query, field, to_int(value), None)


def _modify_this_week(
    op: Operator, query: QueryBuilder, field: str, offset: Any = None
) -> QueryBuilder:
    start = dates.beginning_of_week(dates.today()) - timedelta(days=to_int(offset))
    start_at = dates.beginning_of_day(start)
    return op.delegate.modify(query, field, start_at, start_at + timedelta(days=7))


# --- Absolute dates ---


def _modify_on_date(op: Operator, query: QueryBuilder, field: str, value: Any) -> QueryBuilder:
    if is_blank(value):
        logger.debug("blank date for %r on %s, skipping", op.name, field)
        return query
    return op.delegate.modify(query, field, dates.parse_date(value))


def _modify_between(
    op: Operator, query: QueryBuilder, field: str, from_: Any, to: Any
) -> QueryBuilder:
    if is_blank(from_) or is_blank(to):
        logger.debug("blank date bound for %r on %s, skipping", op.name, field)
        return query
    return query.append(
        f"{escape_fragment(field)} BETWEEN %s AND %s", dates.parse_date(from_), dates.parse_date(to)
    )


# --- Equality ---


def _modify_equals(op: Operator, query: QueryBuilder, field: str, *values: Any) -> QueryBuilder:
    # Only None is dropped; "" is a value a user can match on.
    values = [value for value in values if value is not None]
    if not values:
        return query.append(ALWAYS_FALSE)
    return query.append(f"{escape_fragment(field)} IN {collection(len(values))}", *values)


def _modify_not_equals(op: Operator, query: QueryBuilder, field: str, *values: Any) -> QueryBuilder:
    values = compact(values)
    if not values:
        return query.append(f"{field} IS NULL")
    field = escape_fragment(field)
    return query.append(
        f"({field} IS NULL OR {field} NOT IN {collection(len(values))})", *values
    )


def _modify_numeric_equals(op: Operator, query: QueryBuilder, field: str, value: Any) -> QueryBuilder:
    return query.append(f"{escape_fragment(field)} = %s", clean_currency(value))


# --- Strings ---


def _like(query: QueryBuilder, field: str, keyword: str, values: tuple[Any, ...]) -> QueryBuilder:
    value = values[0] if values else None
    text = "" if value is None else str(value)
    pattern = f"%{query.dialect.escape_like(text.lower())}%"
    w = StringIO()
    query.dialect.write_like_escape(w)
    return query.append(f"LOWER({escape_fragment(field)}) {keyword} %s{w.getvalue()}", pattern)


def _modify_contains(op: Operator, query: QueryBuilder, field: str, *values: Any) -> QueryBuilder:
    return _like(query, field, "LIKE", values)


def _modify_not_contains(op: Operator, query: QueryBuilder, field: str, *values: Any) -> QueryBuilder:
    return _like(query, field, "NOT LIKE", values)


def define_operators(registry: OperatorRegistry) -> None:
    """Register every built-in operator on ``registry``."""
    register = registry.register

    # Operators from Redmine
    register(">t-", label="label_less_than_ago", behavior=_modify_less_than_ago)
    register("w", arity=0, label="label_this_week", delegate="<>d", behavior=_modify_this_week)
    register("t+", arity=1, label="label_in", behavior=_modify_in)
    register("<=", arity=1, label="label_less_or_equal")
    register("!", label="label_not_equals", behavior=_modify_not_equals)
    register("t-", arity=1, label="label_ago", behavior=_modify_ago)
    register("!~", arity=1, label="label_not_contains", behavior=_modify_not_contains)
    register("=", label="label_equals", behavior=_modify_equals)
    register("~", arity=1, label="label_contains", behavior=_modify_contains)
    register("<t+", label="label_in_less_than", behavior=_modify_in_less_than)
    register("t", label="label_today", behavior=_modify_today)
    register(">=", arity=1, label="label_greater_or_equal")
    register("!*", arity=0, where_template="{field} IS NULL", label="label_none")
    register("<t-", label="label_more_than_ago", behavior=_modify_more_than_ago)
    register(">t+", label="label_in_more_than", behavior=_modify_in_more_than)
    register("*", arity=0, where_template="{field} IS NOT NULL", label="label_all")

    # Our own operators
    register("<", arity=1, label="label_less")
    register(">", arity=1, label="label_greater")
    register("=n", label="label_equals", behavior=_modify_numeric_equals)
    register("0", arity=1, where_template="{field} = 0", label="label_none")
    register("y", arity=0, where_template="{field} IS NOT NULL", label="label_yes")
    register("n", arity=0, where_template="{field} IS NULL", label="label_no")

    register(
        "<d", label="label_less_or_equal", validate="dates", delegate="<=",
        behavior=_modify_on_date,
    )
    register(
        ">d", label="label_greater_or_equal", validate="dates", delegate=">=",
        behavior=_modify_on_date,
    )
    register("<>d", label="label_between", validate="dates", behavior=_modify_between)
    register(
        "=d", label="label_date_on", validate="dates", delegate="=",
        behavior=_modify_on_date,
    )
