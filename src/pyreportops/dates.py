"""Date helpers for relative and absolute date operators.

All "today" arithmetic happens in UTC. ``now`` is looked up through this
module on every call, so tests can freeze the clock by patching it.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

from pyreportops._config import get_settings
from pyreportops._errors import ERR_MSG_INVALID_DATE, InvalidDateError

_END_OF_DAY = time(23, 59, 59)


def now() -> datetime:
    return datetime.now(timezone.utc)


def today() -> date:
    return now().date()


def yesterday() -> date:
    return today() - timedelta(days=1)


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def end_of_day(day: date) -> datetime:
    """Last second of ``day``."""
    return datetime.combine(day, _END_OF_DAY)


def beginning_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def first_day_of_week() -> int:
    """Configured week start, 0 (Sunday) through 6 (Saturday)."""
    return get_settings().first_day_of_week % 7


def beginning_of_week(day: date, first_day: int | None = None) -> date:
    """Most recent ``first_day`` on or before ``day``."""
    if first_day is None:
        first_day = first_day_of_week()
    # date.weekday() counts from Monday = 0; shift to Sunday = 0.
    weekday = (day.weekday() + 1) % 7
    return day - timedelta(days=(weekday - first_day % 7) % 7)


def parse_date(value: str | date | datetime) -> date | datetime:
    """Read an ISO date (``2024-01-31``) or datetime (``2024-01-31 08:00``).

    ``date`` and ``datetime`` instances pass through unchanged.

    Raises:
        InvalidDateError: If a string is not an ISO date or datetime.
    """
    if isinstance(value, (date, datetime)):
        return value
    text = str(value).strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateError(
            ERR_MSG_INVALID_DATE,
            f"cannot read a date from {value!r}",
            wrapped=exc,
        ) from exc
