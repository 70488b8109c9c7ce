"""Escaping, blank handling, and value-cleaning helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from typing import Any

from pyreportops._errors import ERR_MSG_INVALID_NUMBER, InvalidNumberError

_CURRENCY_NOISE_RE = re.compile(r"[^\d.,\-]")


def is_blank(value: Any) -> bool:
    """True for None and for values whose string form is empty or whitespace."""
    if value is None:
        return True
    return str(value).strip() == ""


def compact(values: Iterable[Any]) -> list[Any]:
    """Drop blank values, keeping order."""
    return [v for v in values if not is_blank(v)]


def collection(count: int) -> str:
    """Placeholder list for an IN clause, e.g. ``(%s, %s)``."""
    return "(" + ", ".join(["%s"] * count) + ")"


def escape_fragment(text: str) -> str:
    """Double ``%`` so ``text`` survives a fragment's ``%s`` substitution."""
    return text.replace("%", "%%")


def escape_like_pattern(pattern: str) -> str:
    """Escape LIKE wildcards so they match literally."""
    result = pattern.replace("\\", "\\\\")
    result = result.replace("%", "\\%")
    result = result.replace("_", "\\_")
    return result


def escape_string_literal(value: str) -> str:
    """Escape a string for use as a SQL string literal."""
    return value.replace("'", "''")


def clean_currency(value: Any) -> Decimal:
    """Strip currency symbols and grouping from a formatted amount.

    ``"$1,234.50"``, ``"1.234,50 EUR"`` and ``"-12"`` all parse. When both
    separators appear, the right-most one is the decimal mark. A lone comma
    is a decimal mark only when followed by one or two digits.
    """
    if isinstance(value, (int, Decimal)):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))

    raw = "" if value is None else str(value)
    text = _CURRENCY_NOISE_RE.sub("", raw)

    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    elif "," in text:
        head, _, tail = text.rpartition(",")
        if text.count(",") == 1 and 1 <= len(tail) <= 2:
            text = f"{head}.{tail}"
        else:
            text = text.replace(",", "")

    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise InvalidNumberError(
            ERR_MSG_INVALID_NUMBER,
            f"cannot read a number from {raw!r}",
            wrapped=exc,
        ) from exc


_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def to_int(value: Any) -> int:
    """Leading integer of ``value``, or 0 when there is none.

    Day offsets come straight from form input, so ``"3 days"`` reads as 3
    and ``""`` or ``None`` as 0.
    """
    if isinstance(value, int):
        return value
    match = _LEADING_INT_RE.match("" if value is None else str(value))
    return int(match.group(1)) if match else 0
