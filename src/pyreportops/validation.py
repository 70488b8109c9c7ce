"""Named value validators that operators declare and run before ``modify``.

A validator receives every value supplied to the operator. Blank values are
never an error: they make the operator a no-op instead. Malformed non-blank
values raise :class:`~pyreportops._errors.ValidationError`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from pyreportops import dates
from pyreportops._errors import (
    ERR_MSG_UNKNOWN_VALIDATOR,
    UnknownValidatorError,
)
from pyreportops._utils import is_blank

Validator = Callable[[Sequence[Any]], None]

_VALIDATORS: dict[str, Validator] = {}


def register_validator(name: str, func: Validator) -> Validator:
    """Make ``func`` available to operators under ``name``."""
    _VALIDATORS[name] = func
    return func


def get_validator(name: str) -> Validator:
    try:
        return _VALIDATORS[name]
    except KeyError:
        raise UnknownValidatorError(
            ERR_MSG_UNKNOWN_VALIDATOR,
            f"validator {name!r} is not registered. "
            f"Available: {', '.join(sorted(_VALIDATORS))}",
        ) from None


def run_validators(names: Iterable[str], values: Sequence[Any]) -> None:
    for name in names:
        get_validator(name)(values)


def validate_dates(values: Sequence[Any]) -> None:
    for value in values:
        if is_blank(value):
            continue
        dates.parse_date(value)


register_validator("dates", validate_dates)
