"""The Operator record: a named rule that turns a field and values into a predicate."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from typing import Any

from pyreportops._constants import DEFAULT_WHERE_TEMPLATE
from pyreportops._errors import OperatorError
from pyreportops._utils import escape_fragment
from pyreportops.query import QueryBuilder
from pyreportops.validation import get_validator, run_validators

Behavior = Callable[..., QueryBuilder]
"""``behavior(operator, query, field, *values) -> query``."""

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def default_modify(op: Operator, query: QueryBuilder, field: str, *values: Any) -> QueryBuilder:
    """Render ``where_template`` with the first value and append it.

    Templates without a ``{value}`` slot (``"{field} IS NULL"``) ignore the
    values entirely.
    """
    template = op.where_template
    if "{value}" not in template:
        return query.append(template.format(field=field, op=op.sql_operator))
    value = values[0] if values else ""
    fragment = template.format(field=escape_fragment(field), op=op.sql_operator, value="%s")
    return query.append(fragment, value)


def infer_arity(behavior: Behavior) -> int:
    """Number of user values ``behavior`` takes, not counting query and field.

    Behaviors with ``*values`` or optional parameters get a negative arity,
    ``-(required + 1)``, so ``(op, query, field, *values)`` is -1.
    """
    params = list(inspect.signature(behavior).parameters.values())[1:]
    required = 0
    optional = False
    for param in params:
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            optional = True
        elif param.kind in _POSITIONAL:
            if param.default is inspect.Parameter.empty:
                required += 1
            else:
                optional = True
    num = -(required + 1) if optional else required
    # query and field come before the values
    return num + 2 if num < 0 else num - 2


def _as_tuple(names: str | Iterable[str] | None) -> tuple[str, ...]:
    if names is None:
        return ()
    if isinstance(names, str):
        return (names,)
    return tuple(names)


class Operator:
    """A named filter operator.

    Args:
        name: Registry key, e.g. ``"="`` or ``"t-"``.
        arity: Number of values the operator takes; inferred from
            ``behavior`` when omitted. Negative means variadic.
        label: Translation key for the operator's display name.
        sql_operator: Comparison token for the default template.
        where_template: ``str.format`` template with ``field``, ``op`` and
            ``value`` slots.
        validate: Validator name or names run by :meth:`validate`.
        delegate: Name of the operator this one forwards to. Resolved by the
            registry once every operator exists.
        behavior: ``behavior(operator, query, field, *values)``. Defaults to
            :func:`default_modify`.
    """

    __slots__ = (
        "_name",
        "_arity",
        "_label",
        "_sql_operator",
        "_where_template",
        "_validators",
        "_behavior",
        "_delegate_name",
        "_delegate",
    )

    def __init__(
        self,
        name: str,
        *,
        arity: int | None = None,
        label: str | None = None,
        sql_operator: str | None = None,
        where_template: str = DEFAULT_WHERE_TEMPLATE,
        validate: str | Iterable[str] | None = None,
        delegate: str | None = None,
        behavior: Behavior | None = None,
    ) -> None:
        self._name = str(name)
        self._validators = _as_tuple(validate)
        for validator in self._validators:
            get_validator(validator)
        self._behavior = behavior or default_modify
        self._arity = infer_arity(self._behavior) if arity is None else arity
        self._label = label or self._name
        self._sql_operator = sql_operator or self._name
        self._where_template = where_template
        self._delegate_name = delegate
        self._delegate: Operator | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def label(self) -> str:
        return self._label

    @property
    def sql_operator(self) -> str:
        return self._sql_operator

    @property
    def where_template(self) -> str:
        return self._where_template

    @property
    def validators(self) -> tuple[str, ...]:
        return self._validators

    @property
    def delegate_name(self) -> str | None:
        return self._delegate_name

    @property
    def delegate(self) -> Operator:
        if self._delegate is None:
            raise OperatorError(
                "operator is not ready",
                f"operator {self._name!r} delegates to {self._delegate_name!r}, "
                "which has not been linked",
            )
        return self._delegate

    @property
    def is_variadic(self) -> bool:
        return self._arity < 0

    def link(self, target: Operator) -> None:
        """Bind the delegate. Called once by the registry."""
        if self._delegate is None:
            self._delegate = target

    def validate(self, *values: Any) -> None:
        """Run declared validators.

        Raises:
            ValidationError: If a non-blank value is malformed.
        """
        run_validators(self._validators, values)

    def modify(self, query: QueryBuilder, field: str, *values: Any) -> QueryBuilder:
        """Append this operator's predicate for ``field`` to ``query``."""
        return self._behavior(self, query, field, *values)

    def apply(self, query: QueryBuilder, field: str, *values: Any) -> QueryBuilder:
        """Validate ``values``, then :meth:`modify`."""
        self.validate(*values)
        return self.modify(query, field, *values)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<Operator {self._name!r}>"

    def __lt__(self, other: Operator) -> bool:
        if not isinstance(other, Operator):
            return NotImplemented
        return self._name < other._name
