"""The operator registry: every known operator, keyed by name.

The default :data:`registry` is loaded when :mod:`pyreportops` is imported.
Registration is first-wins: a second ``register`` under a taken name returns
the existing operator and leaves it untouched.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Any

from pyreportops._errors import ERR_MSG_OPERATOR_NOT_FOUND, OperatorNotFoundError
from pyreportops._operator import Behavior, Operator
from pyreportops._operators import define_operators

logger = logging.getLogger(__name__)

INTEGER_OPERATORS = ("<", ">", "<=", ">=")
NULL_OPERATORS = ("*", "!*")
STRING_OPERATORS = ("!~", "~")
TIME_OPERATORS = ("t", "w", "<>d", ">d", "<d", "=d")
DEFAULT_OPERATORS = ("=", "!")

DEFAULT_OPERATOR = "="


class OperatorRegistry:
    """Table of operators, populated once by :meth:`load`.

    Args:
        definitions: Callable that registers the built-in operators.
            Defaults to the standard catalogue.
    """

    def __init__(
        self, definitions: Callable[[OperatorRegistry], None] | None = None
    ) -> None:
        self._operators: dict[str, Operator] = {}
        self._definitions = definitions or define_operators
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Register the built-in operators. Later calls do nothing."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._definitions(self)
            self._link()
            self._loaded = True
        logger.debug("registered %d operators", len(self._operators))

    def register(
        self,
        name: str,
        *,
        behavior: Behavior | None = None,
        **options: Any,
    ) -> Operator:
        """Create an operator under ``name`` unless one already exists.

        Keyword options are passed to :class:`~pyreportops._operator.Operator`.

        Returns:
            The operator now registered under ``name``, which is the existing
            one if the name was taken.
        """
        key = str(name)
        existing = self._operators.get(key)
        if existing is not None:
            logger.debug("operator %r already registered, keeping the first", key)
            return existing
        operator = Operator(key, behavior=behavior, **options)
        self._operators[key] = operator
        if self._loaded:
            self._link()
        return operator

    def find(self, name: str) -> Operator:
        """Look up an operator by exact name.

        Raises:
            OperatorNotFoundError: If no operator is registered under ``name``.
        """
        operator = self._operators.get(str(name))
        if operator is None:
            raise OperatorNotFoundError(
                ERR_MSG_OPERATOR_NOT_FOUND,
                f"Operator {name!r} not defined",
            )
        return operator

    def operator_for(self, name_or_operator: str | Operator) -> Operator:
        """Return an Operator as is, or look a name up with :meth:`find`."""
        if isinstance(name_or_operator, Operator):
            return name_or_operator
        return self.find(name_or_operator)

    def default_operator(self) -> Operator:
        return self.find(DEFAULT_OPERATOR)

    def integer_operators(self) -> list[Operator]:
        return [self.find(name) for name in INTEGER_OPERATORS]

    def null_operators(self) -> list[Operator]:
        return [self.find(name) for name in NULL_OPERATORS]

    def string_operators(self) -> list[Operator]:
        return [self.find(name) for name in STRING_OPERATORS]

    def time_operators(self) -> list[Operator]:
        return [self.find(name) for name in TIME_OPERATORS]

    def default_operators(self) -> list[Operator]:
        return [self.find(name) for name in DEFAULT_OPERATORS]

    def names(self) -> list[str]:
        return list(self._operators)

    def __contains__(self, name: object) -> bool:
        return str(name) in self._operators

    def __iter__(self) -> Iterator[Operator]:
        return iter(list(self._operators.values()))

    def __len__(self) -> int:
        return len(self._operators)

    def __repr__(self) -> str:
        return f"OperatorRegistry({len(self._operators)} operators)"

    def _link(self) -> None:
        """Point delegating operators at their targets."""
        for operator in self._operators.values():
            target_name = operator.delegate_name
            if target_name is None or target_name not in self._operators:
                continue
            operator.link(self._operators[target_name])


registry = OperatorRegistry()


def load() -> None:
    registry.load()


def register(name: str, *, behavior: Behavior | None = None, **options: Any) -> Operator:
    return registry.register(name, behavior=behavior, **options)


def find(name: str) -> Operator:
    return registry.find(name)


def operator_for(name_or_operator: str | Operator) -> Operator:
    return registry.operator_for(name_or_operator)


def default_operator() -> Operator:
    return registry.default_operator()


def integer_operators() -> list[Operator]:
    return registry.integer_operators()


def null_operators() -> list[Operator]:
    return registry.null_operators()


def string_operators() -> list[Operator]:
    return registry.string_operators()


def time_operators() -> list[Operator]:
    return registry.time_operators()


def default_operators() -> list[Operator]:
    return registry.default_operators()
