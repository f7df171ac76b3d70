"""The ``missing`` marker for absent values.

``missing`` propagates through arithmetic, follows three-valued logic under
``&`` and ``|``, and wins ``min``/``max`` against any other operand. Its
rules on ``min``/``max`` accept any left operand, which ties with the generic
identity rules of those operations; the standard registrations disambiguate
``Id(min)`` and ``Id(max)`` against Missing.

Like other missing-value markers it has no truth value: ``bool(missing)``
raises TypeError, and so does ``min(1, missing)``.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any

from .identity import Identity
from .operands import DispatchOperand, challenge
from .registry import IdentityRegistry


class Missing(DispatchOperand):
    """Type of the ``missing`` singleton."""

    __slots__ = ()

    _instance: Missing | None = None

    def __new__(cls) -> Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "missing"

    def __reduce__(self) -> tuple[type[Missing], tuple[()]]:
        return (Missing, ())

    def __bool__(self) -> bool:
        raise TypeError("boolean value of missing is ambiguous")

    def __lt__(self, other: Any) -> Any:
        if isinstance(other, Identity):
            return challenge(min, other, self)
        return self

    def __gt__(self, other: Any) -> Any:
        if isinstance(other, Identity):
            return challenge(max, other, self)
        return self

    def __le__(self, other: Any) -> Any:
        return self

    def __ge__(self, other: Any) -> Any:
        return self


missing = Missing()

ARITHMETIC_OPERATORS = (
    operator.add,
    operator.sub,
    operator.mul,
    operator.truediv,
    operator.floordiv,
    operator.mod,
    operator.pow,
)


def _propagate(left: Any, right: Any) -> Missing:
    return missing


def _and_left(left: bool, right: Missing) -> bool | Missing:
    return False if not left else missing


def _and_right(left: Missing, right: bool) -> bool | Missing:
    return False if not right else missing


def _or_left(left: bool, right: Missing) -> bool | Missing:
    return True if left else missing


def _or_right(left: Missing, right: bool) -> bool | Missing:
    return True if right else missing


def install_rules(registry: IdentityRegistry) -> None:
    """Install the rules of ``missing`` into ``registry``."""
    for op in ARITHMETIC_OPERATORS:
        registry.register(op, Missing, numbers.Number, _propagate)
        registry.register(op, numbers.Number, Missing, _propagate)
        registry.register(op, Missing, Missing, _propagate)

    registry.register(operator.and_, bool, Missing, _and_left)
    registry.register(operator.and_, Missing, bool, _and_right)
    registry.register(operator.or_, bool, Missing, _or_left)
    registry.register(operator.or_, Missing, bool, _or_right)
    for op in (operator.and_, operator.or_, operator.xor):
        registry.register(op, Missing, Missing, _propagate)
    registry.register(operator.xor, bool, Missing, _propagate)
    registry.register(operator.xor, Missing, bool, _propagate)

    for op in (min, max):
        registry.register(op, Missing, object, _propagate)
        registry.register(op, object, Missing, _propagate)
        registry.register(op, Missing, Missing, _propagate)
