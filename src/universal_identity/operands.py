"""Operator glue for values whose binary operations dispatch through the registry.

Python resolves ``a + b`` by asking ``a.__add__(b)`` and then
``b.__radd__(a)``. DispatchOperand answers both halves by looking the pair up
in the method table of the corresponding ``operator`` function, so a rule
registered for ``operator.add`` is reached by ``a + b``, ``operator.add(a, b)``
and ``functools.reduce(operator.add, ...)`` alike.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from .registry import REGISTRY

# (dunder stem, operator function, symbol)
BINARY_OPERATORS: tuple[tuple[str, Callable[[Any, Any], Any], str], ...] = (
    ("add", operator.add, "+"),
    ("sub", operator.sub, "-"),
    ("mul", operator.mul, "*"),
    ("matmul", operator.matmul, "@"),
    ("truediv", operator.truediv, "/"),
    ("floordiv", operator.floordiv, "//"),
    ("mod", operator.mod, "%"),
    ("pow", operator.pow, "**"),
    ("lshift", operator.lshift, "<<"),
    ("rshift", operator.rshift, ">>"),
    ("and", operator.and_, "&"),
    ("xor", operator.xor, "^"),
    ("or", operator.or_, "|"),
)

OPERATOR_SYMBOLS: dict[Callable[[Any, Any], Any], str] = {
    fn: symbol for _, fn, symbol in BINARY_OPERATORS
}


def challenge(op: Callable[..., Any], incumbent: Any, challenger: Any) -> Any:
    """Whether ``op(incumbent, challenger)`` selects the challenger.

    The builtins ``min`` and ``max`` keep an incumbent and replace it when
    ``challenger < incumbent`` (resp. ``>``) holds. Ordering comparisons of
    dispatching values are answered through the ``min``/``max`` method tables
    with this function. Returns NotImplemented when no rule applies.
    """
    result = REGISTRY.dispatch(op, incumbent, challenger)
    if result is NotImplemented:
        return NotImplemented
    return result is challenger


def _forward(stem: str, op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    def method(self: Any, other: Any) -> Any:
        return REGISTRY.dispatch(op, self, other)

    method.__name__ = method.__qualname__ = f"__{stem}__"
    return method


def _reflected(stem: str, op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    def method(self: Any, other: Any) -> Any:
        return REGISTRY.dispatch(op, other, self)

    method.__name__ = method.__qualname__ = f"__r{stem}__"
    return method


class DispatchOperand:
    """Mixin routing the binary operator dunders to the registry."""

    __slots__ = ()


for _stem, _op, _ in BINARY_OPERATORS:
    setattr(DispatchOperand, f"__{_stem}__", _forward(_stem, _op))
    setattr(DispatchOperand, f"__r{_stem}__", _reflected(_stem, _op))

del _stem, _op
