"""Binary operations that dispatch through an identity registry."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, Generic, TypeVar, overload

from .dispatch import Rule
from .registry import REGISTRY, IdentityRegistry

R = TypeVar("R")


class Operation(Generic[R]):
    """A named binary operation with a method table.

    Calling the operation looks for a registered rule matching the operand
    types and falls back to the wrapped function when none applies. This is
    how plain Python functions get the overloads that ``define`` and
    ``disambiguate`` install.

    Example:
        >>> @operation
        ... def concat(left, right):
        ...     return left + right
        >>> define(concat)
        <operation concat>
        >>> concat(Id(concat), "abc")
        'abc'
    """

    def __init__(self, fn: Callable[[Any, Any], R], *, registry: IdentityRegistry | None = None) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._registry = registry

    @property
    def registry(self) -> IdentityRegistry:
        return self._registry if self._registry is not None else REGISTRY

    def __call__(self, left: Any, right: Any) -> R:
        result = self.registry.dispatch(self, left, right)
        if result is NotImplemented:
            return self._fn(left, right)
        return result

    def register(self, left: type, right: type) -> Callable[[Rule], Rule]:
        """Decorator installing a rule of this operation for ``(left, right)``."""
        return self.registry.register(self, left, right)

    def __repr__(self) -> str:
        return f"<operation {self.__qualname__}>"

    def __reduce__(self) -> str:
        # Pickled and copied by reference to the module-level name
        return self.__qualname__


def home_registry(op: Any) -> IdentityRegistry:
    """The registry whose rules a call of ``op`` applies.

    Operations dispatch through their own registry; the ``operator``
    functions and ``min``/``max`` are reached through the operand dunders,
    which always use REGISTRY.
    """
    if isinstance(op, Operation):
        return op.registry
    return REGISTRY


@overload
def operation(fn: Callable[[Any, Any], R]) -> Operation[R]: ...


@overload
def operation(
    fn: None = None, *, registry: IdentityRegistry | None = None
) -> Callable[[Callable[[Any, Any], R]], Operation[R]]: ...


def operation(
    fn: Callable[[Any, Any], R] | None = None,
    *,
    registry: IdentityRegistry | None = None,
) -> Operation[R] | Callable[[Callable[[Any, Any], R]], Operation[R]]:
    """Turn a binary function into a dispatching Operation.

    Usable bare (``@operation``) or with arguments
    (``@operation(registry=my_registry)``).
    """
    if fn is None:
        return lambda f: Operation(f, registry=registry)
    return Operation(fn, registry=registry)
