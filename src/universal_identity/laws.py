"""Identity laws.

A registered identity satisfies the left-identity law:

    op(Id(op), x) == x            for every x

or, when the identity was defined with a result transform ``f``:

    op(Id(op), x) == f(x)

Equality here is strict: the result must also have the type of the expected
value, so ``True`` does not stand in for ``1``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .identity import Id, operation_tag
from .operation import home_registry
from .registry import IdentityRegistry


def _same(result: Any, expected: Any) -> bool:
    if type(result) is not type(expected):
        return False
    return result is expected or bool(result == expected)


def violations(
    op: Callable[[Any, Any], Any],
    values: Iterable[Any],
    *,
    registry: IdentityRegistry | None = None,
) -> list[Any]:
    """Values for which ``op(Id(op), x)`` breaks the left-identity law.

    A call that raises TypeError (no rule, or an ambiguous one) counts as a
    violation.
    """
    registry = registry if registry is not None else home_registry(op)
    record = registry.record(operation_tag(op))
    transform = record.transform if record is not None else None
    seed = Id(op)

    failed: list[Any] = []
    for value in values:
        expected = transform(value) if transform is not None else value
        try:
            result = op(seed, value)
        except TypeError:
            failed.append(value)
            continue
        if not _same(result, expected):
            failed.append(value)
    return failed


def left_identity_holds(
    op: Callable[[Any, Any], Any],
    values: Iterable[Any],
    *,
    registry: IdentityRegistry | None = None,
) -> bool:
    """Whether ``op(Id(op), x)`` obeys the left-identity law for all ``values``."""
    return not violations(op, values, registry=registry)
