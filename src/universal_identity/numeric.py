"""Numeric materialization of additive and multiplicative identities.

Only identities of a fixed set of operations have a numeric value:

* additive: ``operator.add`` and ``add_sum`` (zero);
* multiplicative: ``operator.mul`` and ``mul_prod`` (one).

Identity classes of those operations derive from AdditiveIdentity or
MultiplicativeIdentity and therefore support ``float()`` and ``int()``. Other
identities have no ``__float__``/``__int__`` at all, so asking for their
numeric value is a TypeError raised by Python itself.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, TypeVar

from .errors import MaterializationError
from .ops import add_sum, mul_prod

T = TypeVar("T")

ADDITIVE_OPERATIONS: frozenset[Any] = frozenset({operator.add, add_sum})
MULTIPLICATIVE_OPERATIONS: frozenset[Any] = frozenset({operator.mul, mul_prod})

# Text-like types whose "one" is the empty value, concatenation being their product
TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)

# Mapping min/max identities to +inf/-inf is left out on purpose: the sentinel
# would leak into downstream numeric comparisons.


class AdditiveIdentity:
    """Mixin for identities that materialize as zero."""

    __slots__ = ()

    def __float__(self) -> float:
        return 0.0

    def __int__(self) -> int:
        return 0


class MultiplicativeIdentity:
    """Mixin for identities that materialize as one."""

    __slots__ = ()

    def __float__(self) -> float:
        return 1.0

    def __int__(self) -> int:
        return 1


NumericIdentity = AdditiveIdentity | MultiplicativeIdentity


def category_bases(tag: Any) -> tuple[type, ...]:
    """Numeric mixins for the identity class of ``tag``."""
    if tag in ADDITIVE_OPERATIONS:
        return (AdditiveIdentity,)
    if tag in MULTIPLICATIVE_OPERATIONS:
        return (MultiplicativeIdentity,)
    return ()


def as_float(identity: NumericIdentity) -> float:
    """``0.0`` for additive identities, ``1.0`` for multiplicative ones."""
    return float(identity)


def as_integer(identity: NumericIdentity) -> int:
    """``0`` for additive identities, ``1`` for multiplicative ones."""
    return int(identity)


def zero(target: type[T]) -> T:
    """The additive identity of a numeric type."""
    if isinstance(target, type) and issubclass(target, numbers.Number):
        return target(0)  # type: ignore[call-arg]
    raise MaterializationError(f"{target!r} has no zero", target)


def one(target: type[T]) -> T:
    """The multiplicative identity of a numeric or text-like type."""
    if isinstance(target, type):
        if issubclass(target, numbers.Number):
            return target(1)  # type: ignore[call-arg]
        if issubclass(target, TEXT_TYPES):
            return target()
    raise MaterializationError(f"{target!r} has no one", target)


def convert(target: type[T], identity: Any) -> T:
    """Materialize ``identity`` as a value of type ``target``.

    Raises:
        MaterializationError: ``identity`` is neither additive nor
            multiplicative, or ``target`` has no matching value.
    """
    if isinstance(identity, AdditiveIdentity):
        return zero(target)
    if isinstance(identity, MultiplicativeIdentity):
        return one(target)
    raise MaterializationError(f"{identity!r} has no numeric value", target)
