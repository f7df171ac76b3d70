"""Identity values: one tagged singleton per operation."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, ClassVar

from .numeric import category_bases
from .operands import DispatchOperand, challenge
from .operation import Operation
from .registry import REGISTRY

_IDENTITY_TYPES: dict[Any, type[SpecificIdentity]] = {}


class Identity(DispatchOperand):
    """Abstract base of all identity types."""

    __slots__ = ()


class SpecificIdentity(Identity):
    """Base of identities tied to one operation.

    Concrete subclasses are created by ``identity_type`` and carry the
    operation tag as the class attribute ``op``. Each has exactly one
    instance and no per-instance state.
    """

    __slots__ = ()

    op: ClassVar[Any]

    def __new__(cls) -> SpecificIdentity:
        instance = cls.__dict__.get("_instance")
        if instance is None:
            raise TypeError("Use Id(op) to construct identities")
        return instance

    def __repr__(self) -> str:
        record = REGISTRY.record(self.op)
        if record is not None:
            return f"Id({record.name})"
        return f"{type(self).__name__}()"

    def __reduce__(self) -> tuple[Callable[[Any], SpecificIdentity], tuple[Any]]:
        return (Id, (self.op,))

    # min keeps its incumbent unless ``challenger < incumbent``, and the
    # reflection of that comparison is ``incumbent > challenger``.
    def __gt__(self, other: Any) -> Any:
        return challenge(min, self, other)

    def __ge__(self, other: Any) -> Any:
        return challenge(min, self, other)

    # Likewise for max and ``challenger > incumbent``.
    def __lt__(self, other: Any) -> Any:
        return challenge(max, self, other)

    def __le__(self, other: Any) -> Any:
        return challenge(max, self, other)


def operation_tag(op: Any) -> Any:
    """The static identity of an operation.

    Classes, routines (functions, builtins, methods) and Operation objects are
    their own tag. Any other callable instance is tagged by its type, so all
    instances of an operation class share one identity.
    """
    if isinstance(op, (type, Operation)) or inspect.isroutine(op):
        return op
    return type(op)


def _tag_name(tag: Any) -> str:
    return getattr(tag, "__qualname__", None) or repr(tag)


def identity_type(op: Any) -> type[SpecificIdentity]:
    """The identity class of ``op``; the same class for the same tag."""
    tag = operation_tag(op)
    cls = _IDENTITY_TYPES.get(tag)
    if cls is None:
        cls = type(
            f"IdentityOf[{_tag_name(tag)}]",
            (*category_bases(tag), SpecificIdentity),
            {"__slots__": (), "__module__": __name__, "op": tag},
        )
        # The singleton exists before the class is published
        cls._instance = object.__new__(cls)  # type: ignore[attr-defined]
        cls = _IDENTITY_TYPES.setdefault(tag, cls)
    return cls


def Id(op: Any) -> SpecificIdentity:
    """A generic left identity for ``op``.

    Example:
        >>> import functools, operator
        >>> Id(operator.mul) * 1
        1
        >>> Id(operator.mul) * "right"
        'right'
        >>> functools.reduce(operator.add, range(1, 4), Id(operator.add))
        6
        >>> float(Id(operator.mul))
        1.0
        >>> int(Id(operator.add))
        0
    """
    return identity_type(op)()
