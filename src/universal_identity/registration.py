"""Registration of identities and disambiguation of their rules."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .dispatch import Rule
from .errors import RegistrationConflictError, RegistrationError
from .identity import SpecificIdentity, identity_type, operation_tag
from .operands import OPERATOR_SYMBOLS
from .operation import Operation, home_registry
from .registry import (
    Binding,
    DisambiguationRecord,
    IdentityRecord,
    IdentityRegistry,
    display_name,
)

logger = logging.getLogger(__name__)

ORDERING_OPERATIONS: tuple[Callable[..., Any], ...] = (min, max)


def _absorb(identity: Any, x: Any) -> Any:
    return x


def _transforming(transform: Callable[[Any], Any]) -> Rule:
    def absorb(identity: Any, x: Any) -> Any:
        return transform(x)

    return absorb


def _binding(op: Any) -> Binding:
    if isinstance(op, Operation):
        return "operation"
    if any(op is ordering for ordering in ORDERING_OPERATIONS):
        return "ordering"
    if any(op is fn for fn in OPERATOR_SYMBOLS):
        return "operator"
    raise RegistrationError(
        f"{op!r} does not dispatch on its operands; wrap it with @operation to define an identity"
    )


def _bound_registry(op: Any, registry: IdentityRegistry | None) -> IdentityRegistry:
    home = home_registry(op)
    if registry is not None and registry is not home:
        raise RegistrationError(
            f"{display_name(op)} dispatches through {home!r}; its rules cannot live in {registry!r}"
        )
    return home


def define(
    op: Any = None,
    result: Callable[[Any], Any] | None = None,
    *,
    name: str | None = None,
    registry: IdentityRegistry | None = None,
) -> Any:
    """Define a generic left identity for ``op``.

    Installs the rule ``op(Id(op), x) -> x`` and records that ``op`` has an
    identity. ``result`` replaces the returned value with ``result(x)``, which
    suits operations such as an appending ``push`` whose identity case must
    still return a container::

        @define(result=lambda x: [x])
        @operation
        def push(acc, x):
            return [*acc, x]

    Accepted operations are the binary functions of the ``operator`` module,
    the builtins ``min`` and ``max`` and Operation objects. Defining the same
    identity again is a no-op; defining it with a different ``result`` raises
    RegistrationConflictError.

    The rule and the record go to the registry that ``op`` dispatches
    through: an Operation's own registry, or REGISTRY for the others. Any
    other ``registry`` raises RegistrationError.

    Returns:
        ``op`` itself, or a decorator when ``op`` is omitted.
    """
    if op is None:
        return lambda fn: define(fn, result, name=name, registry=registry)

    binding = _binding(op)
    if binding == "ordering" and result is not None:
        raise RegistrationError(f"{display_name(op)} returns one of its operands; it cannot take a result transform")
    registry = _bound_registry(op, registry)

    record = IdentityRecord(
        op=op,
        name=name or OPERATOR_SYMBOLS.get(op) or display_name(op),
        binding=binding,
        transform=result,
    )
    existing = registry.record(op)
    if existing is not None:
        if existing == record:
            logger.debug("Id(%s) is already defined", existing.name)
            return op
        raise RegistrationConflictError(f"Id({existing.name}) is already defined differently", existing=existing)

    rule = _absorb if result is None else _transforming(result)
    registry.register(op, identity_type(op), object, rule)
    registry.add_record(record)
    return op


def disambiguate(op: Any, right: type, *, registry: IdentityRegistry | None = None) -> None:
    """Install the identity rule of ``op`` for right operands of type ``right``.

    Use this when another rule of ``op`` also accepts any left operand for a
    ``right`` (for example a missing-value marker), which makes
    ``op(Id(op), right_value)`` ambiguous. The new rule returns exactly what
    the generic one would.
    """
    registry = _bound_registry(op, registry)
    existing = registry.record(op)
    if existing is None:
        raise RegistrationError(f"{display_name(op)} has no identity to disambiguate")

    record = DisambiguationRecord(op=op, right=right)
    if record in registry.disambiguations():
        return
    rule = _absorb if existing.transform is None else _transforming(existing.transform)
    registry.register(op, identity_type(op), right, rule)
    registry.add_disambiguation(record)


def hasidentity(op: Any, *, registry: IdentityRegistry | None = None) -> bool:
    """Whether a left identity is registered for ``op``.

    Accepts an operation, a callable instance of an operation class, or an
    identity class as returned by ``identity_type``. Never raises.
    """
    if isinstance(op, type) and issubclass(op, SpecificIdentity) and "op" in op.__dict__:
        tag = op.op
    else:
        tag = operation_tag(op)
    registry = registry if registry is not None else home_registry(tag)
    return registry.has_record(tag)


def isknown(identity: Any, *, registry: IdentityRegistry | None = None) -> bool:
    """Whether ``identity`` is the identity of an operation with a registered identity."""
    if not isinstance(identity, SpecificIdentity):
        return False
    return hasidentity(type(identity), registry=registry)
