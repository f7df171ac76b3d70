"""Error types for identity dispatch and registration."""

from __future__ import annotations

from typing import Any

Signature = tuple[type, type]


def describe_signature(signature: Signature) -> str:
    return "(" + ", ".join(t.__qualname__ for t in signature) + ")"


class IdentityError(Exception):
    """Base class for all errors raised by universal_identity."""


class NoApplicableRuleError(IdentityError, TypeError):
    """No rule of an operation's method table matches the operand types."""

    def __init__(self, op_name: str, signature: Signature) -> None:
        self.op_name = op_name
        self.signature = signature
        super().__init__(f"no rule of {op_name} applies to {describe_signature(signature)}")


class AmbiguousDispatchError(IdentityError, TypeError):
    """Two or more equally specific rules match the operand types.

    The tie is never resolved silently: install a more specific rule for the
    exact signature (see ``universal_identity.disambiguate``).
    """

    def __init__(self, op_name: str, signature: Signature, candidates: tuple[Signature, ...]) -> None:
        self.op_name = op_name
        self.signature = signature
        self.candidates = candidates
        listed = ", ".join(describe_signature(c) for c in candidates)
        super().__init__(
            f"{op_name}{describe_signature(signature)} is ambiguous between {listed}"
        )


class RegistrationError(IdentityError, ValueError):
    """An operation cannot be registered as requested."""


class RegistrationConflictError(RegistrationError):
    """A registration contradicts one that is already installed."""

    def __init__(self, message: str, existing: Any = None) -> None:
        self.existing = existing
        super().__init__(message)


class MaterializationError(IdentityError, TypeError):
    """An identity has no concrete value in the requested type."""

    def __init__(self, message: str, target: object) -> None:
        self.target = target
        super().__init__(message)

    def __repr__(self) -> str:
        return f"MaterializationError({super().__repr__()}, target={self.target!r})"
