"""Two-argument method tables.

A MethodTable maps signatures ``(left_type, right_type)`` to rules
``rule(left, right)``. A call is resolved to the most specific applicable
signature, where ``(a, b)`` is more specific than ``(c, d)`` when ``a`` is a
subclass of ``c`` and ``b`` is a subclass of ``d``.

When several applicable signatures match and none of them is more specific
than all the others, the call is ambiguous. Ambiguity is reported, never
resolved by registration order.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from .errors import (
    AmbiguousDispatchError,
    NoApplicableRuleError,
    RegistrationConflictError,
    Signature,
)

Rule = Callable[[Any, Any], Any]

# Resolved signatures remembered per table
RESOLUTION_CACHE_SIZE = 256


def supersedes(a: Signature, b: Signature) -> bool:
    """Whether signature ``a`` is at least as specific as ``b`` in every position."""
    return all(issubclass(x, y) for x, y in zip(a, b))


def consistent(a: Signature, b: Signature) -> bool:
    """Whether some pair of operand types could match both signatures."""
    return all(issubclass(x, y) or issubclass(y, x) for x, y in zip(a, b))


def meet(a: Signature, b: Signature) -> Signature:
    """The most general signature matched by both ``a`` and ``b``."""
    left, right = (x if issubclass(x, y) else y for x, y in zip(a, b))
    return (left, right)


class MethodTable:
    """Rules of a single binary operation, keyed by operand types."""

    def __init__(self, name: str, cache_size: int = RESOLUTION_CACHE_SIZE) -> None:
        self.name = name
        self._rules: dict[Signature, Rule] = {}
        self._lookup = functools.lru_cache(maxsize=cache_size)(self._find)

    def __contains__(self, signature: object) -> bool:
        return signature in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"MethodTable({self.name!r}, rules={len(self._rules)})"

    def signatures(self) -> tuple[Signature, ...]:
        """All registered signatures, in registration order."""
        return tuple(self._rules)

    def cache_info(self) -> Any:
        """Statistics of the resolution cache."""
        return self._lookup.cache_info()

    def register(self, left: type, right: type, rule: Rule) -> None:
        """Install ``rule`` for ``(left, right)``.

        Installing the same rule twice is a no-op; installing a different rule
        for an existing signature raises RegistrationConflictError.
        """
        signature = (left, right)
        existing = self._rules.get(signature)
        if existing is not None:
            if existing is rule:
                return
            raise RegistrationConflictError(
                f"{self.name} already has a rule for "
                f"({left.__qualname__}, {right.__qualname__})",
                existing=existing,
            )
        self._rules[signature] = rule
        self._lookup.cache_clear()

    def resolve(self, left: type, right: type) -> Rule:
        """Find the rule for operands of types ``left`` and ``right``.

        Raises:
            NoApplicableRuleError: No signature matches.
            AmbiguousDispatchError: The best matches tie.
        """
        return self._lookup(left, right)

    def _find(self, left: type, right: type) -> Rule:
        key = (left, right)
        applicable = [sig for sig in self._rules if supersedes(key, sig)]
        if not applicable:
            raise NoApplicableRuleError(self.name, key)

        for candidate in applicable:
            if all(supersedes(candidate, other) for other in applicable):
                return self._rules[candidate]

        # Report only the most specific contenders
        contenders = tuple(
            sig
            for sig in applicable
            if not any(other != sig and supersedes(other, sig) for other in applicable)
        )
        raise AmbiguousDispatchError(self.name, key, contenders)

    def __call__(self, left: Any, right: Any) -> Any:
        return self.resolve(type(left), type(right))(left, right)

    def ambiguities(self) -> list[tuple[Signature, Signature]]:
        """Pairs of signatures that tie on their common operand types.

        A pair is reported when both can match the same operands, neither is
        more specific than the other, and no rule is registered for their meet.
        """
        signatures = list(self._rules)
        found: list[tuple[Signature, Signature]] = []
        for i, a in enumerate(signatures):
            for b in signatures[i + 1:]:
                if not consistent(a, b):
                    continue
                if supersedes(a, b) or supersedes(b, a):
                    continue
                if meet(a, b) in self._rules:
                    continue
                found.append((a, b))
        return found
