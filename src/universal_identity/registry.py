"""Identity registry: method tables and registration records."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from .config import RegistryConfig
from .dispatch import MethodTable, Rule, meet
from .errors import (
    AmbiguousDispatchError,
    NoApplicableRuleError,
    RegistrationConflictError,
    Signature,
    describe_signature,
)

logger = logging.getLogger(__name__)

Binding = Literal["operator", "ordering", "operation"]


class IdentityRecord(BaseModel):
    """A registered left identity for ``op``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    op: Any
    name: str
    binding: Binding
    transform: Callable[[Any], Any] | None = None


class DisambiguationRecord(BaseModel):
    """An explicit rule for ``op(Id(op), x)`` where ``x`` is a ``right``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    op: Any
    right: type[Any]


def display_name(op: Any) -> str:
    """Short human-readable name of an operation."""
    name = getattr(op, "__qualname__", None) or getattr(op, "__name__", None)
    return name if name is not None else repr(op)


class IdentityRegistry:
    """Registry of method tables and identity records.

    Tables are keyed by operation object. Registrations are append-only:
    nothing is ever removed, and a registration that contradicts an existing
    one raises RegistrationConflictError.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self.config = config or RegistryConfig()
        self._tables: dict[Any, MethodTable] = {}
        self._records: dict[Any, IdentityRecord] = {}
        self._disambiguations: list[DisambiguationRecord] = []

    def __repr__(self) -> str:
        return (
            f"IdentityRegistry(tables={len(self._tables)}, "
            f"identities={len(self._records)}, "
            f"disambiguations={len(self._disambiguations)})"
        )

    # Method tables

    def table(self, op: Any, name: str | None = None) -> MethodTable:
        """Get the method table of ``op``, creating it if needed."""
        table = self._tables.get(op)
        if table is None:
            table = MethodTable(name or display_name(op))
            self._tables[op] = table
        return table

    def get_table(self, op: Any) -> MethodTable | None:
        return self._tables.get(op)

    def register(
        self,
        op: Any,
        left: type,
        right: type,
        rule: Rule | None = None,
    ) -> Any:
        """Install a rule of ``op`` for ``(left, right)``.

        Can be used directly or as a decorator when ``rule`` is omitted.
        """
        if rule is None:
            def decorator(fn: Rule) -> Rule:
                self.register(op, left, right, fn)
                return fn
            return decorator

        self.table(op).register(left, right, rule)
        logger.debug(
            "Registered rule %s(%s, %s)",
            display_name(op),
            left.__qualname__,
            right.__qualname__,
        )
        return rule

    def dispatch(self, op: Any, left: Any, right: Any) -> Any:
        """Apply the rule of ``op`` matching the operands.

        Returns NotImplemented when ``op`` has no table or no rule applies, so
        Python's operator protocol can fall back or raise TypeError.
        Ambiguous calls raise AmbiguousDispatchError.
        """
        table = self._tables.get(op)
        if table is None:
            return NotImplemented
        try:
            rule = table.resolve(type(left), type(right))
        except NoApplicableRuleError:
            return NotImplemented
        return rule(left, right)

    # Identity records

    def record(self, tag: Any) -> IdentityRecord | None:
        try:
            return self._records.get(tag)
        except TypeError:
            # Unhashable tags are never registered
            return None

    def has_record(self, tag: Any) -> bool:
        return self.record(tag) is not None

    def add_record(self, record: IdentityRecord) -> None:
        existing = self._records.get(record.op)
        if existing is not None and existing != record:
            raise RegistrationConflictError(
                f"{record.name} already has a different registered identity",
                existing=existing,
            )
        self._records[record.op] = record
        logger.debug("Registered identity Id(%s) via %s binding", record.name, record.binding)

    def records(self) -> tuple[IdentityRecord, ...]:
        return tuple(self._records.values())

    def add_disambiguation(self, record: DisambiguationRecord) -> None:
        if record not in self._disambiguations:
            self._disambiguations.append(record)
            logger.debug(
                "Disambiguated Id(%s) against %s",
                display_name(record.op),
                record.right.__qualname__,
            )

    def disambiguations(self) -> tuple[DisambiguationRecord, ...]:
        return tuple(self._disambiguations)

    # Static checks

    def ambiguities(self) -> dict[Any, list[tuple[Signature, Signature]]]:
        """Ambiguous signature pairs, per operation with any."""
        found: dict[Any, list[tuple[Signature, Signature]]] = {}
        for op, table in self._tables.items():
            pairs = table.ambiguities()
            if pairs:
                found[op] = pairs
        return found

    def check_ambiguities(self) -> None:
        """Report ambiguous signatures according to ``config.ambiguity_policy``."""
        found = self.ambiguities()
        for op, pairs in found.items():
            for a, b in pairs:
                logger.warning(
                    "Ambiguous rules of %s: %s and %s tie on %s",
                    display_name(op),
                    describe_signature(a),
                    describe_signature(b),
                    describe_signature(meet(a, b)),
                )
        if found and self.config.ambiguity_policy == "raise":
            op, pairs = next(iter(found.items()))
            a, b = pairs[0]
            raise AmbiguousDispatchError(self.table(op).name, meet(a, b), (a, b))


REGISTRY = IdentityRegistry(RegistryConfig.from_env())
