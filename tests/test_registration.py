from __future__ import annotations

import functools
import operator

import pytest

from universal_identity import (
    REGISTRY,
    STANDARD_OPERATIONS,
    Id,
    IdentityRegistry,
    Missing,
    RegistrationConflictError,
    RegistrationError,
    add_sum,
    define,
    mul_prod,
    disambiguate,
    hasidentity,
    identity_type,
    isknown,
    operation,
)

from fakes import Pairing, append, concat, unregistered


def test_standard_operations_have_identities() -> None:
    assert all(hasidentity(op) for op in STANDARD_OPERATIONS)


def test_standard_set_is_exactly_eight_operations() -> None:
    builtin = {record.op for record in REGISTRY.records() if record.binding != "operation"}
    assert builtin == {operator.mul, operator.add, operator.and_, operator.or_, min, max}
    assert len(STANDARD_OPERATIONS) == 8
    assert hasidentity(add_sum)
    assert hasidentity(mul_prod)


def test_adhoc_function_has_no_identity() -> None:
    assert not hasidentity(lambda x, y: x + y)
    assert not hasidentity(operator.sub)
    assert not hasidentity(unregistered)
    assert not hasidentity(functools.partial(operator.add, 1))


def test_hasidentity_never_raises_on_odd_input() -> None:
    assert not hasidentity(42)
    assert not hasidentity(None)
    assert not hasidentity([])


def test_hasidentity_accepts_identity_types() -> None:
    assert hasidentity(identity_type(operator.add))
    assert not hasidentity(identity_type(operator.sub))


def test_hasidentity_for_operation_class_and_instance() -> None:
    registry = IdentityRegistry()
    assert not hasidentity(Pairing, registry=registry)
    assert not hasidentity(Pairing(), registry=registry)


@pytest.mark.parametrize(
    "op",
    [*STANDARD_OPERATIONS, append, concat, unregistered, operator.sub, lambda x, y: x],
)
def test_isknown_agrees_with_hasidentity(op) -> None:
    assert isknown(Id(op)) == hasidentity(op)


def test_isknown_rejects_non_identities() -> None:
    assert not isknown(0)
    assert not isknown(None)


class TestDefine:
    def test_define_installs_rule_and_record(self) -> None:
        registry = IdentityRegistry()

        @operation(registry=registry)
        def join(left, right):
            return f"{left}{right}"

        define(join, registry=registry)
        assert hasidentity(join, registry=registry)
        assert hasidentity(join)
        assert not REGISTRY.has_record(join)
        assert join(Id(join), "x") == "x"
        assert join("a", "b") == "ab"

    def test_define_uses_the_operation_registry_by_default(self) -> None:
        registry = IdentityRegistry()

        @operation(registry=registry)
        def join(left, right):
            return f"{left}{right}"

        define(join)
        assert registry.has_record(join)
        assert not REGISTRY.has_record(join)
        assert join(Id(join), "x") == "x"

    def test_operation_rejects_a_foreign_registry(self) -> None:
        @operation
        def join(left, right):
            return f"{left}{right}"

        other = IdentityRegistry()
        with pytest.raises(RegistrationError):
            define(join, registry=other)
        assert not hasidentity(join, registry=other)
        assert not hasidentity(join)
        assert join(Id(join), "x") == f"{Id(join)!r}x"

    @pytest.mark.parametrize("op", [operator.sub, min])
    def test_builtin_operations_reject_a_private_registry(self, op) -> None:
        other = IdentityRegistry()
        with pytest.raises(RegistrationError):
            define(op, registry=other)
        assert not hasidentity(op, registry=other)
        assert len(other.records()) == 0

    def test_builtin_operations_accept_the_default_registry(self) -> None:
        assert define(operator.add, registry=REGISTRY) is operator.add

    def test_define_with_result_transform(self) -> None:
        assert append(Id(append), 1) == [1]
        assert append([1], 2) == [1, 2]

    def test_redefinition_is_idempotent(self) -> None:
        assert define(operator.add) is operator.add
        assert define(add_sum) is add_sum
        assert operator.add(Id(operator.add), 1) == 1

    def test_conflicting_redefinition_raises(self) -> None:
        with pytest.raises(RegistrationConflictError):
            define(operator.add, result=lambda x: x)

    def test_plain_function_is_rejected(self) -> None:
        def plus(x, y):
            return x + y

        with pytest.raises(RegistrationError):
            define(plus)
        with pytest.raises(RegistrationError):
            define(lambda x, y: x)
        assert not hasidentity(plus)

    def test_ordering_operation_rejects_transform(self) -> None:
        registry = IdentityRegistry()
        with pytest.raises(RegistrationError):
            define(min, result=lambda x: [x], registry=registry)
        assert not hasidentity(min, registry=registry)

    def test_custom_name_is_used_for_display(self) -> None:
        registry = IdentityRegistry()

        @operation(registry=registry)
        def weird(left, right):
            return right

        define(weird, name="⊕", registry=registry)
        assert registry.record(weird).name == "⊕"


class TestDisambiguate:
    def test_requires_registered_identity(self) -> None:
        registry = IdentityRegistry()

        @operation(registry=registry)
        def lone(left, right):
            return right

        with pytest.raises(RegistrationError):
            disambiguate(lone, Missing)

    def test_rejects_a_foreign_registry(self) -> None:
        other = IdentityRegistry()
        with pytest.raises(RegistrationError):
            disambiguate(min, Missing, registry=other)
        with pytest.raises(RegistrationError):
            disambiguate(append, int, registry=other)
        assert other.disambiguations() == ()

    def test_records_are_kept(self) -> None:
        records = {(r.op, r.right) for r in REGISTRY.disambiguations()}
        assert (min, Missing) in records
        assert (max, Missing) in records

    def test_repeat_is_idempotent(self) -> None:
        before = len(REGISTRY.disambiguations())
        disambiguate(min, Missing)
        assert len(REGISTRY.disambiguations()) == before

    def test_keeps_result_transform(self) -> None:
        registry = IdentityRegistry()

        @operation(registry=registry)
        def push(acc, x):
            return [*acc, x]

        define(push, result=lambda x: [x], registry=registry)
        disambiguate(push, int, registry=registry)
        assert push(Id(push), 1) == [1]
