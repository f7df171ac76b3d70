from __future__ import annotations

import functools
import operator

import pytest

from universal_identity import (
    Id,
    add_sum,
    as_float,
    left_identity_holds,
    missing,
    mul_prod,
    violations,
)
from universal_identity.standard import STANDARD_OPERATIONS

from fakes import SAMPLE_VALUES, append, concat, unregistered


def fold(op, values):
    return functools.reduce(op, values, Id(op))


class TestFolds:
    def test_reduce_add(self) -> None:
        assert fold(operator.add, [1, 2, 3]) == 6

    def test_sum_with_identity_start(self) -> None:
        assert sum([1, 2, 3], Id(operator.add)) == 6

    def test_reduce_append_matches_list_seed(self) -> None:
        values = (1, missing, 2.0)
        result = fold(append, values)
        assert result == functools.reduce(append, values, [])
        assert result == [1, missing, 2.0]

    def test_reduce_strings(self) -> None:
        assert fold(operator.add, ["a", "b", "c"]) == "abc"
        assert fold(concat, ["a", "b", "c"]) == "abc"

    def test_reduce_sets(self) -> None:
        assert fold(operator.or_, [{1}, {2}, {1, 3}]) == {1, 2, 3}
        assert fold(operator.and_, [{1, 2}, {2, 3}]) == {2}

    def test_reduce_bools(self) -> None:
        assert fold(operator.and_, [True, False, True]) is False
        assert fold(operator.or_, [False, True]) is True

    def test_reduce_min_max(self) -> None:
        assert fold(min, [3, 1, 2]) == 1
        assert fold(max, [3, 1, 2]) == 3
        assert fold(min, ["b", "a"]) == "a"

    def test_builtin_min_max_over_iterables(self) -> None:
        assert min([Id(min), 5, 4]) == 4
        assert max([Id(max), -5, -4]) == -4

    def test_promoting_operations(self) -> None:
        assert fold(add_sum, [True, True, False]) == 2
        assert fold(mul_prod, [2, 3, 4]) == 24

    def test_empty_fold_materializes(self) -> None:
        assert fold(operator.add, []) is Id(operator.add)
        assert as_float(fold(operator.mul, [])) == 1.0


class TestLaws:
    @pytest.mark.parametrize("op", STANDARD_OPERATIONS)
    def test_standard_operations_hold(self, op) -> None:
        assert left_identity_holds(op, SAMPLE_VALUES)

    def test_transformed_identity_holds(self) -> None:
        assert violations(append, SAMPLE_VALUES) == []

    def test_operator_without_identity(self) -> None:
        assert violations(operator.sub, [1, 2.5]) == [1, 2.5]

    def test_operation_without_identity(self) -> None:
        assert not left_identity_holds(unregistered, [1])
