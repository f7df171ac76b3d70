"""
Folding with universal identities.

This example shows:
1. Seeding reduce/sum with Id(op) instead of a type-specific zero
2. The same seed working for numbers, strings and sets
3. Folding with min/max without an initial extreme value
4. Materializing the result of an empty fold
"""

import functools
import operator
from decimal import Decimal

from universal_identity import Id, add_sum, convert, missing


def fold(op, values):
    return functools.reduce(op, values, Id(op))


# =============================================================================
# Example 1: One seed, many types
# =============================================================================
def example_one_seed_many_types():
    print("\n--- Example 1: One seed, many types ---")
    print(f"  numbers: {fold(operator.add, [1, 2, 3])}")
    print(f"  strings: {fold(operator.add, ['uni', 'ver', 'sal'])!r}")
    print(f"  tuples:  {fold(operator.add, [(1,), (2, 3)])}")
    print(f"  sets:    {fold(operator.or_, [{1}, {2}, {3}])}")
    print(f"  sum():   {sum([0.5, 0.25], Id(operator.add))}")


# =============================================================================
# Example 2: Ordering folds
# =============================================================================
def example_ordering():
    print("\n--- Example 2: min/max ---")
    print(f"  min: {fold(min, [7, 3, 9])}")
    print(f"  max: {fold(max, ['pear', 'apple'])}")
    print(f"  min(Id(min), missing): {min(Id(min), missing)}")


# =============================================================================
# Example 3: Empty folds and materialization
# =============================================================================
def example_empty_fold():
    print("\n--- Example 3: Empty folds ---")
    empty = fold(add_sum, [])
    print(f"  result: {empty!r}")
    print(f"  as float: {float(empty)}")
    print(f"  as Decimal: {convert(Decimal, empty)!r}")
    print(f"  counting bools: {fold(add_sum, [True, True, False])}")


def main():
    print("=" * 60)
    print("Universal Identity - Folds")
    print("=" * 60)

    example_one_seed_many_types()
    example_ordering()
    example_empty_fold()


if __name__ == "__main__":
    main()
