"""
Defining identities for your own operations.

This example shows:
1. Wrapping a binary function with @operation so it can dispatch
2. Defining its identity with define(), with and without a result transform
3. Checking the identity law and inspecting the registry
"""

import functools
from typing import Any

from universal_identity import (
    REGISTRY,
    Id,
    define,
    hasidentity,
    left_identity_holds,
    missing,
    operation,
)


@define
@operation
def merge(left: dict, right: dict) -> dict:
    """Right-biased dictionary merge."""
    return {**left, **right}


@define(result=lambda x: (x,))
@operation
def push(acc: tuple, x: Any) -> tuple:
    """Append to an immutable tuple; Id(push) starts a new one."""
    return (*acc, x)


def main():
    print("=" * 60)
    print("Universal Identity - Custom operations")
    print("=" * 60)

    configs = [{"host": "localhost"}, {"port": 8080}, {"host": "example.org"}]
    print(f"\nmerge: {functools.reduce(merge, configs, Id(merge))}")
    print(f"push:  {functools.reduce(push, [1, missing, 2.0], Id(push))}")

    print(f"\nhasidentity(merge): {hasidentity(merge)}")
    print(f"identity law holds for push: {left_identity_holds(push, [1, 'a', None])}")

    print("\nRegistered identities:")
    for record in REGISTRY.records():
        print(f"  Id({record.name}) via {record.binding} binding")


if __name__ == "__main__":
    main()
