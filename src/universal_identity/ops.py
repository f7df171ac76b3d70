"""Promoting reduction operations.

``add_sum`` and ``mul_prod`` are the operations reductions use in place of
``+`` and ``*``: bool-like operands are promoted to ``int`` before combining,
so counting with booleans always yields integers.
"""

from __future__ import annotations

from typing import Any

from .operation import operation


def _promote(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    return value


@operation
def add_sum(x: Any, y: Any) -> Any:
    """``x + y`` with bool operands promoted to int."""
    return _promote(x) + _promote(y)


@operation
def mul_prod(x: Any, y: Any) -> Any:
    """``x * y`` with bool operands promoted to int."""
    return _promote(x) * _promote(y)
