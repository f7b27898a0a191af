"""Three-valued ordering and partial comparison helpers.

`partial_cmp` is the building block for field comparators: it returns
``None`` whenever two values cannot be ordered, which the sorter treats
as NULL semantics (``None``, NaN of any numeric type, unorderable types).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

__all__ = ["Ordering", "partial_cmp", "is_null"]


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)

    @classmethod
    def of(cls, value: int) -> "Ordering":
        """Normalize any ``cmp``-style integer to an Ordering."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


def is_null(value: Any) -> bool:
    if value is None:
        return True
    # NaN is the only value unequal to itself (float, Decimal, numpy scalars)
    try:
        return bool(value != value)
    except (TypeError, ValueError, ArithmeticError):
        return False


def partial_cmp(a: Any, b: Any) -> Optional[Ordering]:
    """Compare two plain values, returning None if they have no order.

    ``partial_cmp(x, x)`` is None exactly when ``x`` is null, so
    comparators built on it satisfy the sorter's self-comparison contract.
    """
    if is_null(a) or is_null(b):
        return None
    try:
        if a < b:
            return Ordering.LESS
        if b < a:
            return Ordering.GREATER
    except (TypeError, ArithmeticError):
        return None
    return Ordering.EQUAL
