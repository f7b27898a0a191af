"""Exceptions raised by the sortable core."""

from __future__ import annotations

from typing import Any

__all__ = ["SortableError", "SortConfigError", "ComparatorContractError"]


class SortableError(Exception):
    """Base class for sortable errors that callers may handle."""


class SortConfigError(SortableError, ValueError):
    """Raised when a SorterConfig cannot be applied to a field type."""


class ComparatorContractError(AssertionError):
    """A field comparator returned None for two values that are both non-null.

    Indicates a broken ``partial_cmp_by`` implementation. Raised instead of
    guessing an order because any guess makes the sort non-deterministic.
    """

    def __init__(self, field: Any, a: Any, b: Any) -> None:
        super().__init__(
            f"partial_cmp_by for field {field!r} returned None for non-null values "
            f"{a!r} and {b!r}"
        )
        self.field = field
        self.a = a
        self.b = b
