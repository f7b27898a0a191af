"""Sort descriptor model.

Describes, per sortable field, which direction(s) are legal and which
direction applies when the field first becomes active. A field that
cannot be sorted returns ``None`` from ``sort_by()`` instead of a
descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["Direction", "NullHandling", "SortBy"]


class Direction(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def invert(self) -> "Direction":
        if self is Direction.ASCENDING:
            return Direction.DESCENDING
        return Direction.ASCENDING


class NullHandling(str, Enum):
    """Placement of values whose order is undefined (NULLS FIRST / LAST)."""

    FIRST = "first"
    LAST = "last"

    @classmethod
    def default(cls) -> "NullHandling":
        return cls.LAST


@dataclass(frozen=True)
class SortBy:
    """Descriptor for a sortable field.

    Attributes
    ----------
    initial: Direction
        For fixed descriptors the only legal direction; for reversible
        descriptors the direction used when the field is activated.
    reversible: bool
        Whether the user may toggle the direction.
    """

    initial: Direction
    reversible: bool = True

    # Factories ---------------------------------------------------------
    @classmethod
    def fixed(cls, direction: Direction) -> "SortBy":
        return cls(direction, reversible=False)

    @classmethod
    def reversible_from(cls, direction: Direction) -> "SortBy":
        return cls(direction, reversible=True)

    @staticmethod
    def unsortable() -> Optional["SortBy"]:
        return None

    @classmethod
    def increasing(cls) -> "SortBy":
        return cls.fixed(Direction.ASCENDING)

    @classmethod
    def decreasing(cls) -> "SortBy":
        return cls.fixed(Direction.DESCENDING)

    @classmethod
    def increasing_or_decreasing(cls) -> "SortBy":
        return cls.reversible_from(Direction.ASCENDING)

    @classmethod
    def decreasing_or_increasing(cls) -> "SortBy":
        return cls.reversible_from(Direction.DESCENDING)

    @classmethod
    def default(cls) -> "SortBy":
        return cls.reversible_from(Direction.ASCENDING)

    # Queries -----------------------------------------------------------
    def is_fixed(self) -> bool:
        return not self.reversible

    def is_reversible(self) -> bool:
        return self.reversible

    def direction(self) -> Direction:
        return self.initial

    def ensure_direction(self, requested: Direction) -> Direction:
        """Return `requested` if legal for this descriptor, else the fixed direction."""
        if self.reversible:
            return requested
        return self.initial

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        kind = "Reversible" if self.reversible else "Fixed"
        return f"SortBy.{kind}({self.initial.name})"
