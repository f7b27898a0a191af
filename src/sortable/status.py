"""Header indicator state for a column.

Rendering-agnostic counterpart of a sortable ``<th>``: tells a view which
glyph to draw next to a column label and whether the column is the active
sort field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import settings
from .sort_by import Direction
from .sorter import SortState

__all__ = ["HeaderStatus", "header_status", "direction_glyph"]


@dataclass(frozen=True)
class HeaderStatus:
    glyph: str
    active: bool

    @property
    def colour(self) -> str:
        return settings.ACTIVE_COLOUR if self.active else settings.INACTIVE_COLOUR


def direction_glyph(direction: Direction) -> str:
    if direction is Direction.ASCENDING:
        return settings.GLYPH_ASCENDING
    return settings.GLYPH_DESCENDING


def header_status(state: SortState[Any], field: Any) -> HeaderStatus:
    """Indicator for `field` given the sorter's current `state`.

    - unsortable: no glyph
    - fixed: arrow in the fixed direction
    - reversible: arrow in the active direction, or a double arrow when
      the field is inactive
    """
    active = state.field == field
    sort_by = field.sort_by()
    if sort_by is None:
        return HeaderStatus(settings.GLYPH_UNSORTABLE, active)
    if sort_by.is_fixed():
        return HeaderStatus(direction_glyph(sort_by.direction()), active)
    if active:
        return HeaderStatus(direction_glyph(state.direction), active)
    return HeaderStatus(settings.GLYPH_REVERSIBLE_INACTIVE, active)
