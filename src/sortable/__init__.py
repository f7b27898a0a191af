"""Sortable tables: public API.

Sort state is kept separately from the data. A table declares a field enum
(one member per column) implementing ``sort_by``, ``null_handling`` and
``partial_cmp_by``, builds a `Sorter` for it and calls ``sorter.sort(rows)``
before rendering. Null handling follows SQL ``ORDER BY ... NULLS FIRST|LAST``.

Qt widgets live in the separate ``sortable_qt`` package so this one stays
importable without a GUI toolkit.
"""

from __future__ import annotations

from .errors import ComparatorContractError, SortableError, SortConfigError  # noqa: F401
from .fields import PartialOrdBy, Sortable, SortableField, default_field  # noqa: F401
from .notifier import StateNotifier, Subscription  # noqa: F401
from .ordering import Ordering, is_null, partial_cmp  # noqa: F401
from .sort_by import Direction, NullHandling, SortBy  # noqa: F401
from .sorter import Sorter, SorterConfig, SortState, StateChange, sort_items  # noqa: F401
from .status import HeaderStatus, header_status  # noqa: F401

__all__ = [
    "ComparatorContractError",
    "SortableError",
    "SortConfigError",
    "StateNotifier",
    "Subscription",
    "PartialOrdBy",
    "Sortable",
    "SortableField",
    "default_field",
    "Ordering",
    "is_null",
    "partial_cmp",
    "Direction",
    "NullHandling",
    "SortBy",
    "Sorter",
    "SorterConfig",
    "SortState",
    "StateChange",
    "sort_items",
    "HeaderStatus",
    "header_status",
]
