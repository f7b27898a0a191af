"""Qt (PyQt6) rendering layer for sortable tables."""

from __future__ import annotations

from .sortable_table import Column, SortableTableWidget  # noqa: F401

__all__ = ["Column", "SortableTableWidget"]
