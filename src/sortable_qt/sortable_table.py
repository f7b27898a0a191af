"""SortableTableWidget

QTableWidget whose header clicks drive a `Sorter`. Qt's built-in sorting
stays disabled; rows are ordered by the sorter (with its null placement)
and re-rendered whenever the sorter publishes a state change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QHeaderView, QTableWidget, QTableWidgetItem, QWidget

from sortable.sorter import Sorter, SortState, StateChange, sort_items
from sortable.status import header_status

__all__ = ["Column", "SortableTableWidget"]

T = TypeVar("T")


@dataclass(frozen=True)
class Column:
    field: Any
    label: str
    # Extracts the cell text from a row
    formatter: Callable[[Any], str]


class SortableTableWidget(QTableWidget):
    def __init__(
        self,
        sorter: Sorter[Any],
        columns: Sequence[Column],
        parent: Optional[QWidget] = None,
    ):
        super().__init__(0, len(columns), parent)
        self.sorter = sorter
        self.columns: List[Column] = list(columns)
        self._rows: List[T] = []
        self._display_rows: List[T] = []
        self.setSortingEnabled(False)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.verticalHeader().setVisible(False)
        header = self.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        subscription = sorter.subscribe(self._on_sort_changed)
        self._subscription = subscription
        self.destroyed.connect(lambda *_: sorter.unsubscribe(subscription))  # type: ignore
        self._render_header(sorter.get_state())

    # Data ---------------------------------------------------------------
    def set_rows(self, rows: Sequence[T]) -> None:
        self._rows = list(rows)
        self.refresh()

    def displayed_rows(self) -> List[T]:
        return list(self._display_rows)

    # Rendering ----------------------------------------------------------
    def refresh(self) -> None:
        # Header and rows must reflect the same state snapshot
        state = self.sorter.get_state()
        self._render_header(state)
        self._display_rows = sort_items(
            state.field, state.direction, state.field.null_handling(), list(self._rows)
        )
        self.setRowCount(len(self._display_rows))
        for r, row in enumerate(self._display_rows):
            for c, column in enumerate(self.columns):
                self.setItem(r, c, QTableWidgetItem(column.formatter(row)))

    def _render_header(self, state: SortState[Any]) -> None:
        for c, column in enumerate(self.columns):
            status = header_status(state, column.field)
            text = f"{column.label} {status.glyph}" if status.glyph else column.label
            item = QTableWidgetItem(text)
            item.setForeground(QColor(status.colour))
            self.setHorizontalHeaderItem(c, item)

    def header_text(self, column_index: int) -> str:
        item = self.horizontalHeaderItem(column_index)
        return item.text() if item is not None else ""

    # Events -------------------------------------------------------------
    def toggle_column(self, column_index: int) -> bool:
        if not 0 <= column_index < len(self.columns):
            return False
        return self.sorter.toggle_field(self.columns[column_index].field)

    def _on_header_clicked(self, logical_index: int):  # pragma: no cover - UI callback
        self.toggle_column(logical_index)

    def _on_sort_changed(self, change: StateChange[Any]) -> None:
        self.refresh()
