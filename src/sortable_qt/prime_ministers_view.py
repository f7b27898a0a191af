"""PrimeMinistersView

Demo window: a sortable table of prime ministers with a name filter box.
"""

from __future__ import annotations

from typing import List, Optional

from PyQt6.QtWidgets import QLabel, QLineEdit, QVBoxLayout, QWidget

from sortable import Sorter
from sortable_qt.demo_data import Person, PersonField, load_prime_ministers
from sortable_qt.sortable_table import Column, SortableTableWidget

__all__ = ["PrimeMinistersView", "COLUMNS"]

COLUMNS = [
    Column(PersonField.NAME, "Name", lambda p: p.name),
    Column(PersonField.LEFT_OFFICE, "Left office", lambda p: p.left_office_text),
    Column(PersonField.BIRTHPLACE, "Birthplace", lambda p: p.birthplace_text),
    Column(PersonField.COUNTRY, "Country", lambda p: p.country),
]


class PrimeMinistersView(QWidget):
    def __init__(self, people: Optional[List[Person]] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.people: List[Person] = people if people is not None else load_prime_ministers()
        self.sorter: Sorter[PersonField] = Sorter(PersonField)
        self._build_ui()
        self.apply_filter("")

    def _build_ui(self):
        root = QVBoxLayout(self)
        self.title_label = QLabel("Birthplaces of British prime ministers")
        self.title_label.setObjectName("viewTitleLabel")
        root.addWidget(self.title_label)
        self.search = QLineEdit()
        self.search.setPlaceholderText("Search by name")
        self.search.textChanged.connect(self.apply_filter)  # type: ignore
        root.addWidget(self.search)
        self.table = SortableTableWidget(self.sorter, COLUMNS)
        root.addWidget(self.table)

    def apply_filter(self, text: str) -> None:
        needle = text.lower()
        self.table.set_rows([p for p in self.people if needle in p.name.lower()])
