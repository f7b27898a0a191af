"""Module entrypoint for `python -m sortable_qt`.

Launches the prime ministers demo table.
"""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from sortable import settings
from sortable_qt.prime_ministers_view import PrimeMinistersView


def main():  # pragma: no cover - runtime
    settings.configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    view = PrimeMinistersView()
    view.setWindowTitle("Sortable tables")
    view.resize(720, 640)
    view.show()
    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover
    main()
