"""Global configuration and constants for sortable tables."""

from __future__ import annotations

import logging
import os
from typing import Final

LOG_LEVEL: Final = os.environ.get("SORTABLE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: Final = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Header indicator glyphs
GLYPH_ASCENDING: Final = "↓"
GLYPH_DESCENDING: Final = "↑"
GLYPH_REVERSIBLE_INACTIVE: Final = "↕"
GLYPH_UNSORTABLE: Final = ""

# Active field indicator is darker than inactive ones
ACTIVE_COLOUR: Final = os.environ.get("SORTABLE_ACTIVE_COLOUR", "#555555")
INACTIVE_COLOUR: Final = os.environ.get("SORTABLE_INACTIVE_COLOUR", "#cccccc")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for application entrypoints (never on import)."""
    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, resolved, logging.WARNING), format=LOG_FORMAT)
