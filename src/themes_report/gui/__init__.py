"""Report table GUI public API.

Small surface for hosting pages and tests: the column/sort models, the
headless view model and the event bus. The Qt widget lives in
``themes_report.gui.views`` and is not imported here so that headless
callers never load PyQt6.
"""

from __future__ import annotations

from .models import Alignment, CellText, ColumnSpec, SortDirection, SortState  # noqa: F401
from .services.event_bus import EventBus, TableEvent  # noqa: F401
from .viewmodels.stock_table_viewmodel import StockTableViewModel  # noqa: F401

__all__ = [
    "Alignment",
    "CellText",
    "ColumnSpec",
    "SortDirection",
    "SortState",
    "EventBus",
    "TableEvent",
    "StockTableViewModel",
]
