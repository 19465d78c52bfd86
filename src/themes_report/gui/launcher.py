"""Launcher for ``python -m themes_report.gui``.

Wires the ambient services (logging, event bus, uncaught-exception hook)
and hosts a single sample table, standing in for a report section.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from themes_report.gui.sample_data import ADVANCED_PACKAGING, DEFAULT_SORT
from themes_report.gui.services.error_handling_service import ErrorHandlingService
from themes_report.gui.services.event_bus import EventBus, TableEvent
from themes_report.gui.views.sortable_stock_table import SortableStockTable

_log = logging.getLogger("themes_report")


def build_window(bus: EventBus) -> QMainWindow:
    win = QMainWindow()
    win.setWindowTitle("Market Themes Report")
    body = QWidget()
    layout = QVBoxLayout(body)
    layout.addWidget(QLabel("BUCKET 1  Advanced Packaging and Assembly"))
    layout.addWidget(
        SortableStockTable(ADVANCED_PACKAGING, default_sort=DEFAULT_SORT, event_bus=bus)
    )
    win.setCentralWidget(body)
    win.resize(1100, 420)
    return win


def main():  # pragma: no cover - GUI runtime
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    bus = EventBus()
    errors = ErrorHandlingService(logger=_log, event_bus=bus)
    errors.install()
    bus.subscribe(TableEvent.SORT_CHANGED, lambda evt: _log.info("sort changed: %s", evt.payload))
    win = build_window(bus)
    win.show()
    try:
        code = app.exec()
    finally:
        errors.uninstall()
    sys.exit(code)


if __name__ == "__main__":  # pragma: no cover
    main()
