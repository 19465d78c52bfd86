import pytest

pytest.importorskip("PyQt6.QtWidgets")

from themes_report.gui.launcher import build_window  # noqa: E402
from themes_report.gui.services.event_bus import EventBus, TableEvent  # noqa: E402
from themes_report.gui.views.sortable_stock_table import SortableStockTable  # noqa: E402


def test_window_hosts_sample_table(qtbot):
    bus = EventBus()
    seen = []
    bus.subscribe(TableEvent.SORT_CHANGED, lambda e: seen.append(e.payload))
    win = build_window(bus)
    qtbot.addWidget(win)
    table = win.findChild(SortableStockTable)
    assert table is not None
    assert table.visible_tickers() == ["UCTT", "ENTG", "MKSI", "AMKR"]
    table._on_header_clicked(2)
    assert seen == [{"key": "mktCap", "direction": "desc"}]
    assert table.visible_tickers()[0] == "ENTG"
