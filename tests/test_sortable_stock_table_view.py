import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtCore import QEvent, Qt  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from themes_report.config import settings  # noqa: E402
from themes_report.gui.models import ColumnSpec, SortState  # noqa: E402
from themes_report.gui.services.event_bus import EventBus, TableEvent  # noqa: E402
from themes_report.gui.views.sortable_stock_table import SEPARATOR_ROLE, SortableStockTable  # noqa: E402

COLUMNS = [
    ColumnSpec("ticker", "Ticker"),
    ColumnSpec("company", "Company"),
    ColumnSpec("m1", "1M", "center"),
    ColumnSpec("mktCap", "Mkt Cap", "center"),
]


def _rows():
    return [
        {"ticker": "A", "company": "Alpha", "m1": "+5%", "mktCap": "$950M", "description": "Packaging"},
        {"ticker": "B", "company": "Beta", "m1": "-3%", "mktCap": "$1.2B"},
        {"ticker": "C", "company": "Gamma", "m1": "N/A", "mktCap": "$12B"},
    ]


def _bg(view, r, c=0):
    return view.table.item(r, c).background().color().name().lower()


@pytest.fixture
def view(qtbot):
    w = SortableStockTable(_rows(), COLUMNS, default_sort=SortState("m1", "desc"))
    qtbot.addWidget(w)
    return w


def test_initial_order_and_description_row(view):
    assert view.visible_tickers() == ["A", "B", "C"]
    # A carries a description -> one extra table row under it
    assert view.table.rowCount() == 4
    assert view.table.item(1, 1).text() == "Packaging"
    assert view.table.columnSpan(1, 1) == len(COLUMNS) - 1
    assert view.table.item(1, 1).font().italic()
    assert view.table.item(1, 1).data(SEPARATOR_ROLE) is True


def test_header_labels_show_active_glyph(view):
    labels = [view.table.horizontalHeaderItem(c).text() for c in range(4)]
    assert labels == ["Ticker", "Company", "1M ▼", "Mkt Cap"]


def test_header_click_toggles_and_emits(view):
    emitted = []
    view.sortChanged.connect(lambda key, direction: emitted.append((key, direction)))
    view._on_header_clicked(2)
    assert view.visible_tickers() == ["C", "B", "A"]
    assert view.table.horizontalHeaderItem(2).text() == "1M ▲"
    view._on_header_clicked(3)
    assert view.visible_tickers() == ["C", "B", "A"]
    assert emitted == [("m1", "asc"), ("mktCap", "desc")]


def test_banding_and_hover(view):
    primary = settings.SURFACE_PRIMARY.lower()
    secondary = settings.SURFACE_SECONDARY.lower()
    hover = settings.HOVER_HIGHLIGHT.lower()
    # table rows: 0 = A, 1 = A description, 2 = B, 3 = C
    assert [_bg(view, r) for r in range(4)] == [primary, primary, secondary, primary]
    hovered = []
    view.rowHovered.connect(hovered.append)
    view._on_cell_entered(0, 2)
    assert _bg(view, 0) == hover
    assert _bg(view, 1) == primary  # description keeps the band color
    view._on_cell_entered(2, 0)
    assert _bg(view, 0) == primary and _bg(view, 2) == hover
    QApplication.sendEvent(view.table.viewport(), QEvent(QEvent.Type.Leave))
    assert view.viewmodel.hover_index is None
    assert _bg(view, 2) == secondary
    assert hovered == [0, 1, -1]


def _weight(view, r, c):
    w = view.table.item(r, c).font().weight()
    return int(getattr(w, "value", w))


def test_cell_styles_follow_roles(view):
    assert _weight(view, 0, 0) > _weight(view, 0, 2) > _weight(view, 0, 3)


def test_non_sortable_header_is_noop(qtbot):
    cols = COLUMNS + [ColumnSpec("notes", "Notes", sortable=False)]
    w = SortableStockTable(_rows(), cols, default_sort=SortState("m1", "desc"))
    qtbot.addWidget(w)
    w._on_header_clicked(4)
    assert w.viewmodel.sort_state == SortState("m1", "desc")
    assert w.visible_tickers() == ["A", "B", "C"]


def test_pointer_cursor_only_over_sortable_headers(qtbot):
    cols = COLUMNS + [ColumnSpec("notes", "Notes", sortable=False)]
    w = SortableStockTable(_rows(), cols, default_sort=SortState("m1", "desc"))
    qtbot.addWidget(w)
    header_vp = w.table.horizontalHeader().viewport()
    w._update_header_cursor(2)
    assert header_vp.cursor().shape() == Qt.CursorShape.PointingHandCursor
    w._update_header_cursor(4)
    assert not header_vp.testAttribute(Qt.WidgetAttribute.WA_SetCursor)
    w._update_header_cursor(-1)
    assert not header_vp.testAttribute(Qt.WidgetAttribute.WA_SetCursor)


def test_descriptions_disabled(qtbot):
    w = SortableStockTable(
        _rows(), COLUMNS, default_sort=SortState("m1", "desc"), show_descriptions=False
    )
    qtbot.addWidget(w)
    assert w.table.rowCount() == 3


def test_source_data_untouched_and_export(qtbot):
    data = _rows()
    bus = EventBus()
    events = []
    bus.subscribe(TableEvent.SORT_CHANGED, lambda e: events.append(e.payload))
    w = SortableStockTable(data, COLUMNS, default_sort=SortState("m1", "desc"), event_bus=bus)
    qtbot.addWidget(w)
    w._on_header_clicked(3)
    assert [r["ticker"] for r in data] == ["A", "B", "C"]
    headers, rows = w.get_export_rows()
    assert headers == ["Ticker", "Company", "1M", "Mkt Cap"]
    assert [r[0] for r in rows] == ["C", "B", "A"]
    assert events == [{"key": "mktCap", "direction": "desc"}]


def test_reset_and_set_data(view):
    view._on_header_clicked(3)
    view.reset()
    assert view.visible_tickers() == ["A", "B", "C"]
    view.set_data([{"ticker": "Z", "m1": "+1%"}])
    assert view.visible_tickers() == ["Z"]
    assert view.table.rowCount() == 1
