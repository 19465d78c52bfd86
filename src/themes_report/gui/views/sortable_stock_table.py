"""SortableStockTable view.

QTableWidget-based host for ``StockTableViewModel``. The widget forwards
header clicks, cell hover and pointer-leave to the view model and paints the
``RenderedRow`` list it returns: one table row per record plus a spanning
description row beneath records that carry one.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from PyQt6.QtCore import QEvent, QObject, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QStyledItemDelegate,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from themes_report.config import settings
from themes_report.gui.models import Alignment, ColumnSpec, SortState
from themes_report.gui.services.event_bus import EventBus
from themes_report.gui.services.row_renderer import CellRole, RenderedCell
from themes_report.gui.viewmodels.stock_table_viewmodel import StockTableViewModel

__all__ = ["SortableStockTable"]

SEPARATOR_ROLE = Qt.ItemDataRole.UserRole.value + 1

_ALIGN = {
    Alignment.LEFT: Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
    Alignment.CENTER: Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignVCenter,
    Alignment.RIGHT: Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
}


def _qt_weight(weight: int) -> QFont.Weight:
    return min(QFont.Weight, key=lambda w: abs(w.value - weight))


class _SeparatorDelegate(QStyledItemDelegate):
    """Draws the bottom border under description rows."""

    def paint(self, painter, option, index):  # pragma: no cover - paint path
        super().paint(painter, option, index)
        if index.data(SEPARATOR_ROLE):
            painter.save()
            painter.setPen(QColor(settings.BORDER))
            painter.drawLine(option.rect.bottomLeft(), option.rect.bottomRight())
            painter.restore()


class SortableStockTable(QWidget):
    # Emitted after a header activation changed the sort. Args: key, direction value.
    sortChanged = pyqtSignal(str, str)
    # Emitted when the hovered record index changes; -1 when cleared.
    rowHovered = pyqtSignal(int)

    def __init__(
        self,
        data: Optional[Sequence[Any]] = None,
        columns: Optional[Sequence[ColumnSpec]] = None,
        *,
        default_sort: SortState | Mapping[str, Any],
        show_descriptions: Optional[bool] = None,
        stocks: Optional[Sequence[Any]] = None,
        event_bus: EventBus | None = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.viewmodel = StockTableViewModel(
            data,
            columns,
            default_sort=default_sort,
            show_descriptions=show_descriptions,
            stocks=stocks,
            event_bus=event_bus,
        )
        # table row -> record index in sorted order (None for description rows)
        self._row_to_record: List[Optional[int]] = []
        self._build_ui()
        self._populate()

    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        self.table = QTableWidget(0, len(self.viewmodel.columns))
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table.setSortingEnabled(False)
        self.table.setShowGrid(False)
        self.table.setWordWrap(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setItemDelegate(_SeparatorDelegate(self.table))
        self.table.setStyleSheet(f"QTableWidget {{ border: 1px solid {settings.BORDER}; }}")
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.setSectionsClickable(True)
        header.setStyleSheet(
            "QHeaderView::section {"
            f" background-color: {settings.STRONG}; color: {settings.SURFACE_PRIMARY};"
            " padding: 6px 8px; border: none; }"
        )
        header_font = QFont(settings.FONT_FAMILY, settings.HEADER_FONT_SIZE)
        header_font.setWeight(QFont.Weight.DemiBold)
        header.setFont(header_font)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        # Hover tracking: cellEntered needs mouse tracking; Leave comes from the viewport
        self.table.setMouseTracking(True)
        self._viewport = self.table.viewport()
        self._viewport.setMouseTracking(True)
        self.table.cellEntered.connect(self._on_cell_entered)  # type: ignore
        # Pointer cursor only over sortable sections, resolved on header mouse moves
        self._header_viewport = header.viewport()
        self._header_viewport.setMouseTracking(True)
        self._viewport.installEventFilter(self)
        self._header_viewport.installEventFilter(self)
        root.addWidget(self.table)

    # Data -------------------------------------------------------------------
    def set_data(self, data: Optional[Sequence[Any]]):
        self.viewmodel.set_data(data)
        self._populate()

    def reset(self):
        self.viewmodel.reset()
        self._populate()

    def _populate(self):
        headers = self.viewmodel.header_cells()
        rows = self.viewmodel.rows()
        ncols = len(headers)
        self.table.setColumnCount(ncols)
        self.table.setHorizontalHeaderLabels([h.text for h in headers])
        for c, h in enumerate(headers):
            item = self.table.horizontalHeaderItem(c)
            if item is not None:
                item.setTextAlignment(_ALIGN[h.align])
        self.table.clearSpans()
        self.table.setRowCount(sum(2 if r.has_description else 1 for r in rows))
        self._row_to_record = []
        r = 0
        for row in rows:
            for c, cell in enumerate(row.cells):
                self.table.setItem(r, c, self._cell_item(cell))
            self._row_to_record.append(row.index)
            r += 1
            if row.has_description:
                self._place_description(r, row.description or "", ncols)
                self._row_to_record.append(None)
                r += 1
        self._apply_backgrounds()

    def _cell_item(self, cell: RenderedCell) -> QTableWidgetItem:
        item = QTableWidgetItem(cell.text)
        item.setTextAlignment(_ALIGN[cell.align])
        font = QFont(settings.FONT_FAMILY, settings.CELL_FONT_SIZE)
        font.setWeight(_qt_weight(cell.weight))
        item.setFont(font)
        item.setForeground(QColor(cell.color))
        return item

    def _place_description(self, r: int, text: str, ncols: int):
        desc_style = self.viewmodel.renderer.styles[CellRole.DESCRIPTION]
        item = QTableWidgetItem(text)
        font = QFont(settings.FONT_FAMILY, settings.CELL_FONT_SIZE)
        font.setItalic(desc_style.italic)
        font.setWeight(_qt_weight(desc_style.weight))
        item.setFont(font)
        item.setForeground(QColor(desc_style.color))
        item.setData(SEPARATOR_ROLE, True)
        lead = QTableWidgetItem("")
        lead.setData(SEPARATOR_ROLE, True)
        if ncols > 1:
            self.table.setItem(r, 0, lead)
            self.table.setItem(r, 1, item)
            self.table.setSpan(r, 1, 1, ncols - 1)
        else:
            self.table.setItem(r, 0, item)

    def _apply_backgrounds(self):
        rows = self.viewmodel.rows()
        r = 0
        for row in rows:
            self._paint_row(r, QColor(row.background))
            r += 1
            if row.has_description:
                self._paint_row(r, QColor(row.description_background))
                r += 1

    def _paint_row(self, r: int, color: QColor):
        for c in range(self.table.columnCount()):
            item = self.table.item(r, c)
            if item is not None:
                item.setBackground(color)

    # Interaction callbacks ---------------------------------------------------
    def _on_header_clicked(self, logical_index: int):
        if not self.viewmodel.activate_column(logical_index):
            return
        state = self.viewmodel.sort_state
        self._populate()
        self.sortChanged.emit(state.key or "", state.direction.value)

    def _on_cell_entered(self, row: int, column: int):
        index = self._row_to_record[row] if 0 <= row < len(self._row_to_record) else None
        self._set_hover(index)

    def _on_pointer_left(self):
        self._set_hover(None)

    def _set_hover(self, index: Optional[int]):
        if not self.viewmodel.set_hover(index):
            return
        self._apply_backgrounds()
        hovered = self.viewmodel.hover_index
        self.rowHovered.emit(-1 if hovered is None else hovered)

    def _update_header_cursor(self, section: int):
        column = self.viewmodel.column_for(section) if section >= 0 else None
        if column is not None and column.sortable:
            self._header_viewport.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self._header_viewport.unsetCursor()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._viewport and event.type() == QEvent.Type.Leave:
            self._on_pointer_left()
        elif obj is self._header_viewport and event.type() == QEvent.Type.MouseMove:
            header = self.table.horizontalHeader()
            self._update_header_cursor(header.logicalIndexAt(event.position().toPoint()))
        return super().eventFilter(obj, event)

    # Export / testing helpers ------------------------------------------------
    def get_export_rows(self) -> tuple[List[str], List[List[str]]]:
        return self.viewmodel.export_rows()

    def visible_tickers(self) -> List[str]:
        """Text of the first column for every primary (non-description) row."""
        out: List[str] = []
        for r, idx in enumerate(self._row_to_record):
            if idx is None:
                continue
            item = self.table.item(r, 0)
            out.append(item.text() if item else "")
        return out
