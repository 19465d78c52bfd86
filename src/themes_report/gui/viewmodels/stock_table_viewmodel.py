"""ViewModel for the sortable stock table.

One instance per table placement. Owns that placement's ``SortController``
and hover index (never shared between tables) and recomputes the full
sorted, banded row list from the caller's records on every request. The
records sequence is copied on assignment and never reordered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence

from themes_report.config import settings
from themes_report.gui.models import Alignment, ColumnSpec, SortState
from themes_report.gui.services.column_presets import default_columns
from themes_report.gui.services.event_bus import EventBus, TableEvent
from themes_report.gui.services.row_renderer import RenderedRow, RowRenderer
from themes_report.gui.services.settings_service import SettingsService
from themes_report.gui.services.sort_controller import SortController

__all__ = ["StockTableViewModel", "HeaderCell", "SortIndicator"]

_log = logging.getLogger(__name__)


class SortIndicator(str, Enum):
    NONE = "none"  # column not sortable
    INACTIVE = "inactive"
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class HeaderCell:
    key: str
    label: str
    align: Alignment
    sortable: bool
    active: bool
    indicator: SortIndicator

    @property
    def glyph(self) -> str:
        return settings.SORT_GLYPHS.get(self.indicator.value, "")

    @property
    def text(self) -> str:
        return f"{self.label} {self.glyph}" if self.glyph else self.label


class StockTableViewModel:
    def __init__(
        self,
        data: Optional[Sequence[Any]] = None,
        columns: Optional[Sequence[ColumnSpec]] = None,
        *,
        default_sort: SortState | Mapping[str, Any],
        show_descriptions: Optional[bool] = None,
        stocks: Optional[Sequence[Any]] = None,
        renderer: RowRenderer | None = None,
        event_bus: EventBus | None = None,
    ):
        self._records: tuple[Any, ...] = ()
        self._columns: tuple[ColumnSpec, ...] = (
            tuple(columns) if columns is not None else tuple(default_columns())
        )
        self._sort = SortController(SortState.coerce(default_sort))
        self._hover_index: Optional[int] = None
        if show_descriptions is None:
            show_descriptions = SettingsService.instance.show_descriptions
        self.show_descriptions = show_descriptions
        self._renderer = renderer or RowRenderer()
        self._event_bus = event_bus
        self.set_data(data if data is not None else stocks)

    # Data -----------------------------------------------------------------
    def set_data(self, data: Optional[Sequence[Any]]) -> None:
        self._records = tuple(data or ())
        self._hover_index = None
        _log.debug("table data set: %d records", len(self._records))

    @property
    def records(self) -> tuple[Any, ...]:
        return self._records

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return self._columns

    @property
    def renderer(self) -> RowRenderer:
        return self._renderer

    @property
    def sort_state(self) -> SortState:
        return self._sort.state

    @property
    def hover_index(self) -> Optional[int]:
        return self._hover_index

    def reset(self) -> None:
        """Return to the just-mounted state (caller's default sort, no hover)."""
        self._sort.reset()
        self._hover_index = None
        _log.debug("table reset to default sort %s", self._sort.state)

    # Interaction ------------------------------------------------------------
    def column_for(self, ref: int | str | ColumnSpec) -> Optional[ColumnSpec]:
        if isinstance(ref, ColumnSpec):
            return ref
        if isinstance(ref, int):
            return self._columns[ref] if 0 <= ref < len(self._columns) else None
        return next((c for c in self._columns if c.key == ref), None)

    def activate_column(self, ref: int | str | ColumnSpec) -> bool:
        """Handle a header activation; returns True when the sort changed."""
        column = self.column_for(ref)
        if column is None or not self._sort.activate(column):
            return False
        state = self._sort.state
        self._publish(
            TableEvent.SORT_CHANGED, {"key": state.key, "direction": state.direction.value}
        )
        return True

    def set_hover(self, index: Optional[int]) -> bool:
        if index is not None and not 0 <= index < len(self._records):
            index = None
        if index == self._hover_index:
            return False
        self._hover_index = index
        self._publish(TableEvent.HOVER_CHANGED, {"index": index})
        return True

    def clear_hover(self) -> bool:
        return self.set_hover(None)

    def _publish(self, event: TableEvent, payload: dict) -> None:
        if self._event_bus is not None and SettingsService.instance.publish_events:
            self._event_bus.publish(event, payload)

    # Rendering ----------------------------------------------------------------
    def sorted_records(self) -> List[Any]:
        return self._sort.order(self._records)

    def rows(self) -> List[RenderedRow]:
        hover = self._hover_index if SettingsService.instance.hover_highlight else None
        return self._renderer.render(
            self.sorted_records(),
            self._columns,
            active_key=self._sort.state.key,
            hover_index=hover,
            show_descriptions=self.show_descriptions,
        )

    def header_cells(self) -> List[HeaderCell]:
        state = self._sort.state
        cells: List[HeaderCell] = []
        for col in self._columns:
            active = col.sortable and col.key == state.key
            if not col.sortable:
                indicator = SortIndicator.NONE
            elif active:
                indicator = SortIndicator(state.direction.value)
            else:
                indicator = SortIndicator.INACTIVE
            cells.append(HeaderCell(col.key, col.label, col.align, col.sortable, active, indicator))
        return cells

    def export_rows(self) -> tuple[List[str], List[List[str]]]:
        headers = [c.label for c in self._columns]
        data = [[cell.text for cell in row.cells] for row in self.rows()]
        return headers, data
