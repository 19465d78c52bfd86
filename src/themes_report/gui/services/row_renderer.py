"""Row rendering for report tables.

Turns records (already in display order) into ``RenderedRow`` descriptions
that a view paints verbatim:

 - one ``RenderedCell`` per column with its display payload and style role
 - band color from the post-sort index (even -> primary, odd -> secondary)
 - hover color replacing the band color on the hovered row only
 - optional description sub-row sharing the band color (never the hover
   color) and spanning every column but the first

No Qt imports here; the view maps colors and weights onto Qt types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from themes_report.config import settings
from themes_report.gui.models import Alignment, CellText, ColumnSpec, read_field

__all__ = [
    "CellRole",
    "CellStyle",
    "RenderedCell",
    "RenderedRow",
    "RowRenderer",
    "display_text",
]

IDENTIFIER_KEYS = frozenset({"ticker"})
NAME_KEYS = frozenset({"company", "name"})
DESCRIPTION_FIELD = "description"


class CellRole(str, Enum):
    IDENTIFIER = "identifier"
    NAME = "name"
    NUMERIC = "numeric"
    NUMERIC_ACTIVE = "numeric_active"
    DESCRIPTION = "description"


@dataclass(frozen=True)
class CellStyle:
    color: str
    weight: int
    italic: bool = False


DEFAULT_STYLES: Dict[CellRole, CellStyle] = {
    CellRole.IDENTIFIER: CellStyle(settings.STRONG, settings.WEIGHT_IDENTIFIER),
    CellRole.NAME: CellStyle(settings.STRONG, settings.WEIGHT_NAME),
    CellRole.NUMERIC: CellStyle(settings.NUMERIC_TEXT, settings.WEIGHT_NUMERIC),
    CellRole.NUMERIC_ACTIVE: CellStyle(settings.NUMERIC_TEXT, settings.WEIGHT_NUMERIC_ACTIVE),
    CellRole.DESCRIPTION: CellStyle(settings.NEUTRAL, settings.WEIGHT_NAME, italic=True),
}


def display_text(display: Any) -> str:
    """Plain text for a cell display payload (``None`` -> empty cell)."""
    if display is None:
        return ""
    if isinstance(display, CellText):
        return display.text
    return str(display)


@dataclass(frozen=True)
class RenderedCell:
    key: str
    display: Any
    role: CellRole
    align: Alignment
    style: CellStyle

    @property
    def text(self) -> str:
        return display_text(self.display)

    @property
    def color(self) -> str:
        if isinstance(self.display, CellText) and self.display.color:
            return self.display.color
        return self.style.color

    @property
    def weight(self) -> int:
        if isinstance(self.display, CellText) and self.display.weight:
            return self.display.weight
        return self.style.weight


@dataclass(frozen=True)
class RenderedRow:
    index: int
    record: Any
    cells: tuple[RenderedCell, ...]
    background: str
    band_color: str
    hovered: bool
    description: Optional[str] = None

    @property
    def has_description(self) -> bool:
        return self.description is not None

    @property
    def description_background(self) -> str:
        return self.band_color


class RowRenderer:
    def __init__(
        self,
        *,
        band_colors: tuple[str, str] = (settings.SURFACE_PRIMARY, settings.SURFACE_SECONDARY),
        hover_color: str = settings.HOVER_HIGHLIGHT,
        styles: Dict[CellRole, CellStyle] | None = None,
    ):
        self.band_colors = band_colors
        self.hover_color = hover_color
        self.styles = dict(DEFAULT_STYLES)
        if styles:
            self.styles.update(styles)

    def band_color(self, index: int) -> str:
        return self.band_colors[index % 2]

    def cell_role(self, column: ColumnSpec, active_key: Optional[str]) -> CellRole:
        if column.key in IDENTIFIER_KEYS:
            return CellRole.IDENTIFIER
        if column.key in NAME_KEYS:
            return CellRole.NAME
        if column.key == active_key:
            return CellRole.NUMERIC_ACTIVE
        return CellRole.NUMERIC

    def description_for(self, record: Any, show_descriptions: bool) -> Optional[str]:
        if not show_descriptions:
            return None
        raw = read_field(record, DESCRIPTION_FIELD)
        if raw is None:
            return None
        text = str(raw).strip()
        return text or None

    def render_row(
        self,
        record: Any,
        index: int,
        columns: Sequence[ColumnSpec],
        *,
        active_key: Optional[str] = None,
        hover_index: Optional[int] = None,
        show_descriptions: bool = True,
    ) -> RenderedRow:
        cells = []
        for col in columns:
            role = self.cell_role(col, active_key)
            cells.append(
                RenderedCell(
                    key=col.key,
                    display=col.display(record),
                    role=role,
                    align=col.align,
                    style=self.styles[role],
                )
            )
        band = self.band_color(index)
        hovered = hover_index is not None and hover_index == index
        return RenderedRow(
            index=index,
            record=record,
            cells=tuple(cells),
            background=self.hover_color if hovered else band,
            band_color=band,
            hovered=hovered,
            description=self.description_for(record, show_descriptions),
        )

    def render(
        self,
        records: Iterable[Any],
        columns: Sequence[ColumnSpec],
        *,
        active_key: Optional[str] = None,
        hover_index: Optional[int] = None,
        show_descriptions: bool = True,
    ) -> List[RenderedRow]:
        return [
            self.render_row(
                record,
                i,
                columns,
                active_key=active_key,
                hover_index=hover_index,
                show_descriptions=show_descriptions,
            )
            for i, record in enumerate(records)
        ]
