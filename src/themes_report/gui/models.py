"""GUI-facing lightweight models for report tables.

Records themselves are plain mappings supplied by the report sections; the
types here describe how those records are laid out (``ColumnSpec``), what
order they are shown in (``SortState``) and the optional rich display payload
a column formatter may return (``CellText``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

__all__ = [
    "CellValue",
    "Record",
    "CellRenderer",
    "Alignment",
    "SortDirection",
    "SortState",
    "CellText",
    "ColumnSpec",
    "read_field",
]

# Raw value stored in a record field: number, missing, or pre-formatted text
CellValue = Union[int, float, str, None]
Record = Mapping[str, Any]
CellRenderer = Callable[[Any, Any], Any]


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def _missing_(cls, value: object):  # accept long spellings ("ascending")
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text in (member.value, member.name.lower()):
                    return member
        return None

    def toggled(self) -> "SortDirection":
        if self is SortDirection.DESCENDING:
            return SortDirection.ASCENDING
        return SortDirection.DESCENDING


@dataclass(frozen=True)
class SortState:
    """Active sort key and direction.

    ``key`` of ``None`` means the caller's order is shown unchanged.
    """

    key: Optional[str] = None
    direction: SortDirection = SortDirection.DESCENDING

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection(self.direction))

    @classmethod
    def coerce(cls, value: "SortState | Mapping[str, Any] | None") -> "SortState":
        """Build a state from a ``{"key": ..., "direction": ...}`` mapping."""
        if isinstance(value, SortState):
            return value
        if value is None:
            return cls()
        return cls(
            key=value.get("key"),
            direction=value.get("direction", SortDirection.DESCENDING),
        )

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESCENDING


@dataclass(frozen=True)
class CellText:
    """Formatted cell text with optional color / weight overrides."""

    text: str
    color: Optional[str] = None
    weight: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.text


@dataclass(frozen=True)
class ColumnSpec:
    """Declarative description of one table column.

    ``render`` receives ``(cell_value, record)`` and only affects what is
    displayed; sorting always reads the raw cell value.
    """

    key: str
    label: str
    align: Alignment = Alignment.LEFT
    sortable: bool = True
    render: Optional[CellRenderer] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "align", Alignment(self.align))

    def value(self, record: Any) -> Any:
        return read_field(record, self.key)

    def display(self, record: Any) -> Any:
        raw = self.value(record)
        if self.render is None:
            return raw
        return self.render(raw, record)


def read_field(record: Any, key: str) -> Any:
    """Return ``record[key]`` for mappings, attribute otherwise; ``None`` if absent."""
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)
