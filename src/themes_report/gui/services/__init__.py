"""Service layer exports.

Headless (Qt-free) building blocks of the report table:
 - value normalization and the sort state machine
 - row rendering (banding, hover, description rows)
 - column presets and display formatters
 - EventBus and error handling infrastructure
"""

from .value_normalizer import UNKNOWN, normalize  # noqa: F401
from .sort_controller import SortController, sort_records  # noqa: F401
from .row_renderer import RowRenderer, RenderedRow, RenderedCell, CellRole  # noqa: F401
from .event_bus import EventBus, TableEvent, Event  # noqa: F401

__all__ = [
    "UNKNOWN",
    "normalize",
    "SortController",
    "sort_records",
    "RowRenderer",
    "RenderedRow",
    "RenderedCell",
    "CellRole",
    "EventBus",
    "TableEvent",
    "Event",
]
