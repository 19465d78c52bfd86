"""Single-column sort state machine for report tables.

``SortController`` holds the active ``SortState`` of one table placement and
applies the header activation rule:

 - non-sortable column: no change
 - active column: direction toggles (desc <-> asc)
 - any other column: becomes active, starting descending

Ordering is always recomputed from the caller's base order (never from the
previous result), so the output is fully determined by ``(key, direction)``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence

from themes_report.gui.models import ColumnSpec, SortDirection, SortState, read_field
from themes_report.gui.services.value_normalizer import normalize

__all__ = ["SortController", "sort_records"]

_log = logging.getLogger(__name__)


def sort_records(records: Iterable[Any], state: SortState) -> List[Any]:
    """Return a sorted copy of ``records``; the input is never reordered.

    Python's sort is stable in both directions, so records with equal keys
    keep their base order.
    """
    rows = list(records)
    if state.key is None:
        return rows
    key = state.key
    return sorted(rows, key=lambda r: normalize(read_field(r, key)), reverse=state.descending)


class SortController:
    def __init__(self, default_sort: SortState):
        self._default = SortState.coerce(default_sort)
        self._state = self._default

    @property
    def state(self) -> SortState:
        return self._state

    @property
    def default(self) -> SortState:
        return self._default

    def activate(self, column: ColumnSpec) -> bool:
        """Apply a header activation; return True when the state changed."""
        if not column.sortable:
            _log.debug("ignoring activation of non-sortable column %r", column.key)
            return False
        previous = self._state
        if column.key == previous.key:
            self._state = SortState(previous.key, previous.direction.toggled())
        else:
            self._state = SortState(column.key, SortDirection.DESCENDING)
        _log.debug(
            "sort %s/%s -> %s/%s",
            previous.key,
            previous.direction.value,
            self._state.key,
            self._state.direction.value,
        )
        return True

    def reset(self) -> None:
        self._state = self._default

    def order(self, records: Sequence[Any]) -> List[Any]:
        return sort_records(records, self._state)
