"""Column sets shared by the report's stock tables.

``default_columns`` matches the bucket/theme record shape whose values are
pre-formatted strings (``"$12B"``, ``"+19%"``, ``"1.8x"``) and therefore need
no formatter. ``standard_columns`` matches the numeric record shape used by
the deep-dive sections, where formatting happens at render time.
"""

from __future__ import annotations

from typing import List

from themes_report.gui.models import Alignment, ColumnSpec
from themes_report.gui.services.display_formatters import (
    format_market_cap,
    optional_percent,
    price_to_sales,
    revenue_growth,
    signed_percent,
)

__all__ = ["DEFAULT_COLUMNS", "default_columns", "standard_columns"]

_C = Alignment.CENTER

DEFAULT_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("ticker", "Ticker"),
    ColumnSpec("company", "Company"),
    ColumnSpec("mktCap", "Mkt Cap", _C),
    ColumnSpec("return1M", "1M", _C),
    ColumnSpec("return3M", "3M", _C),
    ColumnSpec("return6M", "6M", _C),
    ColumnSpec("revGrYoY", "Rev Gr (YoY)", _C),
    ColumnSpec("opMargin", "OpM", _C),
    ColumnSpec("pS", "P/S", _C),
)


def default_columns() -> List[ColumnSpec]:
    return list(DEFAULT_COLUMNS)


def standard_columns(show_ps: bool = True) -> List[ColumnSpec]:
    """Columns for numeric records (``mktCap`` in millions, returns in percent)."""
    cols = [
        ColumnSpec("ticker", "Ticker"),
        ColumnSpec("name", "Company"),
        ColumnSpec("mktCap", "Mkt Cap", _C, render=format_market_cap),
        ColumnSpec("m1", "1M", _C, render=signed_percent),
        ColumnSpec("revGr", "Rev Gr", _C, render=revenue_growth),
        ColumnSpec("m3", "3M", _C, render=signed_percent),
        ColumnSpec("m6", "6M", _C, render=optional_percent),
    ]
    if show_ps:
        cols.append(ColumnSpec("ps", "P/S", _C, render=price_to_sales))
    return cols
