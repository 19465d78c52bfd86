"""Display formatters used by the report's column definitions.

Every function here has the ``(value, record)`` column render signature
(``record`` optional) except the two plain text helpers. Formatters only
shape what a cell shows; they never feed the sort.
"""

from __future__ import annotations

from typing import Any, Optional

from themes_report.config import settings
from themes_report.gui.models import CellText

__all__ = [
    "format_percent",
    "format_market_cap",
    "signed_percent",
    "optional_percent",
    "revenue_growth",
    "price_to_sales",
]


def format_percent(value: Optional[float], show_plus: bool = True) -> str:
    if value is None:
        return settings.PLACEHOLDER_TEXT
    sign = "+" if value >= 0 and show_plus else ""
    return f"{sign}{value:.1f}%"


def format_market_cap(value: Any, record: Any = None) -> str:
    """Format a market cap given in millions ($950M, $1.2B, $123B)."""
    if value is None:
        return settings.PLACEHOLDER_TEXT
    if value >= 100_000:
        return f"${value / 1000:.0f}B"
    if value >= 1000:
        return f"${value / 1000:.1f}B"
    return f"${value:.0f}M"


def signed_percent(value: Any, record: Any = None) -> CellText:
    """Percentage colored by its own sign."""
    if value is None:
        return CellText(settings.PLACEHOLDER_TEXT)
    color = settings.POSITIVE if value >= 0 else settings.NEGATIVE
    return CellText(format_percent(value), color=color, weight=settings.WEIGHT_PERCENT)


def optional_percent(value: Any, record: Any = None) -> CellText | str:
    if value is None:
        return settings.PLACEHOLDER_TEXT
    return signed_percent(value, record)


def revenue_growth(value: Any, record: Any = None) -> CellText | str:
    if value is not None and value > 100:
        return ">100%"
    return signed_percent(value, record)


def price_to_sales(value: Any, record: Any = None) -> str:
    if value is None:
        return settings.PLACEHOLDER_TEXT
    return f"{value:.1f}x"
