"""Sort-key normalization for report table cells.

Report datasets mix plain numbers with text that already carries its
presentation (``"+19%"``, ``"$12B"``, ``"12.7x"``, ``"—"``). ``normalize``
maps every such cell value onto a float so that any two cells compare:

 - missing values and placeholders (``None``, ``"-"``, ``"—"``, ``"N/A"``)
   become ``UNKNOWN`` (negative infinity)
 - numbers pass through unchanged (NaN is treated as missing, booleans
   are not numbers and sort as ``0``)
 - currency text is expressed in millions (``T`` x 1,000,000, ``B`` x 1,000,
   ``M`` x 1)
 - any other text drops ``+ % x *`` and reads the leading number; text with
   no leading number sorts as ``0``

The function is pure. Rendered/display values are never passed here.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any, Final

__all__ = ["UNKNOWN", "PLACEHOLDERS", "MAGNITUDE_SCALE", "normalize"]

UNKNOWN: Final = float("-inf")
PLACEHOLDERS: Final = frozenset({"-", "—", "N/A"})
MAGNITUDE_SCALE: Final = {"T": 1_000_000.0, "B": 1_000.0, "M": 1.0}

_LEADING_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_DECORATION = str.maketrans("", "", "+%x*")


def _leading_float(text: str) -> float | None:
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    return float(match.group(1))


def _currency_millions(text: str) -> float:
    body = text.replace("$", "").replace(",", "").strip()
    number = _leading_float(body)
    if number is None:
        return 0.0
    # footnote markers may trail the letter ("$12B*")
    for letter, scale in MAGNITUDE_SCALE.items():
        if letter in body:
            return number * scale
    return number


def normalize(value: Any) -> float:
    """Return a totally ordered numeric sort key for a raw cell value."""
    if value is None:
        return UNKNOWN
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, numbers.Real):
        if isinstance(value, float) and math.isnan(value):
            return UNKNOWN
        return value  # type: ignore[return-value]
    text = str(value).strip()
    if text in PLACEHOLDERS:
        return UNKNOWN
    if "$" in text:
        return _currency_millions(text)
    number = _leading_float(text.translate(_DECORATION))
    return 0.0 if number is None else number
