"""Global constants for report table styling."""

from __future__ import annotations

import os
from typing import Final

# Report palette
SURFACE_PRIMARY: Final = "#FFFFFF"
SURFACE_SECONDARY: Final = "#F0F1F4"
BORDER: Final = "#C1C7D4"
NEUTRAL: Final = "#657085"
STRONG: Final = "#0b0c0e"
ACTION: Final = "#FE4207"
POSITIVE: Final = "#059669"
NEGATIVE: Final = "#DC2626"
NUMERIC_TEXT: Final = "#2D3748"

# Hovered row background; must differ from both band colors
HOVER_HIGHLIGHT: Final = os.environ.get("THEMES_REPORT_HOVER_COLOR", "#E3E6EC")

FONT_FAMILY: Final = os.environ.get("THEMES_REPORT_FONT", "Poppins")
CELL_FONT_SIZE: Final = 13
HEADER_FONT_SIZE: Final = 12

# CSS-style weights (QFont.Weight uses the same scale)
WEIGHT_IDENTIFIER: Final = 900
WEIGHT_NAME: Final = 400
WEIGHT_NUMERIC: Final = 500
WEIGHT_NUMERIC_ACTIVE: Final = 600
WEIGHT_PERCENT: Final = 500

SORT_GLYPHS: Final = {"desc": "▼", "asc": "▲"}
PLACEHOLDER_TEXT: Final = "—"
