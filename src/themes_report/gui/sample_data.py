"""Sample bucket used by the launcher to host a table outside the report."""

from __future__ import annotations

from typing import Any, Dict, List

from themes_report.gui.models import SortState

ADVANCED_PACKAGING: List[Dict[str, Any]] = [
    {"ticker": "AMKR", "company": "Amkor Technology", "mktCap": "$12B", "return1M": "+19%", "return3M": "+53%", "return6M": "+127%", "revGrYoY": "+7%", "opMargin": "8.0%", "pS": "1.8x", "description": "Key OSAT for advanced logic and HBM-adjacent packaging"},
    {"ticker": "MKSI", "company": "MKS Instruments", "mktCap": "$14B", "return1M": "+31%", "return3M": "+48%", "return6M": "+100%", "revGrYoY": "+10%", "opMargin": "14.4%", "pS": "3.6x", "description": "Vacuum, gas delivery, materials for advanced packaging"},
    {"ticker": "ENTG", "company": "Entegris", "mktCap": "$18B", "return1M": "+33%", "return3M": "+30%", "return6M": "+34%", "revGrYoY": "-0%", "opMargin": "15.4%", "pS": "5.5x", "description": "Specialty materials and chemicals for advanced nodes"},
    {"ticker": "UCTT", "company": "Ultra Clean Holdings", "mktCap": "$2B", "return1M": "+74%", "return3M": "+51%", "return6M": "+73%", "revGrYoY": "-6%", "opMargin": "2.1%", "pS": "0.9x", "description": "Gas delivery and chemical management systems"},
]

DEFAULT_SORT = SortState("return1M", "desc")
