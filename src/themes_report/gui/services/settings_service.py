"""Application-level settings service for report table toggles.

Centralizes runtime preferences the table views consult when the caller
does not pass an explicit value. Accessed via the ``SettingsService.instance``
singleton; tests may replace or mutate it and restore afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class SettingsService:
    """Runtime settings and feature flags.

    Attributes:
        show_descriptions: Default for a table's description-row flag when the
            caller leaves it unset. Default True.
        hover_highlight: When False, the hovered row keeps its band color
            (hover index is still tracked and published).
        publish_events: When False, view models do not publish sort/hover
            events even if an event bus is attached.
    """

    instance: ClassVar["SettingsService"]

    show_descriptions: bool = True
    hover_highlight: bool = True
    publish_events: bool = True


SettingsService.instance = SettingsService()
