"""Global error handling service.

Captures uncaught exceptions via ``sys.excepthook`` (and ``threading.excepthook``)
so failures raised inside Qt slots, e.g. from a caller-supplied column
formatter, are logged and retained instead of vanishing. Nothing global is
touched until ``install()`` is called.
"""

from __future__ import annotations

import logging
import sys
import threading
import traceback
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Deque, List, Optional

from .event_bus import EventBus, TableEvent

__all__ = ["ErrorRecord", "ErrorHandlingService"]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured capture of an uncaught exception."""

    exc_type: type
    exc_value: BaseException
    traceback_str: str
    timestamp: float
    iso_time: str
    thread_name: str

    def summary(self, max_len: int = 120) -> str:
        msg = f"{self.exc_type.__name__}: {self.exc_value}"
        return msg if len(msg) <= max_len else msg[: max_len - 3] + "..."


class ErrorHandlingService:
    """Installable global error hook manager.

    Usage
    -----
    svc = ErrorHandlingService(logger=logging.getLogger("themes_report"))
    svc.install()
    ... run application ...
    svc.uninstall()
    """

    def __init__(
        self,
        *,
        capacity: int = 20,
        logger: logging.Logger | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._errors: Deque[ErrorRecord] = deque(maxlen=max(1, capacity))
        self._installed = False
        self._prev_sys_hook: Any = None
        self._prev_threading_hook: Any = None
        self._logger = logger
        self._event_bus = event_bus

    # ------------------------------------------------------------------
    # Installation / Removal
    # ------------------------------------------------------------------
    def install(self) -> None:
        if self._installed:
            return
        self._prev_sys_hook = sys.excepthook
        sys.excepthook = self._sys_hook
        self._prev_threading_hook = threading.excepthook
        threading.excepthook = self._thread_hook
        self._installed = True

    def uninstall(self) -> None:
        if not self._installed:
            return
        sys.excepthook = self._prev_sys_hook
        threading.excepthook = self._prev_threading_hook
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def _sys_hook(self, exc_type, exc_value, tb):  # pragma: no cover - delegate
        self.handle_exception(exc_type, exc_value, tb)
        if self._prev_sys_hook:
            self._prev_sys_hook(exc_type, exc_value, tb)

    def _thread_hook(self, args):  # pragma: no cover - delegate
        self.handle_exception(args.exc_type, args.exc_value, args.exc_traceback, thread=args.thread)
        if self._prev_threading_hook:
            self._prev_threading_hook(args)

    # ------------------------------------------------------------------
    # Core logic
    # ------------------------------------------------------------------
    def handle_exception(
        self, exc_type, exc_value, tb, *, thread: Optional[threading.Thread] = None
    ) -> ErrorRecord:
        """Capture an exception as an ``ErrorRecord`` and fan it out.

        Public so tests can feed synthetic exceptions without touching the
        global hooks.
        """
        now = datetime.now(timezone.utc)
        record = ErrorRecord(
            exc_type=exc_type,
            exc_value=exc_value,
            traceback_str="".join(traceback.format_exception(exc_type, exc_value, tb)),
            timestamp=now.timestamp(),
            iso_time=now.isoformat(),
            thread_name=(thread.name if thread else threading.current_thread().name),
        )
        self._errors.append(record)
        if self._logger is not None:
            self._logger.error(
                "Uncaught exception (%s) %s", record.thread_name, record.summary()
            )
        if self._event_bus is not None:
            self._event_bus.publish(
                TableEvent.UNCAUGHT_EXCEPTION,
                {
                    "type": record.exc_type.__name__,
                    "message": str(record.exc_value),
                    "thread": record.thread_name,
                    "iso_time": record.iso_time,
                },
            )
        return record

    def recent_errors(self) -> List[ErrorRecord]:
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()
