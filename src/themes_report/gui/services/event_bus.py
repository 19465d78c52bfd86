"""EventBus for table interaction callbacks.

Lightweight synchronous publish/subscribe mechanism with typed events. Table
view models publish sort and hover changes here so the hosting page (or a
test) can observe interactions without holding a reference to the widget.

 - No Qt dependency
 - One failing handler doesn't break the publish cycle
 - One-shot (once) subscriptions and unsubscribe handles
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "TableEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class TableEvent(str, Enum):
    SORT_CHANGED = "sort_changed"
    HOVER_CHANGED = "hover_changed"
    UNCAUGHT_EXCEPTION = "uncaught_exception"


@dataclass
class Event:
    name: str  # TableEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _event_key(name: str | TableEvent) -> str:
    return name.value if isinstance(name, TableEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Handlers run outside the lock (subscribers are snapshotted first) so a
    handler may subscribe or unsubscribe without deadlocking.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    def subscribe(
        self, name: str | TableEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_event_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                bucket[:] = [s for s in bucket if s is not sub]
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def publish(self, name: str | TableEvent, payload: Any = None) -> Event:
        key = _event_key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        finished: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
            else:
                if sub.once:
                    finished.append(sub)
        for sub in finished:
            self.unsubscribe(sub)
        return evt

    def subscriber_count(self, name: str | TableEvent) -> int:
        with self._lock:
            return len(self._subs.get(_event_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()
