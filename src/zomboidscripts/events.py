"""Typed events raised by the discovery and ingestion core.

Every state change a UI would care about is published as a small frozen
dataclass on an ``EventBus``. Hosts subscribe either to one event type
or to everything::

    bus = EventBus()
    bus.subscribe(LoadProgress, lambda e: print(e.current, e.total, e.name))
    bus.subscribe_all(history.append)
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Base class for all published events."""


@dataclass(frozen=True)
class LoadStarted(Event):
    count: int


@dataclass(frozen=True)
class LoadProgress(Event):
    current: int
    total: int
    name: str


@dataclass(frozen=True)
class LoadCompleted(Event):
    count: int


@dataclass(frozen=True)
class LoadFailed(Event):
    message: str


@dataclass(frozen=True)
class FolderNotFound(Event):
    pass


@dataclass(frozen=True)
class ConfigUpdated(Event):
    root: str
    subfolders: tuple[str, ...]


@dataclass(frozen=True)
class FileAdded(Event):
    path: str


@dataclass(frozen=True)
class AllCleared(Event):
    pass


@dataclass(frozen=True)
class DataReady(Event):
    count: int


Listener = Callable[[Event], None]


class EventBus:
    """Synchronous observer registry.

    Listeners run in subscription order on the publishing thread. A
    listener that raises is logged and skipped; the remaining listeners
    still receive the event.
    """

    def __init__(self) -> None:
        self._listeners: dict[type[Event], list[Listener]] = defaultdict(list)
        self._wildcard: list[Listener] = []
        self._pending: deque[Event] = deque()
        self._dispatching = False

    def subscribe(self, event_type: type[Event], listener: Listener) -> None:
        """Register ``listener`` for events of exactly ``event_type``."""
        self._listeners[event_type].append(listener)

    def subscribe_all(self, listener: Listener) -> None:
        """Register ``listener`` for every published event."""
        self._wildcard.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove ``listener`` from every registration it appears in."""
        for listeners in self._listeners.values():
            while listener in listeners:
                listeners.remove(listener)
        while listener in self._wildcard:
            self._wildcard.remove(listener)

    def publish(self, event: Event) -> None:
        """Deliver ``event``; events published by a listener are queued behind it."""
        self._pending.append(event)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._pending:
                self._dispatch(self._pending.popleft())
        finally:
            self._dispatching = False

    def _dispatch(self, event: Event) -> None:
        targets = list(self._listeners.get(type(event), ())) + list(self._wildcard)
        for listener in targets:
            try:
                listener(event)
            except Exception:
                logger.warning(
                    "Listener %r failed on %s", listener, type(event).__name__,
                    exc_info=True,
                )
