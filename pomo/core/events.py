"""Typed events published by the session, and the bus that delivers them.

Events are delivered strictly in the order they are emitted. A listener that
causes more events while handling one gets them queued behind the current
event rather than delivered re-entrantly.
"""

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pomo.common.logger import log

if TYPE_CHECKING:
    from pomo.core.config import SessionConfig
    from pomo.core.session import Mode


@dataclass(frozen=True)
class Tick:
    time_left: int


@dataclass(frozen=True)
class ModeChanged:
    mode: "Mode"


@dataclass(frozen=True)
class Started:
    mode: "Mode"


@dataclass(frozen=True)
class Paused:
    mode: "Mode"
    time_left: int


@dataclass(frozen=True)
class SessionCompleted:
    finished: "Mode"
    next_mode: "Mode"


@dataclass(frozen=True)
class StatsUpdated:
    daily_sessions: int
    lifetime_sessions: int
    total_work_seconds: int


@dataclass(frozen=True)
class SettingsChanged:
    config: "SessionConfig"


class EventBus:

    def __init__(self):
        self._listeners = []
        self._queue = deque()
        self._dispatching = False

    def subscribe(self, listener):
        if not callable(listener):
            raise ValueError("Listener must be callable")
        self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event):
        self._queue.append(event)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                self._deliver(self._queue.popleft())
        finally:
            self._dispatching = False

    def _deliver(self, event):
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                log.exception(f"Error in event listener {listener!r} while handling {event!r}")
