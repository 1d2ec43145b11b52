"""Player contract driven by the playback controllers.

A Player is the media engine: it decodes, renders and owns the true
position, volume and mute state. Controllers only query it, issue commands
and listen to its notifications.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Protocol


# Cycle count meaning "loop forever".
CYCLE_INFINITE = -1


class PlayerStatus(Enum):
    UNKNOWN = 'unknown'
    HALTED = 'halted'
    READY = 'ready'
    PLAYING = 'playing'
    PAUSED = 'paused'
    STOPPED = 'stopped'


# Terminal statuses: any transport command sent while in one is suppressed.
INACTIVE_STATUSES = frozenset({PlayerStatus.UNKNOWN, PlayerStatus.HALTED})


class PlayerEvent(Enum):
    PLAYING = 'playing'
    PAUSED = 'paused'
    READY = 'ready'
    END_OF_MEDIA = 'end_of_media'
    TIME_ADVANCED = 'time_advanced'
    MEDIA_CHANGED = 'media_changed'


PlayerCallback = Callable[[], None]


class Player(Protocol):
    """Structural type for media engines.

    Durations are milliseconds; total_duration() returns None while unknown.
    """

    def status(self) -> PlayerStatus: ...

    def current_time(self) -> float: ...

    def total_duration(self) -> float | None: ...

    def is_muted(self) -> bool: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def seek(self, position_ms: float) -> None: ...

    def set_volume(self, volume: float) -> None: ...

    def set_mute(self, muted: bool) -> None: ...

    def set_cycle_count(self, count: int) -> None: ...

    def subscribe(self, event: PlayerEvent, callback: PlayerCallback) -> None: ...

    def unsubscribe(self, event: PlayerEvent, callback: PlayerCallback) -> None: ...


class PlayerNotifier:
    """Listener registry backing Player.subscribe/unsubscribe."""

    def __init__(self):
        self._listeners: dict[PlayerEvent, list[PlayerCallback]] = {
            event: [] for event in PlayerEvent
        }

    def subscribe(self, event: PlayerEvent, callback: PlayerCallback):
        self._listeners[event].append(callback)

    def unsubscribe(self, event: PlayerEvent, callback: PlayerCallback) -> bool:
        """Remove one registration; returns False if it was not registered."""
        listeners = self._listeners[event]
        if callback not in listeners:
            return False
        listeners.remove(callback)
        return True

    def emit(self, event: PlayerEvent):
        # Copy so a listener may disconnect itself while being notified.
        for callback in list(self._listeners[event]):
            callback()

    def listener_count(self, event: PlayerEvent | None = None) -> int:
        if event is not None:
            return len(self._listeners[event])
        return sum(len(listeners) for listeners in self._listeners.values())
