"""Play/pause/replay state machine behind the transport button.

The controller never touches widgets. It reacts to player notifications and
button clicks, issues player commands and publishes a TransportLabel; the
widget layer turns the label into text.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from playbar.controllers.playback_session import PlaybackSession
from playbar.utils.video.player import INACTIVE_STATUSES, Player, PlayerStatus

logger = logging.getLogger(__name__)

# Media start position for replay.
MEDIA_START_MS = 0.0


class PlaybackState(Enum):
    UNKNOWN = 'unknown'
    HALTED = 'halted'
    READY = 'ready'
    PLAYING = 'playing'
    PAUSED = 'paused'
    STOPPED = 'stopped'
    ENDED_AWAITING_REPLAY = 'ended_awaiting_replay'


class TransportLabel(Enum):
    PLAY = 'PLAY'
    PAUSE = 'PAUSE'
    REPLAY = 'REPLAY'


def _run_now(callback: Callable[[], None]):
    callback()


class TransportController:
    """Drives play/pause/seek on a player from status changes and clicks.

    Args:
        player: The media engine.
        session: Per-media state; a fresh one is created when omitted.
        on_label: Receives every TransportLabel change.
        on_refresh: Called when the time display should be re-synced.
        defer: Schedules a callable on the UI thread's next turn. Defaults to
            running it immediately.
    """

    def __init__(
        self,
        player: Player,
        *,
        session: PlaybackSession | None = None,
        on_label: Callable[[TransportLabel], None] | None = None,
        on_refresh: Callable[[], None] | None = None,
        defer: Callable[[Callable[[], None]], None] | None = None,
    ):
        self.player = player
        self.session = session if session is not None else PlaybackSession()
        self._on_label = on_label
        self._on_refresh = on_refresh
        self._defer = defer or _run_now
        self.state = PlaybackState.UNKNOWN
        self.label = TransportLabel.PLAY

    # Player notifications

    def on_ready(self):
        self.session.capture_duration(self.player.total_duration())
        self.state = PlaybackState.READY
        logger.debug('Player ready, duration=%s ms', self.session.total_duration)
        self._defer(self._request_refresh)

    def on_playing(self):
        if self.session.replay_armed:
            # Restarted by something other than the transport button.
            logger.debug('Playback resumed while replay was armed; disarming')
            self.session.replay_armed = False
        self._play()
        self.state = PlaybackState.PLAYING
        self._set_label(TransportLabel.PAUSE)

    def on_paused(self):
        self._pause()
        if self.session.replay_armed:
            # End-of-media pause: keep offering REPLAY.
            return
        self.state = PlaybackState.PAUSED
        self._set_label(TransportLabel.PLAY)

    def on_end_of_media(self):
        if self.session.replay_armed:
            return
        self.session.replay_armed = True
        self.state = PlaybackState.ENDED_AWAITING_REPLAY
        self._pause()
        self._set_label(TransportLabel.REPLAY)

    def on_media_changed(self):
        self.session.reset()
        self.state = PlaybackState.UNKNOWN
        self._set_label(TransportLabel.PLAY)
        self._request_refresh()

    # User input

    def click(self):
        """Handle a transport button click."""
        status = self.player.status()
        if status in INACTIVE_STATUSES:
            logger.debug('Ignoring transport click, player status is %s', status.value)
            return
        if self.session.replay_armed:
            self.session.replay_armed = False
            self._seek(MEDIA_START_MS)
            self.on_playing()
            return
        if status in (PlayerStatus.PAUSED, PlayerStatus.READY, PlayerStatus.STOPPED):
            self._play()
        else:
            self._pause()

    # Commands

    def _command_allowed(self, command: str) -> bool:
        status = self.player.status()
        if status in INACTIVE_STATUSES:
            logger.debug('Suppressed %s, player status is %s', command, status.value)
            return False
        return True

    def _play(self):
        if self._command_allowed('play'):
            self.player.play()

    def _pause(self):
        if self._command_allowed('pause'):
            self.player.pause()

    def _seek(self, position_ms: float):
        if self._command_allowed('seek'):
            self.player.seek(position_ms)

    def _set_label(self, label: TransportLabel):
        self.label = label
        if self._on_label is not None:
            self._on_label(label)

    def _request_refresh(self):
        if self._on_refresh is not None:
            self._on_refresh()
