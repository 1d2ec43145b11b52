"""QMediaPlayer-backed implementation of the Player contract."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Qt, QUrl, Signal, Slot
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

from .player import (CYCLE_INFINITE, PlayerCallback, PlayerEvent,
                     PlayerNotifier, PlayerStatus)

logger = logging.getLogger(__name__)

_LOADING_STATUSES = {
    QMediaPlayer.MediaStatus.NoMedia,
    QMediaPlayer.MediaStatus.LoadingMedia,
}

_READY_STATUSES = {
    QMediaPlayer.MediaStatus.LoadedMedia,
    QMediaPlayer.MediaStatus.BufferedMedia,
}


def map_player_status(
    *,
    has_source: bool,
    halted: bool,
    media_status: QMediaPlayer.MediaStatus,
    playback_state: QMediaPlayer.PlaybackState,
    started: bool,
) -> PlayerStatus:
    """Translate QMediaPlayer state into a PlayerStatus.

    `started` tells whether play() was issued since the current source was
    set; it separates Ready (never played) from Stopped.
    """
    if halted or media_status == QMediaPlayer.MediaStatus.InvalidMedia:
        return PlayerStatus.HALTED
    if not has_source or media_status in _LOADING_STATUSES:
        return PlayerStatus.UNKNOWN
    if playback_state == QMediaPlayer.PlaybackState.PlayingState:
        return PlayerStatus.PLAYING
    if playback_state == QMediaPlayer.PlaybackState.PausedState:
        return PlayerStatus.PAUSED
    return PlayerStatus.STOPPED if started else PlayerStatus.READY


class QtMediaPlayerAdapter(QObject):
    """Wraps QMediaPlayer + QAudioOutput.

    Every notification goes through _event_posted with a queued connection,
    so listeners always run on this object's thread (the GUI thread) even
    when the multimedia backend reports from a worker thread.
    """

    _event_posted = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.media_player = QMediaPlayer(self)
        self.audio_output = QAudioOutput(self)
        self.media_player.setAudioOutput(self.audio_output)

        self.source_path: Path | None = None
        self._notifier = PlayerNotifier()
        self._halted = False
        self._started = False
        self._ready_notified = False
        self._error_string = ''

        self._event_posted.connect(self._dispatch, Qt.ConnectionType.QueuedConnection)

        self.media_player.playbackStateChanged.connect(self._on_playback_state_changed)
        self.media_player.mediaStatusChanged.connect(self._on_media_status_changed)
        self.media_player.positionChanged.connect(self._on_position_changed)
        self.media_player.errorOccurred.connect(self._on_error)

    def load(self, media_path: Path | str) -> bool:
        """Set a new source. Listeners get MEDIA_CHANGED, then READY once loaded."""
        path = Path(media_path)
        self.media_player.stop()
        self._halted = False
        self._started = False
        self._ready_notified = False
        self._error_string = ''

        # Queue MEDIA_CHANGED ahead of setSource(): backends may report
        # LoadedMedia synchronously and READY has to follow it.
        if not path.exists():
            logger.error('Media file not found: %s', path)
            self.source_path = None
            self._halted = True
            self._error_string = f'File not found: {path}'
            self._post(PlayerEvent.MEDIA_CHANGED)
            self.media_player.setSource(QUrl())
            return False

        self.source_path = path
        self._post(PlayerEvent.MEDIA_CHANGED)
        self.media_player.setSource(QUrl.fromLocalFile(str(path)))
        logger.info('Loaded media: %s', path.name)
        return True

    def set_video_output(self, video_output):
        self.media_player.setVideoOutput(video_output)

    @property
    def error_string(self) -> str:
        return self._error_string

    # Player queries

    def status(self) -> PlayerStatus:
        return map_player_status(
            has_source=not self.media_player.source().isEmpty(),
            halted=self._halted,
            media_status=self.media_player.mediaStatus(),
            playback_state=self.media_player.playbackState(),
            started=self._started,
        )

    def current_time(self) -> float:
        return float(self.media_player.position())

    def total_duration(self) -> float | None:
        duration = self.media_player.duration()
        if duration <= 0:
            return None
        return float(duration)

    def is_muted(self) -> bool:
        return self.audio_output.isMuted()

    # Player commands

    def play(self):
        self._started = True
        self.media_player.play()

    def pause(self):
        self.media_player.pause()

    def seek(self, position_ms: float):
        self.media_player.setPosition(int(round(position_ms)))

    def set_volume(self, volume: float):
        self.audio_output.setVolume(max(0.0, min(1.0, float(volume))))

    def set_mute(self, muted: bool):
        self.audio_output.setMuted(bool(muted))

    def set_cycle_count(self, count: int):
        if count == CYCLE_INFINITE:
            self.media_player.setLoops(QMediaPlayer.Loops.Infinite)
        else:
            self.media_player.setLoops(max(1, int(count)))

    # Notifications

    def subscribe(self, event: PlayerEvent, callback: PlayerCallback):
        self._notifier.subscribe(event, callback)

    def unsubscribe(self, event: PlayerEvent, callback: PlayerCallback):
        self._notifier.unsubscribe(event, callback)

    def listener_count(self, event: PlayerEvent | None = None) -> int:
        return self._notifier.listener_count(event)

    def _post(self, event: PlayerEvent):
        self._event_posted.emit(event)

    @Slot(object)
    def _dispatch(self, event: PlayerEvent):
        self._notifier.emit(event)

    @Slot(QMediaPlayer.PlaybackState)
    def _on_playback_state_changed(self, state: QMediaPlayer.PlaybackState):
        if state == QMediaPlayer.PlaybackState.PlayingState:
            self._post(PlayerEvent.PLAYING)
        elif state == QMediaPlayer.PlaybackState.PausedState:
            self._post(PlayerEvent.PAUSED)

    @Slot(QMediaPlayer.MediaStatus)
    def _on_media_status_changed(self, status: QMediaPlayer.MediaStatus):
        if status in _READY_STATUSES and not self._ready_notified:
            self._ready_notified = True
            self._post(PlayerEvent.READY)
        elif status == QMediaPlayer.MediaStatus.EndOfMedia:
            self._post(PlayerEvent.END_OF_MEDIA)
        elif status == QMediaPlayer.MediaStatus.InvalidMedia:
            logger.warning('Invalid media: %s', self.source_path)
            self._halted = True

    @Slot(int)
    def _on_position_changed(self, position_ms: int):
        self._post(PlayerEvent.TIME_ADVANCED)

    @Slot(QMediaPlayer.Error, str)
    def _on_error(self, error: QMediaPlayer.Error, error_string: str):
        if error == QMediaPlayer.Error.NoError:
            return
        self._halted = True
        self._error_string = error_string
        logger.error('Player error (%s): %s', error.name, error_string)

    def cleanup(self):
        """Release the media source and video output."""
        self.media_player.stop()
        self.media_player.setVideoOutput(None)
        self.media_player.setSource(QUrl())
        self.source_path = None
