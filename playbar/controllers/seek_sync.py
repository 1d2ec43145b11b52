"""Two-way sync between player progress and the seekbar.

Player -> seekbar happens in refresh(); seekbar -> player happens in
on_indicator_changed(). Each direction is gated on the indicator's drag flag
so a programmatic seekbar write never turns into a seek.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from playbar.controllers.playback_session import PlaybackSession
from playbar.utils.time_format import format_elapsed_time
from playbar.utils.video.player import INACTIVE_STATUSES, Player

logger = logging.getLogger(__name__)

# Seekbar scale: 0 = start, 100 = end.
POSITION_SCALE = 100.0


class PositionIndicator(Protocol):
    def value(self) -> float: ...

    def set_value(self, value: float) -> None: ...

    def is_dragging(self) -> bool: ...

    def is_enabled(self) -> bool: ...

    def set_enabled(self, enabled: bool) -> None: ...


class SeekSync:
    def __init__(
        self,
        player: Player,
        indicator: PositionIndicator,
        session: PlaybackSession,
        on_time_text: Callable[[str], None] | None = None,
    ):
        self.player = player
        self.indicator = indicator
        self.session = session
        self._on_time_text = on_time_text
        self.time_text = format_elapsed_time(0, None)

    def refresh(self):
        """Push the player's current time to the label and the seekbar."""
        elapsed = self.player.current_time()
        duration = self.session.total_duration

        self.time_text = format_elapsed_time(elapsed, duration)
        if self._on_time_text is not None:
            self._on_time_text(self.time_text)

        self.indicator.set_enabled(self.session.duration_known)

        if (self.session.seekable
                and self.indicator.is_enabled()
                and not self.indicator.is_dragging()):
            self.indicator.set_value(elapsed / duration * POSITION_SCALE)

    def on_indicator_changed(self):
        """Seek the player while the user drags the seekbar."""
        if not self.indicator.is_dragging():
            return
        if not self.session.seekable:
            return
        status = self.player.status()
        if status in INACTIVE_STATUSES:
            logger.debug('Suppressed drag seek, player status is %s', status.value)
            return
        target = self.session.total_duration * (self.indicator.value() / POSITION_SCALE)
        logger.debug('Seeking to %.0f ms from seekbar drag', target)
        self.player.seek(target)
