"""Wires the transport, seek and volume controllers to one player.

All player subscriptions are made here, once, and dispose() removes every
one of them. The Qt widget only forwards UI events and renders outputs.
"""

from __future__ import annotations

import logging
from typing import Callable

from playbar.controllers.playback_session import PlaybackSession
from playbar.controllers.seek_sync import PositionIndicator, SeekSync
from playbar.controllers.transport_controller import (TransportController,
                                                      TransportLabel)
from playbar.controllers.volume_sync import (DEFAULT_MUTED_OPACITY, MuteLabel,
                                             VolumeControl, VolumeSync)
from playbar.utils.video.player import (CYCLE_INFINITE, Player, PlayerCallback,
                                        PlayerEvent)

logger = logging.getLogger(__name__)


class PlaybackCoordinator:
    def __init__(
        self,
        player: Player,
        indicator: PositionIndicator,
        volume_control: VolumeControl,
        *,
        on_transport_label: Callable[[TransportLabel], None] | None = None,
        on_mute_label: Callable[[MuteLabel], None] | None = None,
        on_time_text: Callable[[str], None] | None = None,
        defer: Callable[[Callable[[], None]], None] | None = None,
        loop_playback: bool = False,
        muted_opacity: float = DEFAULT_MUTED_OPACITY,
    ):
        self.player = player
        self.session = PlaybackSession()
        self._subscriptions: list[tuple[PlayerEvent, PlayerCallback]] = []
        self._disposed = False
        self.seek_sync = SeekSync(player, indicator, self.session, on_time_text)
        self.transport = TransportController(
            player,
            session=self.session,
            on_label=on_transport_label,
            on_refresh=self.refresh,
            defer=defer,
        )
        self.volume = VolumeSync(player, volume_control, on_mute_label, muted_opacity)

        player.set_cycle_count(CYCLE_INFINITE if loop_playback else 1)
        self._subscribe(PlayerEvent.PLAYING, self.transport.on_playing)
        self._subscribe(PlayerEvent.PAUSED, self.transport.on_paused)
        self._subscribe(PlayerEvent.READY, self.transport.on_ready)
        self._subscribe(PlayerEvent.END_OF_MEDIA, self.transport.on_end_of_media)
        self._subscribe(PlayerEvent.TIME_ADVANCED, self.seek_sync.refresh)
        self._subscribe(PlayerEvent.MEDIA_CHANGED, self.transport.on_media_changed)

        self.volume.sync()
        self.seek_sync.refresh()

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _subscribe(self, event: PlayerEvent, callback: PlayerCallback):
        self.player.subscribe(event, callback)
        self._subscriptions.append((event, callback))

    # UI events

    def transport_clicked(self):
        if not self._disposed:
            self.transport.click()

    def position_changed(self):
        if not self._disposed:
            self.seek_sync.on_indicator_changed()

    def volume_changed(self):
        if not self._disposed:
            self.volume.on_volume_changed()

    def mute_clicked(self):
        if not self._disposed:
            self.volume.toggle_mute()

    def refresh(self):
        if not self._disposed:
            self.seek_sync.refresh()

    def dispose(self):
        """Detach from the player. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        for event, callback in self._subscriptions:
            self.player.unsubscribe(event, callback)
        logger.debug('Detached %d player subscriptions', len(self._subscriptions))
        self._subscriptions.clear()
