"""Volume slider binding and mute toggle."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol

from playbar.utils.video.player import Player

logger = logging.getLogger(__name__)

VOLUME_SCALE = 100.0
FULL_OPACITY = 1.0
DEFAULT_MUTED_OPACITY = 0.5


class MuteLabel(Enum):
    MUTE = 'MUTE'
    UNMUTE = 'UNMUTE'


class VolumeControl(Protocol):
    def value(self) -> float: ...

    def set_opacity(self, opacity: float) -> None: ...


class VolumeSync:
    """Keeps player volume equal to the slider value / 100.

    Muting flips the player's mute flag only. The slider value and the volume
    binding stay as they are, so unmuting comes back at the same level.
    """

    def __init__(
        self,
        player: Player,
        control: VolumeControl,
        on_mute_label: Callable[[MuteLabel], None] | None = None,
        muted_opacity: float = DEFAULT_MUTED_OPACITY,
    ):
        self.player = player
        self.control = control
        self._on_mute_label = on_mute_label
        self.muted_opacity = muted_opacity
        self.mute_label = MuteLabel.MUTE
        self.on_volume_changed()

    def on_volume_changed(self):
        self.player.set_volume(self.control.value() / VOLUME_SCALE)

    def toggle_mute(self):
        muted = not self.player.is_muted()
        self.player.set_mute(muted)
        logger.debug('Audio %s', 'muted' if muted else 'unmuted')
        self._apply_mute_state(muted)

    def sync(self):
        """Re-derive label and emphasis from the player's mute flag."""
        self._apply_mute_state(self.player.is_muted())

    def _apply_mute_state(self, muted: bool):
        if muted:
            self.mute_label = MuteLabel.UNMUTE
            self.control.set_opacity(self.muted_opacity)
        else:
            self.mute_label = MuteLabel.MUTE
            self.control.set_opacity(FULL_OPACITY)
        if self._on_mute_label is not None:
            self._on_mute_label(self.mute_label)
