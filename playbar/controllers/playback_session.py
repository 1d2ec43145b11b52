"""Per-media playback state shared by the transport and seek controllers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlaybackSession:
    """State that lives exactly as long as one loaded media item.

    total_duration is captured once when the player reports Ready and is
    left alone until reset(). replay_armed means the media ended and the next
    play action restarts from the beginning.
    """

    total_duration: float | None = None
    ready: bool = False
    replay_armed: bool = False

    @property
    def duration_known(self) -> bool:
        return self.total_duration is not None

    @property
    def seekable(self) -> bool:
        return self.total_duration is not None and self.total_duration > 0

    def capture_duration(self, duration_ms: float | None):
        if self.ready:
            return
        self.total_duration = duration_ms
        self.ready = True

    def reset(self):
        self.total_duration = None
        self.ready = False
        self.replay_armed = False
