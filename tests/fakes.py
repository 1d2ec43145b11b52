from playbar.utils.video.player import PlayerEvent, PlayerNotifier, PlayerStatus


class FakePlayer:
    """In-memory player that notifies synchronously, like a same-thread backend."""

    def __init__(self, status=PlayerStatus.UNKNOWN, duration=None, position=0.0):
        self._status = status
        self._duration = duration
        self.position = position
        self.volume = None
        self.muted = False
        self.cycle_count = None
        self.commands = []
        self.notifier = PlayerNotifier()

    # Test drivers

    def become_ready(self, duration):
        self._duration = duration
        self._status = PlayerStatus.READY
        self.notifier.emit(PlayerEvent.READY)

    def advance_to(self, position):
        self.position = position
        self.notifier.emit(PlayerEvent.TIME_ADVANCED)

    def reach_end(self):
        self.position = self._duration or 0.0
        self._status = PlayerStatus.STOPPED
        self.notifier.emit(PlayerEvent.END_OF_MEDIA)

    def halt(self):
        self._status = PlayerStatus.HALTED

    def change_media(self):
        self._status = PlayerStatus.UNKNOWN
        self._duration = None
        self.position = 0.0
        self.notifier.emit(PlayerEvent.MEDIA_CHANGED)

    def playback_commands(self):
        return [c for c in self.commands if c[0] in ('play', 'pause', 'seek')]

    # Player contract

    def status(self):
        return self._status

    def current_time(self):
        return self.position

    def total_duration(self):
        return self._duration

    def is_muted(self):
        return self.muted

    def play(self):
        self.commands.append(('play',))
        if self._status != PlayerStatus.PLAYING:
            self._status = PlayerStatus.PLAYING
            self.notifier.emit(PlayerEvent.PLAYING)

    def pause(self):
        self.commands.append(('pause',))
        if self._status != PlayerStatus.PAUSED:
            self._status = PlayerStatus.PAUSED
            self.notifier.emit(PlayerEvent.PAUSED)

    def seek(self, position_ms):
        self.commands.append(('seek', position_ms))
        self.position = position_ms
        self.notifier.emit(PlayerEvent.TIME_ADVANCED)

    def set_volume(self, volume):
        self.commands.append(('set_volume', volume))
        self.volume = volume

    def set_mute(self, muted):
        self.commands.append(('set_mute', muted))
        self.muted = muted

    def set_cycle_count(self, count):
        self.cycle_count = count

    def subscribe(self, event, callback):
        self.notifier.subscribe(event, callback)

    def unsubscribe(self, event, callback):
        self.notifier.unsubscribe(event, callback)


class FakeIndicator:
    def __init__(self, value=0.0, enabled=True, dragging=False):
        self._value = value
        self._enabled = enabled
        self.dragging = dragging
        self.writes = []

    def value(self):
        return self._value

    def set_value(self, value):
        self.writes.append(value)
        self._value = value

    def drag_to(self, value):
        """Simulate the user moving the handle."""
        self._value = value

    def is_dragging(self):
        return self.dragging

    def is_enabled(self):
        return self._enabled

    def set_enabled(self, enabled):
        self._enabled = enabled


class FakeVolumeControl:
    def __init__(self, value=100.0):
        self._value = value
        self.opacity = 1.0

    def value(self):
        return self._value

    def set_value(self, value):
        self._value = value

    def set_opacity(self, opacity):
        self.opacity = opacity
