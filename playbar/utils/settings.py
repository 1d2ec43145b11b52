import os

from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'volume': 100,  # Volume slider position, 0-100
    'loop_playback': False,  # True = restart forever instead of offering REPLAY
    'player_skin': 'Classic',
    'skin_directories': '',  # Extra skin dirs separated by os.pathsep
}


class Settings(QSettings):
    # Emitted with the key and new value after every setValue()
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('playbar', 'playbar')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def get_volume() -> int:
    volume = settings.value('volume', defaultValue=DEFAULT_SETTINGS['volume'],
                            type=int)
    return max(0, min(100, volume))


def get_loop_playback() -> bool:
    return settings.value('loop_playback',
                          defaultValue=DEFAULT_SETTINGS['loop_playback'],
                          type=bool)


def get_player_skin() -> str:
    return settings.value('player_skin',
                          defaultValue=DEFAULT_SETTINGS['player_skin'],
                          type=str)


def get_skin_directories() -> list[str]:
    raw = settings.value('skin_directories',
                         defaultValue=DEFAULT_SETTINGS['skin_directories'],
                         type=str)
    return [part for part in (raw or '').split(os.pathsep) if part.strip()]
