from pathlib import Path

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtMultimediaWidgets import QVideoWidget
from PySide6.QtWidgets import QVBoxLayout, QWidget

from playbar.controllers.playback_coordinator import PlaybackCoordinator
from playbar.skins.engine import SkinApplier
from playbar.utils.settings import get_loop_playback, get_volume, settings
from playbar.utils.video.qt_player import QtMediaPlayerAdapter
from playbar.widgets.playback_controls import ControlBar


def _defer_to_event_loop(callback):
    QTimer.singleShot(0, callback)


class PlaybackWidget(QWidget):
    """Video surface plus control bar, driven by a PlaybackCoordinator."""

    def __init__(self, player: QtMediaPlayerAdapter | None = None,
                 skin_applier: SkinApplier | None = None,
                 loop_playback: bool | None = None, parent=None):
        super().__init__(parent)
        self.player = player if player is not None else QtMediaPlayerAdapter(self)
        self.skin_applier = skin_applier if skin_applier is not None else SkinApplier({})

        self.movie_pane = QVideoWidget()
        self.control_bar = ControlBar()
        self.player.set_video_output(self.movie_pane)

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)
        self.main_layout.addWidget(self.movie_pane, 1)
        self.main_layout.addWidget(self.control_bar)

        self.skin_applier.apply_to_playback_widget(self)

        # Restore volume before the coordinator binds it to the player.
        self.control_bar.volume_slider.setValue(get_volume())

        if loop_playback is None:
            loop_playback = get_loop_playback()
        self.coordinator = PlaybackCoordinator(
            self.player,
            self.control_bar.indicator,
            self.control_bar.volume_control,
            on_transport_label=self.control_bar.show_transport_label,
            on_mute_label=self.control_bar.show_mute_label,
            on_time_text=self.control_bar.show_time_text,
            defer=_defer_to_event_loop,
            loop_playback=loop_playback,
            muted_opacity=self.skin_applier.get_muted_volume_opacity(),
        )

        self.control_bar.transport_btn.clicked.connect(self.coordinator.transport_clicked)
        self.control_bar.mute_btn.clicked.connect(self.coordinator.mute_clicked)
        self.control_bar.time_slider.valueChanged.connect(self._on_time_slider_changed)
        self.control_bar.volume_slider.valueChanged.connect(self._on_volume_slider_changed)

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def load(self, media_path: Path | str) -> bool:
        return self.player.load(media_path)

    def set_control_bar_position(self, position: str):
        """Move the control bar above ('top') or below ('bottom') the video."""
        self.main_layout.removeWidget(self.control_bar)
        index = 0 if position == 'top' else self.main_layout.count()
        self.main_layout.insertWidget(index, self.control_bar)

    @Slot(int)
    def _on_time_slider_changed(self, value: int):
        self.coordinator.position_changed()

    @Slot(int)
    def _on_volume_slider_changed(self, value: int):
        self.coordinator.volume_changed()
        settings.setValue('volume', value)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Space:
            self.coordinator.transport_clicked()
            event.accept()
            return
        super().keyPressEvent(event)

    def dispose(self):
        """Detach from the player and release the media source."""
        if self.coordinator.disposed:
            return
        self.coordinator.dispose()
        self.player.cleanup()

    def closeEvent(self, event):
        self.dispose()
        super().closeEvent(event)
