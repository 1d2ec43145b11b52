from PySide6.QtCore import Qt
from PySide6.QtWidgets import (QGraphicsOpacityEffect, QHBoxLayout, QLabel,
                               QPushButton, QSlider, QWidget)

from playbar.controllers.transport_controller import TransportLabel
from playbar.controllers.volume_sync import MuteLabel

# Default texts, overridable per skin (video_player.labels).
DEFAULT_LABEL_TEXTS = {
    TransportLabel.PLAY.value: 'PLAY',
    TransportLabel.PAUSE.value: 'PAUSE',
    TransportLabel.REPLAY.value: 'REPLAY',
    MuteLabel.MUTE.value: 'MUTE',
    MuteLabel.UNMUTE.value: 'UNMUTE',
    'volume': 'Volume: ',
}

# Seekbar steps; the controllers work on a 0-100 float scale.
SEEK_SLIDER_RESOLUTION = 1000
PERCENT = 100.0


class SliderIndicator:
    """Seekbar adapter: 0-100 float value, drag flag and enabled flag."""

    def __init__(self, slider: QSlider):
        self.slider = slider
        self.slider.setRange(0, SEEK_SLIDER_RESOLUTION)

    def value(self) -> float:
        return self.slider.value() * PERCENT / SEEK_SLIDER_RESOLUTION

    def set_value(self, value: float):
        try:
            self.slider.setValue(round(value * SEEK_SLIDER_RESOLUTION / PERCENT))
        except RuntimeError:
            pass  # C++ object deleted

    def is_dragging(self) -> bool:
        return self.slider.isSliderDown()

    def is_enabled(self) -> bool:
        return self.slider.isEnabled()

    def set_enabled(self, enabled: bool):
        try:
            self.slider.setEnabled(enabled)
        except RuntimeError:
            pass  # C++ object deleted


class VolumeSliderControl:
    """Volume slider adapter; de-emphasis is done with an opacity effect."""

    def __init__(self, slider: QSlider):
        self.slider = slider
        self.slider.setRange(0, int(PERCENT))
        self._opacity_effect = QGraphicsOpacityEffect(self.slider)
        self._opacity_effect.setOpacity(1.0)
        self.slider.setGraphicsEffect(self._opacity_effect)

    def value(self) -> float:
        return float(self.slider.value())

    def opacity(self) -> float:
        return self._opacity_effect.opacity()

    def set_opacity(self, opacity: float):
        try:
            self._opacity_effect.setOpacity(opacity)
        except RuntimeError:
            pass  # C++ object deleted


class ControlBar(QWidget):
    """Transport button, seekbar, time label, mute button and volume slider."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.label_texts = dict(DEFAULT_LABEL_TEXTS)
        self.transport_label = TransportLabel.PLAY
        self.mute_label = MuteLabel.MUTE

        layout = QHBoxLayout(self)
        self.bar_layout = layout

        self.transport_btn = QPushButton(self.label_texts[TransportLabel.PLAY.value])
        self.transport_btn.setToolTip('Play/Pause (Space)')

        self.time_slider = QSlider(Qt.Orientation.Horizontal)
        self.time_slider.setToolTip('Drag to seek')

        self.time_label = QLabel()

        self.mute_btn = QPushButton(self.label_texts[MuteLabel.MUTE.value])
        self.mute_btn.setToolTip('Toggle Mute/Unmute')

        self.volume_label = QLabel(self.label_texts['volume'])
        self.volume_slider = QSlider(Qt.Orientation.Horizontal)
        self.volume_slider.setToolTip('Volume')

        self.indicator = SliderIndicator(self.time_slider)
        self.volume_control = VolumeSliderControl(self.volume_slider)

        layout.addWidget(self.transport_btn)
        layout.addWidget(self.time_slider, 1)
        layout.addWidget(self.time_label)
        layout.addWidget(self.mute_btn)
        layout.addWidget(self.volume_label)
        layout.addWidget(self.volume_slider)

    def set_label_texts(self, texts: dict):
        """Merge skin-provided texts over the defaults."""
        for key, text in texts.items():
            if key in self.label_texts and isinstance(text, str):
                self.label_texts[key] = text
        self.volume_label.setText(self.label_texts['volume'])
        self.show_transport_label(self.transport_label)
        self.show_mute_label(self.mute_label)

    def show_transport_label(self, label: TransportLabel):
        self.transport_label = label
        try:
            self.transport_btn.setText(self.label_texts[label.value])
        except RuntimeError:
            pass  # C++ object deleted

    def show_mute_label(self, label: MuteLabel):
        self.mute_label = label
        try:
            self.mute_btn.setText(self.label_texts[label.value])
        except RuntimeError:
            pass  # C++ object deleted

    def show_time_text(self, text: str):
        try:
            self.time_label.setText(text)
        except RuntimeError:
            pass  # C++ object deleted
