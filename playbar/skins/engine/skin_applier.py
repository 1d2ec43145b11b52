"""Skin applier - applies skin data to the playback widget."""

from typing import Dict, Any

from .schema import LabelsSchema, LayoutSchema, StylingSchema

_LAYOUT_DEFAULTS = LayoutSchema()
_STYLING_DEFAULTS = StylingSchema()
_LABEL_DEFAULTS = LabelsSchema()

# Skin label keys -> ControlBar label text keys.
_LABEL_KEYS = {
    'play': 'PLAY',
    'pause': 'PAUSE',
    'replay': 'REPLAY',
    'mute': 'MUTE',
    'unmute': 'UNMUTE',
    'volume': 'volume',
}


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


class SkinApplier:
    """Applies skin styling to a PlaybackWidget.

    Getters fall back to the schema defaults, so an empty skin dict gives the
    classic look.
    """

    def __init__(self, skin_data: Dict[str, Any]):
        """Initialize applier with skin data.

        Args:
            skin_data: Loaded and resolved skin dictionary
        """
        self.skin = skin_data
        self.vp = skin_data.get('video_player', {}) or {}
        self.layout = self.vp.get('layout', {}) or {}
        self.styling = self.vp.get('styling', {}) or {}
        self.labels = self.vp.get('labels', {}) or {}

    def get_padding(self) -> int:
        return _as_int(self.layout.get('padding'), _LAYOUT_DEFAULTS.padding)

    def get_button_spacing(self) -> int:
        return _as_int(self.layout.get('button_spacing'), _LAYOUT_DEFAULTS.button_spacing)

    def get_button_width(self) -> int:
        return _as_int(self.layout.get('button_width'), _LAYOUT_DEFAULTS.button_width)

    def get_time_label_width(self) -> int:
        return _as_int(self.layout.get('time_label_width'), _LAYOUT_DEFAULTS.time_label_width)

    def get_control_bar_position(self) -> str:
        return self.layout.get('control_bar_position', _LAYOUT_DEFAULTS.control_bar_position)

    def get_muted_volume_opacity(self) -> float:
        opacity = _as_float(self.styling.get('muted_volume_opacity'),
                            _STYLING_DEFAULTS.muted_volume_opacity)
        return max(0.0, min(1.0, opacity))

    def get_label_texts(self) -> Dict[str, str]:
        """Label texts keyed the way ControlBar expects them."""
        texts = {}
        for skin_key, bar_key in _LABEL_KEYS.items():
            text = self.labels.get(skin_key, getattr(_LABEL_DEFAULTS, skin_key))
            texts[bar_key] = str(text)
        return texts

    def get_background_stylesheet(self) -> str:
        background = self.styling.get('background', _STYLING_DEFAULTS.background)
        text_color = self.styling.get('text_color', _STYLING_DEFAULTS.text_color)
        font_size = _as_int(self.styling.get('label_font_size'), _STYLING_DEFAULTS.label_font_size)
        return (
            f"background-color: {background};"
            f" color: {text_color};"
            f" font-size: {font_size}px;"
        )

    def get_movie_stylesheet(self) -> str:
        movie_background = self.styling.get('movie_background', _STYLING_DEFAULTS.movie_background)
        return f"background-color: {movie_background};"

    def apply_to_playback_widget(self, widget):
        """Apply layout, colors and texts to a PlaybackWidget."""
        bar = widget.control_bar
        padding = self.get_padding()
        bar.bar_layout.setContentsMargins(padding, padding, padding, padding)
        bar.bar_layout.setSpacing(self.get_button_spacing())

        button_width = self.get_button_width()
        bar.transport_btn.setFixedWidth(button_width)
        bar.mute_btn.setFixedWidth(button_width)
        bar.time_label.setFixedWidth(self.get_time_label_width())

        bar.setAutoFillBackground(True)
        bar.setStyleSheet(self.get_background_stylesheet())
        widget.movie_pane.setStyleSheet(self.get_movie_stylesheet())

        bar.set_label_texts(self.get_label_texts())
        widget.set_control_bar_position(self.get_control_bar_position())
