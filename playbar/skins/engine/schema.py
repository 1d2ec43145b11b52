"""Skin schema definition - what properties can be customized."""

from typing import Any, List
from dataclasses import dataclass


@dataclass
class LayoutSchema:
    """Control bar geometry."""

    padding: int = 20
    button_spacing: int = 8
    button_width: int = 75
    time_label_width: int = 150
    control_bar_position: str = "bottom"  # top, bottom


@dataclass
class StylingSchema:
    """Visual styling properties."""

    background: str = "#bbc0c4"
    movie_background: str = "#000000"
    text_color: str = "#000000"
    label_font_size: int = 12
    muted_volume_opacity: float = 0.5


@dataclass
class LabelsSchema:
    """Texts shown for transport/mute states."""

    play: str = "PLAY"
    pause: str = "PAUSE"
    replay: str = "REPLAY"
    mute: str = "MUTE"
    unmute: str = "UNMUTE"
    volume: str = "Volume: "


class SkinSchema:
    """Structure checks for a loaded skin; section defaults live in the dataclasses above."""

    @classmethod
    def get_required_fields(cls) -> List[str]:
        """Return list of required top-level fields."""
        return ['name', 'version']

    @classmethod
    def validate_structure(cls, data: Any) -> tuple[bool, str]:
        """Validate skin data structure.

        Returns:
            (valid, error_message) tuple
        """
        if not isinstance(data, dict):
            return False, "Skin must be a mapping"

        for required in cls.get_required_fields():
            if required not in data:
                return False, f"Missing required field: {required}"

        if 'video_player' in data:
            vp = data['video_player']
            if not isinstance(vp, dict):
                return False, "video_player must be a mapping"

            for section in ('layout', 'styling', 'labels'):
                if section in vp and not isinstance(vp[section], dict):
                    return False, f"video_player.{section} must be a mapping"

            layout = vp.get('layout', {})
            if 'control_bar_position' in layout:
                valid_positions = ['top', 'bottom']
                if layout['control_bar_position'] not in valid_positions:
                    return False, f"control_bar_position must be one of {valid_positions}"

            styling = vp.get('styling', {})
            if 'muted_volume_opacity' in styling:
                opacity = styling['muted_volume_opacity']
                # Token references are resolved after validation.
                if not isinstance(opacity, str):
                    if not isinstance(opacity, (int, float)) or not 0.0 <= opacity <= 1.0:
                        return False, "muted_volume_opacity must be between 0 and 1"

        return True, ""
