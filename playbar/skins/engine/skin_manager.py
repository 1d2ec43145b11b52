"""Skin manager - coordinates loading and switching skins."""

import logging
from pathlib import Path
from typing import Dict, Any, Optional, List
from .skin_loader import SkinLoader
from .skin_applier import SkinApplier

logger = logging.getLogger(__name__)


class SkinManager:
    """Manages skin loading and switching."""

    def __init__(self, skin_dirs: Optional[List[Path]] = None):
        """Initialize skin manager.

        Args:
            skin_dirs: List of directories to search for skins.
                       Defaults to [defaults/, user/]
        """
        if skin_dirs is None:
            base_dir = Path(__file__).parent.parent
            skin_dirs = [
                base_dir / 'defaults',
                base_dir / 'user'
            ]

        self.skin_dirs = skin_dirs
        self.loader = SkinLoader()
        self.current_skin: Optional[Dict[str, Any]] = None
        self.current_applier: Optional[SkinApplier] = None
        self.available_skins: List[Dict[str, Any]] = []

        self.refresh_available_skins()

    def refresh_available_skins(self):
        self.available_skins = self.loader.list_available_skins(self.skin_dirs)

    def get_available_skins(self) -> List[Dict[str, Any]]:
        return self.available_skins

    def load_skin(self, skin_name: str) -> bool:
        """Load a skin by name; returns False if no such skin was found."""
        skin_info = next(
            (skin for skin in self.available_skins if skin['name'] == skin_name),
            None,
        )
        if not skin_info:
            logger.warning("Skin not found: %s", skin_name)
            return False

        self.current_skin = skin_info['data']
        self.current_applier = SkinApplier(self.current_skin)
        return True

    def get_current_applier(self) -> SkinApplier:
        """Current applier, or one over built-in defaults if nothing is loaded."""
        if self.current_applier is None:
            return SkinApplier({})
        return self.current_applier

    def get_current_skin_name(self) -> str:
        if self.current_skin:
            return self.current_skin.get('name', 'Unknown')
        return "No Skin"

    def get_default_skin_name(self) -> str:
        if self.available_skins:
            return self.available_skins[0]['name']
        return ""

    def load_skin_or_default(self, skin_name: str) -> bool:
        """Load the named skin, falling back to the first available one."""
        if skin_name and self.load_skin(skin_name):
            return True
        default_name = self.get_default_skin_name()
        if default_name:
            return self.load_skin(default_name)
        return False
