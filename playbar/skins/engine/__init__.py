"""Skin engine for the playbar control bar.

Provides a declarative skin system allowing users to customize:
- Colors, padding, opacity
- Button and label widths
- Transport/mute label texts
"""

from .skin_manager import SkinManager
from .skin_loader import SkinLoader
from .skin_applier import SkinApplier
from .schema import SkinSchema

__all__ = [
    'SkinManager',
    'SkinLoader',
    'SkinApplier',
    'SkinSchema',
]
