"""Media engine contract; Qt backend lives in qt_player."""

from .player import (CYCLE_INFINITE, INACTIVE_STATUSES, Player, PlayerEvent,
                     PlayerNotifier, PlayerStatus)

__all__ = ['CYCLE_INFINITE', 'INACTIVE_STATUSES', 'Player', 'PlayerEvent',
           'PlayerNotifier', 'PlayerStatus']
