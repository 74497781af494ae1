"""Game management layer — area controllers, players, errors.

Quick start::

    from tictactoe.game import TicTacToeAreaController

    ctrl = TicTacToeAreaController(area, town=town)
    ctrl.events.on_board_changed.append(redraw)
    ctrl.update_from(next_area)
    await ctrl.make_move(1, 1)
"""

from tictactoe.game.area_controller import GameAreaController, GameAreaEvents
from tictactoe.game.controller import TicTacToeAreaController, TicTacToeEvents
from tictactoe.game.errors import (
    INSTANCE_NOT_ATTACHED_ERROR,
    NO_GAME_IN_PROGRESS_ERROR,
    PLAYER_NOT_IN_GAME_ERROR,
    GameAreaError,
    InstanceNotAttachedError,
    NoGameInProgressError,
    PlayerNotInGameError,
)
from tictactoe.game.interfaces import IPlayer, ITownController
from tictactoe.game.player import PlayerController

__all__ = [
    # Interfaces
    "IPlayer",
    "ITownController",
    # Concrete
    "GameAreaController",
    "GameAreaEvents",
    "PlayerController",
    "TicTacToeAreaController",
    "TicTacToeEvents",
    # Errors
    "GameAreaError",
    "INSTANCE_NOT_ATTACHED_ERROR",
    "InstanceNotAttachedError",
    "NO_GAME_IN_PROGRESS_ERROR",
    "NoGameInProgressError",
    "PLAYER_NOT_IN_GAME_ERROR",
    "PlayerNotInGameError",
]
