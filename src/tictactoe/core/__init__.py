"""Core domain layer — snapshot model and pure derivations, no Qt.

Quick start::

    from tictactoe.core import GameArea, derive_board

    area = GameArea.from_dict(payload)
    board = derive_board(area.state.moves)
"""

from tictactoe.core.derive import (
    board_changed,
    derive_board,
    derive_role,
    derive_status,
    derive_turn_owner,
    derive_winner_player,
    role_player_id,
    turn_changed,
)
from tictactoe.core.enums import GamePiece, GameStatus
from tictactoe.core.move import GameMoveCommand, TicTacToeMove
from tictactoe.core.snapshot import GameArea, GameInstance, TicTacToeGameState
from tictactoe.core.types import (
    BOARD_SIZE,
    Board,
    Cell,
    GridPosition,
    PlayerID,
    board_to_text,
    empty_board,
    is_grid_position,
)

__all__ = [
    # Enums
    "GamePiece",
    "GameStatus",
    # Types / helpers
    "BOARD_SIZE",
    "Board",
    "Cell",
    "GridPosition",
    "PlayerID",
    "board_to_text",
    "empty_board",
    "is_grid_position",
    # Snapshot model
    "GameArea",
    "GameInstance",
    "GameMoveCommand",
    "TicTacToeGameState",
    "TicTacToeMove",
    # Derivation
    "board_changed",
    "derive_board",
    "derive_role",
    "derive_status",
    "derive_turn_owner",
    "derive_winner_player",
    "role_player_id",
    "turn_changed",
]
