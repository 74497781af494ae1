"""Pure projections of a snapshot, plus the change detector.

Every function here is total: given any snapshot (or ``None`` when no game
exists) it returns a value and never raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

from tictactoe.core.enums import GamePiece, GameStatus
from tictactoe.core.move import TicTacToeMove
from tictactoe.core.snapshot import TicTacToeGameState
from tictactoe.core.types import BOARD_SIZE, Board, Cell, PlayerID

P = TypeVar("P")


# ── Derivation ───────────────────────────────────────────────────────────────


def derive_board(moves: Iterable[TicTacToeMove]) -> Board:
    """Replay *moves* in order onto an empty grid.

    A later move on an already filled cell overwrites it.
    """
    grid: list[list[Cell]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for move in moves:
        grid[move.row][move.col] = move.game_piece
    return tuple(tuple(row) for row in grid)


def derive_status(state: TicTacToeGameState | None) -> GameStatus:
    if state is None:
        return GameStatus.WAITING_TO_START
    return state.status


def derive_turn_owner(state: TicTacToeGameState | None) -> GamePiece | None:
    """Role expected to move next; ``None`` unless the game is in progress."""
    if state is None or state.status != GameStatus.IN_PROGRESS:
        return None
    return GamePiece.X if len(state.moves) % 2 == 0 else GamePiece.O


def role_player_id(
    state: TicTacToeGameState | None, piece: GamePiece
) -> PlayerID | None:
    if state is None:
        return None
    return state.x if piece == GamePiece.X else state.o


def derive_role(
    state: TicTacToeGameState | None, local_player_id: PlayerID | None
) -> GamePiece | None:
    if state is None or local_player_id is None:
        return None
    if state.x == local_player_id:
        return GamePiece.X
    if state.o == local_player_id:
        return GamePiece.O
    return None


def derive_winner_player(
    state: TicTacToeGameState | None, players: Mapping[PlayerID, P]
) -> P | None:
    if state is None or state.winner is None:
        return None
    return players.get(state.winner)


# ── Change detection ────────────────────────────────────────────────────────


def board_changed(old: Board, new: Board) -> bool:
    """True iff at least one cell differs position-wise."""
    return old != new


def turn_changed(old_id: PlayerID | None, new_id: PlayerID | None) -> bool:
    return old_id != new_id
