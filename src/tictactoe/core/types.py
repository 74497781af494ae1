"""Primitive types and grid helpers.

The board is indexed row-first, so ``board[0][0]`` is the top-left cell
and ``board[2][2]`` the bottom-right one.
"""

from __future__ import annotations

from typing import Literal, TypeAlias

from tictactoe.core.enums import GamePiece

PlayerID: TypeAlias = str
GridPosition: TypeAlias = Literal[0, 1, 2]
Cell: TypeAlias = GamePiece | None
Board: TypeAlias = tuple[tuple[Cell, ...], ...]

BOARD_SIZE = 3


def is_grid_position(value: object) -> bool:
    """Whether *value* is a valid row or column index."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value < BOARD_SIZE


def empty_board() -> Board:
    return tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE))


def board_to_text(board: Board) -> str:
    """Compact three-line rendering, ``.`` for empty cells (debug output)."""
    return "\n".join(
        "".join(str(cell) if cell is not None else "." for cell in row) for row in board
    )
