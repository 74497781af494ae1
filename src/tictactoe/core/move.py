"""Move value object and the command that carries it to the authority."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from tictactoe.core.enums import GamePiece
from tictactoe.core.types import GridPosition, is_grid_position


@dataclass(frozen=True, slots=True)
class TicTacToeMove:
    """A single piece placed at ``(row, col)``."""

    game_piece: GamePiece
    row: GridPosition
    col: GridPosition

    def __post_init__(self) -> None:
        if not is_grid_position(self.row):
            raise ValueError(f"Invalid row: {self.row!r}")
        if not is_grid_position(self.col):
            raise ValueError(f"Invalid column: {self.col!r}")

    def __str__(self) -> str:
        return f"{self.game_piece}@{self.row},{self.col}"

    # ── Serialisation ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {"gamePiece": str(self.game_piece), "row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TicTacToeMove:
        """Parse e.g. ``{"gamePiece": "X", "row": 0, "col": 2}``."""
        try:
            piece = GamePiece(data["gamePiece"])
            return cls(piece, data["row"], data["col"])
        except KeyError as exc:
            raise ValueError(f"Move payload missing field {exc}: {data!r}") from None
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid move payload {data!r}: {exc}") from None


@dataclass(frozen=True, slots=True)
class GameMoveCommand:
    """Request asking the authority to apply *move* to game *game_id*."""

    type: ClassVar[str] = "GameMove"

    game_id: str
    move: TicTacToeMove

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "gameID": self.game_id, "move": self.move.to_dict()}
