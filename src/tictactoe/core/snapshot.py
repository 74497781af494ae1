"""Authoritative snapshot model delivered by the transport layer.

Snapshots are immutable: every update from the authority produces a new
:class:`GameArea` that replaces the previous one as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tictactoe.core.enums import GameStatus
from tictactoe.core.move import TicTacToeMove
from tictactoe.core.types import PlayerID


@dataclass(frozen=True, slots=True)
class TicTacToeGameState:
    """Game state owned by the authority."""

    status: GameStatus = GameStatus.WAITING_TO_START
    moves: tuple[TicTacToeMove, ...] = ()
    x: PlayerID | None = None
    o: PlayerID | None = None
    winner: PlayerID | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TicTacToeGameState:
        try:
            status = GameStatus(data.get("status", GameStatus.WAITING_TO_START))
        except ValueError:
            raise ValueError(f"Invalid game status: {data.get('status')!r}") from None
        moves = tuple(TicTacToeMove.from_dict(m) for m in data.get("moves") or ())
        return cls(
            status=status,
            moves=moves,
            x=data.get("x"),
            o=data.get("o"),
            winner=data.get("winner"),
        )


@dataclass(frozen=True, slots=True)
class GameInstance:
    """One round of play inside an area."""

    id: str
    state: TicTacToeGameState = field(default_factory=TicTacToeGameState)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameInstance:
        if "id" not in data:
            raise ValueError(f"Game payload missing id: {data!r}")
        return cls(
            id=str(data["id"]),
            state=TicTacToeGameState.from_dict(data.get("state") or {}),
        )


@dataclass(frozen=True, slots=True)
class GameArea:
    """Raw area payload: occupants plus the current game, if any."""

    id: str
    occupants: tuple[PlayerID, ...] = ()
    game: GameInstance | None = None

    @property
    def state(self) -> TicTacToeGameState | None:
        return self.game.state if self.game is not None else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameArea:
        """Parse the camel-cased transport payload.

        Example::

            GameArea.from_dict({
                "id": "ttt-1",
                "occupants": ["p1", "p2"],
                "game": {"id": "g1", "state": {"status": "IN_PROGRESS",
                                               "moves": [], "x": "p1", "o": "p2"}},
            })
        """
        if "id" not in data:
            raise ValueError(f"Area payload missing id: {data!r}")
        occupants = data.get("occupants") or ()
        if not isinstance(occupants, (list, tuple)):
            raise ValueError(f"Area occupants must be a list: {occupants!r}")
        game_data = data.get("game")
        game = GameInstance.from_dict(game_data) if game_data is not None else None
        return cls(id=str(data["id"]), occupants=tuple(occupants), game=game)
