"""GameAreaController — shared state of an interactable game area.

Owns the current :class:`GameArea` snapshot, resolves its occupants through
the town roster and raises the area-level ``game_updated`` / ``game_end``
notifications. Game-specific controllers extend :meth:`update_from`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.derive import derive_status
from tictactoe.core.enums import GameStatus
from tictactoe.core.snapshot import GameArea, TicTacToeGameState
from tictactoe.core.types import PlayerID
from tictactoe.game.interfaces import IPlayer, ITownController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

GameUpdatedCallback = Callable[[], None]
GameEndCallback = Callable[[], None]


@dataclass
class GameAreaEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_game_updated: list[GameUpdatedCallback] = field(default_factory=list)
    on_game_end: list[GameEndCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameAreaController:
    """Mirror of one game area as last reported by the authority.

    Thread-safety: methods are designed to be called from a single thread
    (the event-dispatch thread). ``update_from`` must not be re-entered from
    one of its own event handlers.
    """

    __slots__ = (
        "_town",
        "_model",
        "_players",
        "_instance_id",
        "_updating",
        "events",
    )

    def __init__(
        self,
        model: GameArea,
        *,
        town: ITownController,
        events: GameAreaEvents | None = None,
    ) -> None:
        self._town = town
        self._model = model
        self._players: dict[PlayerID, IPlayer] = self._resolve_occupants(model)
        self._instance_id: str | None = model.game.id if model.game else None
        self._updating = False
        self.events = events if events is not None else GameAreaEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def id(self) -> str:
        return self._model.id

    @property
    def model(self) -> GameArea:
        return self._model

    @property
    def instance_id(self) -> str | None:
        return self._instance_id

    @property
    def game_id(self) -> str | None:
        return self._model.game.id if self._model.game else None

    @property
    def players(self) -> list[IPlayer]:
        """Occupants resolved through the town roster, in occupant order."""
        return list(self._players.values())

    @property
    def occupants(self) -> list[IPlayer]:
        return self.players

    @property
    def observers(self) -> list[IPlayer]:
        """Occupants that hold no role in the current game."""
        state = self._state
        if state is None:
            return self.players
        roles = {state.x, state.o}
        return [p for p in self._players.values() if p.id not in roles]

    def is_empty(self) -> bool:
        return not self._model.occupants

    # ── Update protocol ──────────────────────────────────────────────────

    def update_from(self, new_model: GameArea) -> None:
        """Replace the snapshot with *new_model* and notify listeners."""
        if self._updating:
            raise RuntimeError("update_from() re-entered while applying a snapshot")
        self._updating = True
        try:
            self._update_from(new_model)
        finally:
            self._updating = False

    def _update_from(self, new_model: GameArea) -> None:
        old_status = derive_status(self._state)

        self._model = new_model
        self._players = self._resolve_occupants(new_model)
        if new_model.game is not None:
            self._instance_id = new_model.game.id

        new_status = derive_status(self._state)
        _LOGGER.debug(
            "Area %s updated: status %s -> %s, %d occupant(s)",
            new_model.id,
            old_status,
            new_status,
            len(self._players),
        )

        self._emit_game_updated()
        if new_status == GameStatus.OVER and old_status != GameStatus.OVER:
            self._emit_game_end()

    # ── Internal helpers ─────────────────────────────────────────────────

    @property
    def _state(self) -> TicTacToeGameState | None:
        return self._model.state

    def _resolve_occupants(self, model: GameArea) -> dict[PlayerID, IPlayer]:
        players: dict[PlayerID, IPlayer] = {}
        for player_id in model.occupants:
            player = self._town.get_player(player_id)
            if player is None:
                _LOGGER.debug("Occupant %s is not a known player", player_id)
                continue
            players[player_id] = player
        return players

    def _emit_game_updated(self) -> None:
        for cb in list(self.events.on_game_updated):
            cb()

    def _emit_game_end(self) -> None:
        for cb in list(self.events.on_game_end):
            cb()
