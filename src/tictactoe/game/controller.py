"""TicTacToeAreaController — client-side mirror of a tic-tac-toe game.

Derives board, roles and turn ownership from the authoritative snapshot,
emits ``board_changed`` / ``turn_changed`` only when those facts change, and
forwards the local player's moves to the authority.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

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
from tictactoe.core.snapshot import GameArea
from tictactoe.core.types import Board, GridPosition, PlayerID, board_to_text
from tictactoe.game.area_controller import GameAreaController, GameAreaEvents
from tictactoe.game.errors import (
    InstanceNotAttachedError,
    NoGameInProgressError,
    PlayerNotInGameError,
)
from tictactoe.game.interfaces import IPlayer, ITownController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

BoardChangedCallback = Callable[[Board], None]
TurnChangedCallback = Callable[[bool], None]  # is_our_turn


@dataclass
class TicTacToeEvents(GameAreaEvents):
    """Area events plus board and turn notifications."""

    on_board_changed: list[BoardChangedCallback] = field(default_factory=list)
    on_turn_changed: list[TurnChangedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TicTacToeAreaController(GameAreaController):
    """Read-only view of a tic-tac-toe game plus the ``make_move`` command.

    All queries recompute from the current snapshot. Nothing is applied
    locally: a move becomes visible only once the authority sends the next
    snapshot through :meth:`update_from`.
    """

    __slots__ = ()

    events: TicTacToeEvents

    def __init__(
        self,
        model: GameArea,
        *,
        town: ITownController,
        events: TicTacToeEvents | None = None,
    ) -> None:
        super().__init__(
            model,
            town=town,
            events=events if events is not None else TicTacToeEvents(),
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """3x3 grid indexed ``board[row][col]``; empty when there is no game."""
        state = self._state
        return derive_board(state.moves if state is not None else ())

    @property
    def x_player(self) -> IPlayer | None:
        return self._player_for(role_player_id(self._state, GamePiece.X))

    @property
    def o_player(self) -> IPlayer | None:
        return self._player_for(role_player_id(self._state, GamePiece.O))

    @property
    def move_count(self) -> int:
        state = self._state
        return len(state.moves) if state is not None else 0

    @property
    def winner(self) -> IPlayer | None:
        return derive_winner_player(self._state, self._players)

    @property
    def whose_turn(self) -> IPlayer | None:
        """Player expected to move; ``None`` unless the game is in progress."""
        piece = derive_turn_owner(self._state)
        if piece is None:
            return None
        return self._player_for(role_player_id(self._state, piece))

    @property
    def is_our_turn(self) -> bool:
        if not self.is_active():
            return False
        ours = self._our_player_id
        current = self.whose_turn
        return ours is not None and current is not None and current.id == ours

    @property
    def is_player(self) -> bool:
        return derive_role(self._state, self._our_player_id) is not None

    @property
    def game_piece(self) -> GamePiece:
        """Role held by the local player.

        Raises:
            PlayerNotInGameError: the local player holds no role; check
                :attr:`is_player` first.
        """
        piece = derive_role(self._state, self._our_player_id)
        if piece is None:
            raise PlayerNotInGameError
        return piece

    @property
    def status(self) -> GameStatus:
        return derive_status(self._state)

    def is_active(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    # ── Update protocol ──────────────────────────────────────────────────

    def _update_from(self, new_model: GameArea) -> None:
        old_board = self.board
        old_turn = self._whose_turn_id

        super()._update_from(new_model)

        new_board = self.board
        new_turn = self._whose_turn_id

        if board_changed(old_board, new_board):
            _LOGGER.debug(
                "Area %s: board changed\n%s", self.id, board_to_text(new_board)
            )
            self._emit_board_changed(new_board)

        if turn_changed(old_turn, new_turn):
            _LOGGER.debug("Area %s: turn %s -> %s", self.id, old_turn, new_turn)
            self._emit_turn_changed(self.is_our_turn)

    # ── Commands ─────────────────────────────────────────────────────────

    async def make_move(self, row: GridPosition, col: GridPosition) -> None:
        """Ask the authority to place our piece at ``(row, col)``.

        Raises:
            NoGameInProgressError: the area has no game.
            InstanceNotAttachedError: the controller has no instance id.
            PlayerNotInGameError: the local player holds no role.
            ValueError: *row* or *col* is off the board.

        Any failure reported by the command channel propagates unchanged.
        """
        game = self._model.game
        if game is None:
            raise NoGameInProgressError
        instance_id = self._instance_id
        if not instance_id:
            raise InstanceNotAttachedError

        command = GameMoveCommand(
            game_id=game.id,
            move=TicTacToeMove(self.game_piece, row, col),
        )
        _LOGGER.debug("Area %s: sending %s", self.id, command.move)
        try:
            await self._town.send_interactable_command(instance_id, command)
        except Exception as exc:
            _LOGGER.warning("Area %s: move %s rejected: %s", self.id, command.move, exc)
            raise

    # ── Internal helpers ─────────────────────────────────────────────────

    @property
    def _our_player_id(self) -> PlayerID | None:
        ours = self._town.our_player
        return ours.id if ours is not None else None

    @property
    def _whose_turn_id(self) -> PlayerID | None:
        current = self.whose_turn
        return current.id if current is not None else None

    def _player_for(self, player_id: PlayerID | None) -> IPlayer | None:
        if player_id is None:
            return None
        return self._players.get(player_id)

    def _emit_board_changed(self, board: Board) -> None:
        for cb in list(self.events.on_board_changed):
            cb(board)

    def _emit_turn_changed(self, is_our_turn: bool) -> None:
        for cb in list(self.events.on_turn_changed):
            cb(is_our_turn)
