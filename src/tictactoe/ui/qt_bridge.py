"""Qt bridge exposing controller notifications as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from tictactoe.core.types import Board
from tictactoe.game.controller import TicTacToeAreaController


class AreaSignals(QObject):
    """Re-emits :class:`TicTacToeAreaController` events as Qt signals.

    Widgets connect to these signals instead of the controller's callback
    lists, which gives them queued delivery across threads for free.
    """

    board_changed = pyqtSignal(object)  # Board
    turn_changed = pyqtSignal(bool)
    game_updated = pyqtSignal()
    game_end = pyqtSignal()

    __slots__ = ("_controller",)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller: TicTacToeAreaController | None = None

    @property
    def controller(self) -> TicTacToeAreaController | None:
        return self._controller

    def attach(self, controller: TicTacToeAreaController) -> None:
        """Forward *controller*'s events; detaches from any previous one."""
        if controller is self._controller:
            return
        self.detach()
        events = controller.events
        events.on_board_changed.append(self._on_board_changed)
        events.on_turn_changed.append(self._on_turn_changed)
        events.on_game_updated.append(self._on_game_updated)
        events.on_game_end.append(self._on_game_end)
        self._controller = controller

    def detach(self) -> None:
        """Stop forwarding. No-op when not attached."""
        controller = self._controller
        if controller is None:
            return
        events = controller.events
        for handlers, handler in (
            (events.on_board_changed, self._on_board_changed),
            (events.on_turn_changed, self._on_turn_changed),
            (events.on_game_updated, self._on_game_updated),
            (events.on_game_end, self._on_game_end),
        ):
            if handler in handlers:
                handlers.remove(handler)
        self._controller = None

    def _on_board_changed(self, board: Board) -> None:
        self.board_changed.emit(board)

    def _on_turn_changed(self, is_our_turn: bool) -> None:
        self.turn_changed.emit(is_our_turn)

    def _on_game_updated(self) -> None:
        self.game_updated.emit()

    def _on_game_end(self) -> None:
        self.game_end.emit()
