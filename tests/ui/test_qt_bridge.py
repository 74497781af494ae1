"""Tests for the Qt signal bridge."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from tictactoe.core.enums import GamePiece, GameStatus
from tictactoe.core.move import TicTacToeMove
from tictactoe.core.snapshot import GameArea, GameInstance, TicTacToeGameState
from tictactoe.game.controller import TicTacToeAreaController
from tictactoe.ui.qt_bridge import AreaSignals


def _area(
    status: GameStatus = GameStatus.IN_PROGRESS,
    moves: tuple[TicTacToeMove, ...] = (),
) -> GameArea:
    state = TicTacToeGameState(status, moves, "p1", "p2")
    return GameArea("ttt-1", ("p1", "p2"), GameInstance("g1", state))


class TestAreaSignals:
    def test_forwards_all_events(self, qapp, town) -> None:
        town.our_player_id = "p2"
        ctrl = TicTacToeAreaController(_area(), town=town)
        signals = AreaSignals()
        signals.attach(ctrl)

        boards = QSignalSpy(signals.board_changed)
        turns = QSignalSpy(signals.turn_changed)
        updated = QSignalSpy(signals.game_updated)
        ended = QSignalSpy(signals.game_end)

        move = TicTacToeMove(GamePiece.X, 0, 0)
        ctrl.update_from(_area(moves=(move,)))

        assert len(boards) == 1
        assert boards[0][0] == ctrl.board
        assert len(turns) == 1
        assert turns[0][0] is True
        assert len(updated) == 1
        assert len(ended) == 0

        ctrl.update_from(_area(GameStatus.OVER, (move,)))
        assert len(ended) == 1

    def test_detach_stops_forwarding(self, qapp, town) -> None:
        ctrl = TicTacToeAreaController(_area(), town=town)
        signals = AreaSignals()
        signals.attach(ctrl)
        signals.detach()
        signals.detach()

        boards = QSignalSpy(signals.board_changed)
        ctrl.update_from(_area(moves=(TicTacToeMove(GamePiece.X, 1, 1),)))

        assert len(boards) == 0
        assert signals.controller is None
        assert ctrl.events.on_board_changed == []

    def test_reattach_moves_to_new_controller(self, qapp, town) -> None:
        first = TicTacToeAreaController(_area(), town=town)
        second = TicTacToeAreaController(_area(), town=town)
        signals = AreaSignals()
        signals.attach(first)
        signals.attach(first)
        assert len(first.events.on_turn_changed) == 1

        signals.attach(second)
        assert first.events.on_turn_changed == []
        assert signals.controller is second
