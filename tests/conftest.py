"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from tictactoe.core.move import GameMoveCommand
from tictactoe.core.types import PlayerID
from tictactoe.game.interfaces import IPlayer, ITownController
from tictactoe.game.player import PlayerController

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class StubTown(ITownController):
    """In-memory town: fixed roster, settable local player, recorded commands."""

    def __init__(self, *player_ids: PlayerID) -> None:
        self.roster: dict[PlayerID, IPlayer] = {
            pid: PlayerController(pid, f"User {pid}") for pid in player_ids
        }
        self.our_player_id: PlayerID | None = None
        self.sent: list[tuple[str, GameMoveCommand]] = []
        self.fail_with: Exception | None = None

    @property
    def our_player(self) -> IPlayer | None:
        if self.our_player_id is None:
            return None
        return self.roster.get(self.our_player_id)

    def get_player(self, player_id: PlayerID) -> IPlayer | None:
        return self.roster.get(player_id)

    async def send_interactable_command(
        self, instance_id: str, command: GameMoveCommand
    ) -> None:
        self.sent.append((instance_id, command))
        if self.fail_with is not None:
            raise self.fail_with


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture
def town() -> StubTown:
    """Town with players ``p1``, ``p2`` and ``p3``; nobody is local yet."""
    return StubTown("p1", "p2", "p3")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def _process_qt_events(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Flush pending Qt events after each UI test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    app.processEvents()
