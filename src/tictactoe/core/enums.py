"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import StrEnum


class GamePiece(StrEnum):
    """The two roles a player can hold."""

    X = "X"
    O = "O"  # noqa: E741


class GameStatus(StrEnum):
    """Lifecycle status as reported by the authority."""

    WAITING_TO_START = "WAITING_TO_START"
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"
