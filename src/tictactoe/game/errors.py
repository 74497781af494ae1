"""Errors raised by the area controllers."""

from __future__ import annotations

PLAYER_NOT_IN_GAME_ERROR = "Player is not in game"
NO_GAME_IN_PROGRESS_ERROR = "No game in progress"
INSTANCE_NOT_ATTACHED_ERROR = "Instance ID is undefined"


class GameAreaError(Exception):
    """Base class for controller contract violations."""


class PlayerNotInGameError(GameAreaError):
    """A player-only query was used while the local player holds no role."""

    def __init__(self, message: str = PLAYER_NOT_IN_GAME_ERROR) -> None:
        super().__init__(message)


class NoGameInProgressError(GameAreaError):
    """A move was requested while the area has no game."""

    def __init__(self, message: str = NO_GAME_IN_PROGRESS_ERROR) -> None:
        super().__init__(message)


class InstanceNotAttachedError(GameAreaError):
    """The controller was used before being attached to a game instance."""

    def __init__(self, message: str = INSTANCE_NOT_ATTACHED_ERROR) -> None:
        super().__init__(message)
