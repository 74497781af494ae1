"""Concrete player implementation."""

from __future__ import annotations

from tictactoe.core.types import PlayerID
from tictactoe.game.interfaces import IPlayer


class PlayerController(IPlayer):
    """A town player as seen by this client.

    Equality is by identifier, so two controllers for the same remote player
    compare equal even if the roster rebuilt them.
    """

    __slots__ = ("_id", "_user_name")

    def __init__(self, player_id: PlayerID, user_name: str = "") -> None:
        self._id = player_id
        self._user_name = user_name or player_id

    @property
    def id(self) -> PlayerID:
        return self._id

    @property
    def user_name(self) -> str:
        return self._user_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IPlayer):
            return NotImplemented
        return self._id == other.id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"PlayerController({self._id!r}, {self._user_name!r})"
