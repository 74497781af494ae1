"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the area controllers depend on these ABCs,
not on a concrete town/transport implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.core.move import GameMoveCommand
    from tictactoe.core.types import PlayerID


class IPlayer(ABC):
    """A player known to the town (local or remote)."""

    @property
    @abstractmethod
    def id(self) -> PlayerID: ...

    @property
    @abstractmethod
    def user_name(self) -> str: ...


class ITownController(ABC):
    """The surrounding town: roster, local identity and command channel."""

    @property
    @abstractmethod
    def our_player(self) -> IPlayer | None:
        """The player controlled by this client, if any."""

    @abstractmethod
    def get_player(self, player_id: PlayerID) -> IPlayer | None:
        """Look up a known player by identifier."""

    @abstractmethod
    async def send_interactable_command(
        self, instance_id: str, command: GameMoveCommand
    ) -> None:
        """Deliver *command* to the authority.

        Completes when the authority acknowledges and raises when it rejects
        the command or the channel fails.
        """
