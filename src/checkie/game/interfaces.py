"""Abstract seams of the game layer.

:class:`~checkie.game.controller.GameController` only talks to players
through :class:`IPlayer`; a player answers a turn by calling the
``submit`` callable it was handed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Color

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move

MoveSubmitter = Callable[["Move"], bool]


class GamePhase(IntEnum):
    """Where a checkers game stands between two turns."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()  # a human is to move
    THINKING = auto()  # the engine owes a move
    GAME_OVER = auto()


class IPlayer(ABC):
    """One side of the board."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board, submit: MoveSubmitter) -> None:
        """It is this side's turn on *board*.

        The player answers with ``submit(move)``, either before returning
        or later from the same thread. Humans ignore the call; their
        moves come from the console.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Forget an outstanding request; a late answer must not be submitted."""


class IGameController(ABC):
    """Turn keeper for one game of checkers."""

    @abstractmethod
    def new_game(self, light: IPlayer, dark: IPlayer, board: Board | None = None) -> None:
        """Seat both players and hand the first turn to dark."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move; False if it is not legal now."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """End the game in favor of *color*'s opponent."""
