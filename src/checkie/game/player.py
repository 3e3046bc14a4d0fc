"""Concrete players: a console human and the search-driven AI."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Protocol

from checkie.core.enums import Color
from checkie.engine.controller import AIController
from checkie.game.interfaces import IPlayer, MoveSubmitter

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move
    from checkie.engine.evaluate import Evaluator
    from checkie.engine.search import SearchResult

_LOGGER = logging.getLogger(__name__)


class MoveDispatcher(Protocol):
    """Runs an AI request somewhere else and submits the answer later."""

    def dispatch(self, board: Board, submit: MoveSubmitter) -> None: ...

    def cancel(self) -> None: ...


class HumanPlayer(IPlayer):
    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board, submit: MoveSubmitter) -> None:
        pass  # typed in at the console

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """The engine's side of the board.

    Every request builds an :class:`AIController` over the game board and
    submits ``get_move(difficulty)`` before returning. With a dispatcher
    installed the request is handed to it instead, and the dispatcher
    submits once its search is done.

    Args:
        color: Side the AI plays.
        difficulty: ``0`` for random play, otherwise the search depth.
        name: Display name.
        evaluator: Leaf evaluation; material count by default.
        rng: Random source for difficulty ``0``.
        verify_restore: Check every speculative rollback.
    """

    __slots__ = (
        "_color",
        "_name",
        "_difficulty",
        "_evaluator",
        "_rng",
        "_verify_restore",
        "_dispatcher",
        "_last_result",
    )

    def __init__(
        self,
        color: Color,
        difficulty: int = 3,
        name: str = "Checkie",
        *,
        evaluator: Evaluator | None = None,
        rng: random.Random | None = None,
        verify_restore: bool = False,
    ) -> None:
        if difficulty < 0:
            raise ValueError("Difficulty must be >= 0")
        self._color = color
        self._name = name
        self._difficulty = difficulty
        self._evaluator = evaluator
        self._rng = rng or random.Random()
        self._verify_restore = verify_restore
        self._dispatcher: MoveDispatcher | None = None
        self._last_result: SearchResult | None = None

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: int) -> None:
        if value < 0:
            raise ValueError("Difficulty must be >= 0")
        self._difficulty = value

    @property
    def last_result(self) -> SearchResult | None:
        """Search details of the last synchronous move (``None`` after a random one)."""
        return self._last_result

    def set_dispatcher(self, dispatcher: MoveDispatcher | None) -> None:
        self._dispatcher = dispatcher

    def make_controller(self, board: Board) -> AIController:
        if board.ai_color != self._color:
            board = board.copy()
            board.ai_color = self._color
        return AIController(
            board,
            self._evaluator,
            rng=self._rng,
            verify_restore=self._verify_restore,
        )

    def choose_move(self, board: Board) -> Move:
        """Search *board* in place and return the move; raises ``NoLegalMoveError``."""
        controller = self.make_controller(board)
        move = controller.get_move(self._difficulty)
        self._last_result = controller.last_result
        return move

    def request_move(self, board: Board, submit: MoveSubmitter) -> None:
        if self._dispatcher is not None:
            self._dispatcher.dispatch(board, submit)
            return
        move = self.choose_move(board)
        if not submit(move):
            _LOGGER.error("Game rejected engine move %s", move)

    def cancel(self) -> None:
        if self._dispatcher is not None:
            self._dispatcher.cancel()
