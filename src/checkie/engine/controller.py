"""AIController: picks the AI's move by search or at random."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import TYPE_CHECKING

from checkie.core.enums import Player
from checkie.engine.evaluate import Evaluator, MaterialEvaluator
from checkie.engine.minimax import AlphaBetaSearch
from checkie.engine.search import (
    NoLegalMoveError,
    ScoredMove,
    SearchCounters,
    SearchResult,
)

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move

_LOGGER = logging.getLogger(__name__)


class AIController:
    """Generates AI moves for a board.

    Difficulty ``0`` plays a uniformly random move. Any positive
    difficulty is the search depth handed to :class:`AlphaBetaSearch`;
    the move with the highest root score wins, ties going to the move
    enumerated first.

    The board is mutated during a search and restored before
    :meth:`get_move` returns, so nothing else may touch it meanwhile.
    """

    __slots__ = (
        "_board",
        "_evaluator",
        "_rng",
        "_verify_restore",
        "_counters",
        "_last_result",
    )

    def __init__(
        self,
        board: Board,
        evaluator: Evaluator | None = None,
        *,
        rng: random.Random | None = None,
        verify_restore: bool = False,
    ) -> None:
        self._board = board
        self._evaluator: Evaluator = evaluator or MaterialEvaluator()
        self._rng = rng or random.Random()
        self._verify_restore = verify_restore
        self._counters = SearchCounters()
        self._last_result: SearchResult | None = None

    @property
    def board(self) -> Board:
        return self._board

    @property
    def counters(self) -> SearchCounters:
        """Counters of the most recent :meth:`get_move` call."""
        return self._counters

    @property
    def last_result(self) -> SearchResult | None:
        """Details of the most recent searched move (``None`` after a random one)."""
        return self._last_result

    def get_move(self, difficulty: int) -> Move:
        """Return the AI's move; raises :class:`NoLegalMoveError` if it has none."""
        if difficulty < 0:
            raise ValueError("Difficulty must be >= 0")
        if difficulty == 0:
            self._counters = SearchCounters()
            self._last_result = None
            return self.random_move()
        return self.select_best_move(difficulty)

    def select_best_move(self, difficulty: int) -> Move:
        session = AlphaBetaSearch(
            self._board,
            self._evaluator,
            max_depth=difficulty,
            verify_restore=self._verify_restore,
        )
        scored = session.run()
        self._counters = session.counters

        best: ScoredMove | None = None
        for entry in scored:
            if best is None or entry.score > best.score:
                best = entry

        if best is None:
            self._last_result = None
            _LOGGER.warning("AI (%s) has no legal move", self._board.color_of(Player.AI))
            raise NoLegalMoveError("AI has no legal move")

        self._last_result = SearchResult(
            best_move=best.move,
            score=best.score,
            difficulty=difficulty,
            counters=replace(session.counters),
            scored_moves=tuple(scored),
        )
        _LOGGER.info(
            "AI chose %s (score %d, difficulty %d, %d nodes)",
            best.move,
            best.score,
            difficulty,
            session.counters.dynamic_evaluations,
        )
        return best.move

    def random_move(self) -> Move:
        """Uniformly random move for the AI."""
        moves = self._board.available_moves(Player.AI)
        if not moves:
            _LOGGER.warning("AI (%s) has no legal move", self._board.color_of(Player.AI))
            raise NoLegalMoveError("AI has no legal move")
        return moves[int(self._rng.random() * len(moves))]
