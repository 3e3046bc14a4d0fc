"""Depth-bounded minimax with alpha-beta pruning over a shared board.

The search never copies the board. Each move is played speculatively
and rolled back from a full piece snapshot before the next sibling is
tried, so the board is back in its real state whenever :meth:`run`
returns or raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from checkie.core.enums import Player
from checkie.engine.search import (
    MAX_SCORE,
    MIN_SCORE,
    BoardStateError,
    ScoredMove,
    SearchCounters,
)

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move
    from checkie.engine.evaluate import Evaluator

_LOGGER = logging.getLogger(__name__)


@contextmanager
def attempt(board: Board, move: Move, *, verify: bool = False) -> Iterator[None]:
    """Play *move* speculatively for the duration of the ``with`` block.

    The board is refilled from a snapshot on every exit path. A capture
    additionally has the jumped square's occupancy reconciled with the
    restored cell. With *verify*, a restore that does not reproduce the
    snapshot raises :class:`BoardStateError`.
    """
    snapshot = board.snapshot_pieces()
    try:
        board.make_move(move, speculative=True)
        yield
    finally:
        board.restore_pieces(snapshot)
        if move.captured is not None:
            board.reconcile(move.captured.square)

    if verify and board.snapshot_pieces() != snapshot:
        raise BoardStateError(f"Board not restored after attempting {move}")


class AlphaBetaSearch:
    """One search session: bounds, counters and root scores for a single run.

    Args:
        board: Shared position, mutated and restored in place.
        evaluator: Static evaluation used past ``max_depth``.
        max_depth: Deepest ply that still expands moves; nodes below it
            are evaluated statically.
        verify_restore: Check every rollback against its snapshot.
    """

    __slots__ = (
        "_board",
        "_evaluator",
        "_verify_restore",
        "max_depth",
        "counters",
        "scored_moves",
    )

    def __init__(
        self,
        board: Board,
        evaluator: Evaluator,
        max_depth: int,
        *,
        verify_restore: bool = False,
    ) -> None:
        if max_depth < 0:
            raise ValueError("Search depth must be >= 0")
        self._board = board
        self._evaluator = evaluator
        self._verify_restore = verify_restore
        self.max_depth = max_depth
        self.counters = SearchCounters()
        self.scored_moves: list[ScoredMove] = []

    def run(self) -> list[ScoredMove]:
        """Search from the root for the AI and return per-move scores."""
        self.counters.reset()
        self.scored_moves = []
        score = self.search(0, Player.AI, MIN_SCORE, MAX_SCORE)
        _LOGGER.debug(
            "Search depth=%d score=%d static=%d dynamic=%d prunings=%d",
            self.max_depth,
            score,
            self.counters.static_evaluations,
            self.counters.dynamic_evaluations,
            self.counters.prunings,
        )
        return self.scored_moves

    def search(self, depth: int, player: Player, alpha: int, beta: int) -> int:
        """Minimax value of the current board for *player* to move."""
        if depth > self.max_depth:
            self.counters.static_evaluations += 1
            return self._evaluator.evaluate(self._board)

        moves = self._board.available_moves(player)
        if not moves:
            # A side with no move scores neutral rather than lost.
            self.counters.static_evaluations += 1
            return 0

        maximizing = player == Player.AI
        best_score = MIN_SCORE if maximizing else MAX_SCORE

        for move in moves:
            self.counters.dynamic_evaluations += 1
            with attempt(self._board, move, verify=self._verify_restore):
                score = self.search(depth + 1, player.opponent, alpha, beta)

            if maximizing:
                best_score = max(best_score, score)
                if depth == 0:
                    self.scored_moves.append(ScoredMove(move, score))
                alpha = max(alpha, best_score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, best_score)

            # The root scores every move, so only inner nodes cut off.
            if depth > 0 and alpha >= beta:
                self.counters.prunings += 1
                break

        return best_score
