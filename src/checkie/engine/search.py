"""Shared engine search models, bounds and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkie.core.move import Move

# Widest alpha/beta window, matching a signed 32-bit score range.
MIN_SCORE = -(2**31)
MAX_SCORE = 2**31 - 1


class NoLegalMoveError(RuntimeError):
    """The AI has no move to play in the current position."""


class BoardStateError(RuntimeError):
    """A speculative move was not rolled back to an identical position."""


@dataclass(slots=True, frozen=True)
class ScoredMove:
    """A root-level move paired with its minimax score."""

    move: Move
    score: int


@dataclass(slots=True)
class SearchCounters:
    """Work done by one search invocation."""

    static_evaluations: int = 0
    dynamic_evaluations: int = 0
    prunings: int = 0

    def reset(self) -> None:
        self.static_evaluations = 0
        self.dynamic_evaluations = 0
        self.prunings = 0


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Outcome of a move selection at a given difficulty."""

    best_move: Move
    score: int
    difficulty: int
    counters: SearchCounters = field(default_factory=SearchCounters)
    scored_moves: tuple[ScoredMove, ...] = ()
