"""Checkers engine package: evaluation, alpha-beta search and move selection.

The Qt worker lives in :mod:`checkie.engine.qt_bridge`; only the
threaded console mode imports it, so the engine runs without PyQt6 loaded.
"""

from checkie.engine.controller import AIController
from checkie.engine.evaluate import Evaluator, MaterialEvaluator
from checkie.engine.minimax import AlphaBetaSearch, attempt
from checkie.engine.search import (
    MAX_SCORE,
    MIN_SCORE,
    BoardStateError,
    NoLegalMoveError,
    ScoredMove,
    SearchCounters,
    SearchResult,
)

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "AIController",
    "AlphaBetaSearch",
    "BoardStateError",
    "Evaluator",
    "MaterialEvaluator",
    "NoLegalMoveError",
    "ScoredMove",
    "SearchCounters",
    "SearchResult",
    "attempt",
]
