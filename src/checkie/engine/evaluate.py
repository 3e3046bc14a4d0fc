"""Static position evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from checkie.core.enums import Color, Player

if TYPE_CHECKING:
    from checkie.core.board import Board


class Evaluator(Protocol):
    """Scores a position from the AI's point of view; higher is better.

    Implementations must be deterministic and must not mutate the board.
    """

    def evaluate(self, board: Board) -> int: ...


class MaterialEvaluator:
    """Piece-count differential: AI pieces minus opponent pieces.

    Kings count ``king_weight`` each, men count one.
    """

    __slots__ = ("_king_weight",)

    def __init__(self, king_weight: int = 1) -> None:
        if king_weight < 1:
            raise ValueError("King weight must be >= 1")
        self._king_weight = king_weight

    def evaluate(self, board: Board) -> int:
        return self._material(board, board.color_of(Player.AI)) - self._material(
            board, board.color_of(Player.HUMAN)
        )

    def _material(self, board: Board, color: Color) -> int:
        total = board.count(color)
        if self._king_weight == 1:
            return total
        kings = board.count(color, kings_only=True)
        return total + kings * (self._king_weight - 1)
