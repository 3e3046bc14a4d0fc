"""Move generation: diagonal steps and single jumps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.types import make_square, on_board

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.piece import Piece


KING_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# Men only move toward the opponent's back row.
_MAN_DIRS: dict[Color, tuple[tuple[int, int], ...]] = {
    Color.DARK: ((1, -1), (1, 1)),
    Color.LIGHT: ((-1, -1), (-1, 1)),
}


class MoveGenerator:
    """Enumerates moves for one side of a :class:`Board`.

    Ordering is deterministic: pieces by ascending square, then each
    piece's directions in table order. Captures are optional and chains
    are not continued; a jump ends the move.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def generate_moves(self, color: Color) -> list[Move]:
        moves: list[Move] = []
        for piece in self._board.pieces(color):
            self._piece_moves(piece, moves)
        return moves

    def generate_captures(self, color: Color) -> list[Move]:
        return [m for m in self.generate_moves(color) if m.is_capture]

    def has_moves(self, color: Color) -> bool:
        return bool(self.generate_moves(color))

    def _piece_moves(self, piece: Piece, out: list[Move]) -> None:
        board = self._board
        directions = KING_DIRS if piece.king else _MAN_DIRS[piece.color]

        for dr, dc in directions:
            row = piece.row + dr
            col = piece.col + dc
            if not on_board(row, col):
                continue

            adjacent = make_square(row, col)
            if board.is_empty(adjacent):
                out.append(Move(piece.square, adjacent))
                continue

            jumped = board[adjacent]
            if jumped is None or jumped.color == piece.color:
                continue
            land_row = row + dr
            land_col = col + dc
            if not on_board(land_row, land_col):
                continue
            landing = make_square(land_row, land_col)
            if board.is_empty(landing):
                out.append(Move(piece.square, landing, captured=jumped))
