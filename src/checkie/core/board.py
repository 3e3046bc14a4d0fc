"""Board - piece placement on an 8x8 checkers board."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeAlias

from checkie.core.enums import Color, Player
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Square, make_square, row_of, square_name

if TYPE_CHECKING:
    from checkie.core.move import Move

PieceSnapshot: TypeAlias = tuple[Piece, ...]

_COLOR_COUNT = 2
_CROWN_ROW: dict[Color, int] = {Color.DARK: BOARD_SIZE - 1, Color.LIGHT: 0}


class Board:
    """Mutable 64-square board with per-color occupancy bitboards.

    The board is the single shared position both real and speculative
    moves are played on. ``ai_color`` ties the search roles in
    :class:`Player` to piece colors.
    """

    __slots__ = ("_squares", "_occupancy", "ai_color", "history")

    def __init__(
        self,
        pieces: Iterable[Piece] = (),
        ai_color: Color = Color.DARK,
    ) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> bitboard of squares occupied by that color.
        self._occupancy: list[int] = [0] * _COLOR_COUNT
        self.ai_color = ai_color
        # Real (non-speculative) moves in the order they were played.
        self.history: list[Move] = []
        self.fill_with_pieces(pieces)

    @staticmethod
    def _squares_from_bitboard(bitboard: int) -> list[Square]:
        squares: list[Square] = []
        while bitboard:
            lsb = bitboard & -bitboard
            squares.append(lsb.bit_length() - 1)
            bitboard ^= lsb
        return squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is not None and piece.square != sq:
            raise ValueError(
                f"Piece on {square_name(piece.square)} placed on {square_name(sq)}"
            )
        old_piece = self._squares[sq]
        mask = 1 << sq
        if old_piece is not None:
            self._occupancy[int(old_piece.color)] &= ~mask

        self._squares[sq] = piece
        if piece is not None:
            self._occupancy[int(piece.color)] |= mask

    def is_empty(self, sq: Square) -> bool:
        return not ((self._occupancy[0] | self._occupancy[1]) >> sq) & 1

    # -- Query helpers ------------------------------------------------------

    def occupancy_bitboard(self, color: Color) -> int:
        """Bitboard of all squares occupied by *color*."""
        return self._occupancy[int(color)]

    def pieces(self, color: Color) -> list[Piece]:
        """*color*'s pieces in ascending square order."""
        squares = self._squares_from_bitboard(self._occupancy[int(color)])
        return [p for p in (self._squares[sq] for sq in squares) if p is not None]

    def all_pieces(self) -> list[Piece]:
        return [p for p in self._squares if p is not None]

    def count(self, color: Color, *, kings_only: bool = False) -> int:
        if not kings_only:
            return self._occupancy[int(color)].bit_count()
        return sum(1 for p in self.pieces(color) if p.king)

    def color_of(self, player: Player) -> Color:
        """Piece color played by *player*."""
        return self.ai_color if player == Player.AI else self.ai_color.opposite

    def available_moves(self, player: Player) -> list[Move]:
        """Moves open to *player* in enumeration order."""
        return MoveGenerator(self).generate_moves(self.color_of(player))

    # -- Mutation -----------------------------------------------------------

    def make_move(self, move: Move, speculative: bool = False) -> None:
        """Apply *move*; only non-speculative moves enter :attr:`history`."""
        piece = self._squares[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {square_name(move.from_sq)}")

        self[move.from_sq] = None
        if move.captured is not None:
            self[move.captured.square] = None

        crown = row_of(move.to_sq) == _CROWN_ROW[piece.color]
        self[move.to_sq] = piece.moved_to(move.to_sq, crown=crown)

        if not speculative:
            self.history.append(move)

    def snapshot_pieces(self) -> PieceSnapshot:
        """All pieces in square order; equal snapshots mean equal positions."""
        return tuple(self.all_pieces())

    def restore_pieces(self, snapshot: PieceSnapshot) -> None:
        """Clear the board and refill it from *snapshot*."""
        self.clear()
        self.fill_with_pieces(snapshot)

    def fill_with_pieces(self, pieces: Iterable[Piece]) -> None:
        for piece in pieces:
            if self._squares[piece.square] is not None:
                raise ValueError(f"Square {square_name(piece.square)} is occupied")
            self[piece.square] = piece

    def reconcile(self, sq: Square) -> None:
        """Rebuild the occupancy marker of *sq* from the cell contents."""
        mask = 1 << sq
        for idx in range(_COLOR_COUNT):
            self._occupancy[idx] &= ~mask
        piece = self._squares[sq]
        if piece is not None:
            self._occupancy[int(piece.color)] |= mask

    def clear(self) -> None:
        self._squares = [None] * 64
        self._occupancy = [0] * _COLOR_COUNT

    def copy(self) -> Board:
        b = Board(ai_color=self.ai_color)
        b._squares = self._squares.copy()
        b._occupancy = self._occupancy.copy()
        b.history = self.history.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, ai_color: Color = Color.DARK) -> Board:
        """Standard 12-vs-12 starting position, dark at the top."""
        b = cls(ai_color=ai_color)
        for row in range(BOARD_SIZE):
            if 3 <= row <= 4:
                continue
            color = Color.DARK if row < 3 else Color.LIGHT
            for col in range((row + 1) % 2, BOARD_SIZE, 2):
                sq = make_square(row, col)
                b[sq] = Piece(color, sq)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[make_square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
