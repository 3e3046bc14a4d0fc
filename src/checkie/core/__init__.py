"""Core domain layer: pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Player

    board = Board.initial()
    for move in board.available_moves(Player.AI):
        print(move)
"""

from checkie.core.board import Board, PieceSnapshot
from checkie.core.enums import Color, GameResult, Player
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import (
    STARTING_DIAGRAM,
    board_from_diagram,
    board_to_diagram,
    parse_move_squares,
)
from checkie.core.piece import Piece
from checkie.core.types import (
    Square,
    col_of,
    is_playable,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "Player",
    # Types / helpers
    "Square",
    "col_of",
    "is_playable",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "PieceSnapshot",
    # Notation
    "STARTING_DIAGRAM",
    "board_from_diagram",
    "board_to_diagram",
    "parse_move_squares",
]
