"""Text diagrams for board positions.

A diagram is eight rows of eight characters, top row first:
``.`` empty, ``d``/``D`` dark man/king, ``l``/``L`` light man/king.
"""

from __future__ import annotations

from collections.abc import Sequence

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.types import (
    BOARD_SIZE,
    Square,
    is_playable,
    make_square,
    parse_square,
    square_name,
)

STARTING_DIAGRAM = """\
.d.d.d.d
d.d.d.d.
.d.d.d.d
........
........
l.l.l.l.
.l.l.l.l
l.l.l.l.
"""


def _split_rows(diagram: str | Sequence[str]) -> list[str]:
    if isinstance(diagram, str):
        return [line.strip() for line in diagram.splitlines() if line.strip()]
    return [row.strip() for row in diagram]


def board_from_diagram(
    diagram: str | Sequence[str],
    ai_color: Color = Color.DARK,
) -> Board:
    """Parse a diagram into a :class:`Board`."""
    rows = _split_rows(diagram)
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Diagram must have {BOARD_SIZE} rows, got {len(rows)}")

    pieces: list[Piece] = []
    for row, line in enumerate(rows):
        if len(line) != BOARD_SIZE:
            raise ValueError(f"Diagram row {row} must have {BOARD_SIZE} cells: {line!r}")
        for col, char in enumerate(line):
            if char == ".":
                continue
            sq = make_square(row, col)
            if not is_playable(sq):
                raise ValueError(f"Piece on unplayable square {square_name(sq)}")
            pieces.append(Piece.from_char(char, sq))

    return Board(pieces, ai_color=ai_color)


def board_to_diagram(board: Board) -> str:
    """Render *board* as a diagram (one trailing newline)."""
    lines: list[str] = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board[make_square(row, col)]
            cells.append(str(piece) if piece is not None else ".")
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"


def parse_move_squares(text: str) -> tuple[Square, Square]:
    """Parse ``"c3-d4"``, ``"c3xe5"`` or ``"c3 d4"`` into two squares."""
    cleaned = text.strip().lower().replace("x", "-").replace(" ", "-")
    parts = [p for p in cleaned.split("-") if p]
    if len(parts) != 2:
        raise ValueError(f"Invalid move text: {text!r}")
    return parse_square(parts[0]), parse_square(parts[1])
