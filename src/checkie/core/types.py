"""Square type alias and coordinate helpers.

Board layout (row-major, row 0 at the top):
    a8=0, b8=1, ..., h8=7
    a7=8, ...
    ...
    a1=56, ..., h1=63

Only squares with ``(row + col) % 2 == 1`` are playable.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

BOARD_SIZE = 8


def row_of(sq: Square) -> int:
    """Row index 0–7, top to bottom."""
    return sq >> 3


def col_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq & 7


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return row * BOARD_SIZE + col


def on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_playable(sq: Square) -> bool:
    """Whether *sq* is one of the 32 dark squares pieces stand on."""
    return (row_of(sq) + col_of(sq)) % 2 == 1


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a8', 63 → 'h1'."""
    return chr(ord("a") + col_of(sq)) + str(BOARD_SIZE - row_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'c3' → 42."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
