"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from checkie.core.enums import Color
from checkie.core.types import Square, col_of, row_of

# Diagram character ↔ (Color, king)
_CHAR_MAP: dict[str, tuple[Color, bool]] = {
    "l": (Color.LIGHT, False),
    "L": (Color.LIGHT, True),
    "d": (Color.DARK, False),
    "D": (Color.DARK, True),
}

_DIAGRAM_CHARS: dict[tuple[Color, bool], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object for a checker standing on *square*.

    Pieces carry their own location, so moving one produces a new value.
    Two pieces compare equal when color, square and rank all match.
    """

    color: Color
    square: Square
    king: bool = False

    @property
    def row(self) -> int:
        return row_of(self.square)

    @property
    def col(self) -> int:
        return col_of(self.square)

    def moved_to(self, square: Square, *, crown: bool = False) -> Piece:
        """Copy of this piece on *square*, crowned if *crown* is set."""
        return replace(self, square=square, king=self.king or crown)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (uppercase = king)."""
        return _DIAGRAM_CHARS[(self.color, self.king)]

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """Create piece from diagram character, e.g. 'D' → dark king."""
        try:
            color, king = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, square, king)
