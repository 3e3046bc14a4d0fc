"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.piece import Piece
from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single checkers move.

    *captured* holds the jumped piece for a capturing move and is
    ``None`` for a plain step.
    """

    from_sq: Square
    to_sq: Square
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"
