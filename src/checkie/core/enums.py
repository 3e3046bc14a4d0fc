"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Piece color."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Player(IntEnum):
    """Search role: the AI maximizes, the human minimizes."""

    AI = 0
    HUMAN = 1

    @property
    def opponent(self) -> Player:
        return Player(1 - self.value)


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    LIGHT_WINS = 1
    DARK_WINS = 2

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.LIGHT_WINS if color == Color.LIGHT else cls.DARK_WINS
