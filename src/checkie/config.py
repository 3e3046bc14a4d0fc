"""Application settings."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from checkie.core.enums import Color

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Engine
    difficulty: int = 3  # 0 = random moves, otherwise search depth
    ai_color: Color = Color.DARK
    seed: int | None = None
    verify_restore: bool = False
    threaded: bool = False  # search on a Qt worker thread

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.difficulty < 0:
            raise ValueError("Difficulty must be >= 0")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> AppSettings:
        defaults = cls()
        ai_color = getattr(args, "ai_color", None)
        return cls(
            difficulty=getattr(args, "difficulty", defaults.difficulty),
            ai_color=Color[ai_color.upper()] if ai_color else defaults.ai_color,
            seed=getattr(args, "seed", defaults.seed),
            verify_restore=getattr(args, "verify_restore", defaults.verify_restore),
            threaded=getattr(args, "threaded", defaults.threaded),
            log_level=getattr(args, "log_level", defaults.log_level),
        )
