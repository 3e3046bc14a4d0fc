"""Console entry point: play checkers against the AI in a terminal."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from checkie.config import LOG_LEVELS, AppSettings
from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.notation import parse_move_squares
from checkie.game.controller import GameController
from checkie.game.interfaces import GamePhase
from checkie.game.player import AIPlayer, HumanPlayer

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.engine.qt_bridge import EngineThread

_LOGGER = logging.getLogger(__name__)
_QUIT_WORDS = frozenset({"q", "quit", "resign"})
_QT_APP: object | None = None  # owned here when no Qt application exists yet


def _difficulty(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="checkie",
        description="Play checkers against a minimax AI.",
    )
    parser.add_argument(
        "-d",
        "--difficulty",
        type=_difficulty,
        default=defaults.difficulty,
        help="search depth; 0 plays random moves (default: %(default)s)",
    )
    parser.add_argument(
        "--ai-color",
        choices=[str(c) for c in Color],
        default=str(defaults.ai_color),
        help="color played by the AI; dark moves first (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for random play")
    parser.add_argument(
        "--verify-restore",
        action="store_true",
        help="check every speculative move is fully rolled back",
    )
    parser.add_argument(
        "--threaded",
        action="store_true",
        help="search on a Qt worker thread instead of the console thread",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=defaults.log_level,
        type=str.upper,
    )
    return parser


def play(
    settings: AppSettings,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
) -> GameResult:
    """Run one game on the console and return its result."""
    read = read or input
    ai = AIPlayer(
        settings.ai_color,
        settings.difficulty,
        rng=random.Random(settings.seed),
        verify_restore=settings.verify_restore,
    )
    human = HumanPlayer(settings.ai_color.opposite, "You")
    light, dark = (ai, human) if settings.ai_color == Color.LIGHT else (human, ai)

    ctrl = GameController()

    def announce(move: Move, mover: Color) -> None:
        if mover == ai.color:
            write(f"{ai.name} plays {move}")

    ctrl.events.on_move.append(announce)

    engine_thread = _start_engine_thread(ai, write) if settings.threaded else None
    try:
        ctrl.new_game(light, dark, board=Board.initial(ai_color=settings.ai_color))
        while not ctrl.is_game_over:
            if ctrl.phase == GamePhase.THINKING:
                if engine_thread is None or not engine_thread.pending:
                    ctrl.resign(ai.color)
                    break
                engine_thread.wait_for_move()
                continue

            write(repr(ctrl.board))
            try:
                text = read(f"Your move as {human.color} (e.g. c3-d4, 'quit'): ")
            except EOFError:
                text = "quit"
            if text.strip().lower() in _QUIT_WORDS:
                ctrl.resign(human.color)
                break

            try:
                from_sq, to_sq = parse_move_squares(text)
            except ValueError as exc:
                write(str(exc))
                continue
            move = ctrl.find_move(from_sq, to_sq)
            if move is None or not ctrl.submit_move(move):
                write(f"Illegal move: {text.strip()}")
    finally:
        if engine_thread is not None:
            engine_thread.shutdown()

    write(repr(ctrl.board))
    write(f"Result: {ctrl.result.name.replace('_', ' ').lower()}")
    return ctrl.result


def _start_engine_thread(ai: AIPlayer, write: Callable[[str], None]) -> EngineThread:
    global _QT_APP
    from PyQt6.QtCore import QCoreApplication

    from checkie.engine.qt_bridge import EngineThread

    if QCoreApplication.instance() is None:
        _QT_APP = QCoreApplication(sys.argv[:1])
    engine_thread = EngineThread(ai)
    engine_thread.failed.connect(lambda message: write(f"Engine failed: {message}"))
    return engine_thread


def main(argv: Sequence[str] | None = None) -> int:
    """Launch a console game."""
    args = build_parser().parse_args(argv)
    settings = AppSettings.from_args(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Settings: %s", settings)
    play(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
