"""GameController — the central orchestrator of a checkers game.

Coordinates: Players, Board, MoveGenerator.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.types import Square
from checkie.game.interfaces import GamePhase, IGameController, IPlayer

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Color], None]  # move, mover
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full checkers game: validates moves, switches turns,
    detects the end of the game and notifies listeners.

    Dark moves first. A side left without a move on its turn loses.

    Thread-safety: methods are designed to be called from a single thread.
    Players answer through the ``submit`` callable given to
    ``request_move``, on that thread. An answer given before
    ``request_move`` returns is fine; the next prompt is then issued by
    the outer prompt loop instead of nesting one call per turn.
    """

    __slots__ = (
        "_board",
        "_players",
        "_side_to_move",
        "_phase",
        "_result",
        "_prompting",
        "_reprompt",
        "events",
    )

    def __init__(self) -> None:
        self._board = Board.initial()
        self._players: dict[Color, IPlayer] = {}
        self._side_to_move = Color.DARK
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._prompting = False
        self._reprompt = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._result != GameResult.IN_PROGRESS

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._side_to_move)

    def legal_moves(self) -> list[Move]:
        return MoveGenerator(self._board).generate_moves(self._side_to_move)

    def find_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The legal move between two squares, if any."""
        for move in self.legal_moves():
            if move.from_sq == from_sq and move.to_sq == to_sq:
                return move
        return None

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, light: IPlayer, dark: IPlayer, board: Board | None = None) -> None:
        if light.color != Color.LIGHT or dark.color != Color.DARK:
            raise ValueError("Players must be given as (light, dark)")
        self._players = {Color.LIGHT: light, Color.DARK: dark}

        if board is None:
            ai_color = Color.LIGHT if not light.is_human and dark.is_human else Color.DARK
            board = Board.initial(ai_color=ai_color)
        self._board = board
        self._side_to_move = Color.DARK
        self._result = GameResult.IN_PROGRESS
        _LOGGER.info("New game: %s (light) vs %s (dark)", light.name, dark.name)

        self._set_phase(GamePhase.AWAITING_MOVE)
        if not self.legal_moves():
            self._finish(GameResult.win_for(self._side_to_move.opposite))
            return
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self.is_game_over:
            return False
        if self._phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False
        if move not in self.legal_moves():
            _LOGGER.debug("Rejected illegal move %s for %s", move, self._side_to_move)
            return False

        mover = self._side_to_move
        self._board.make_move(move)
        _LOGGER.info("%s plays %s", mover, move)
        self._side_to_move = mover.opposite
        self._emit_move(move, mover)

        if not self.legal_moves():
            self._finish(GameResult.win_for(mover))
            return True

        self._prompt_current_player()
        return True

    def resign(self, color: Color) -> None:
        if self.is_game_over:
            return
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()
        _LOGGER.info("%s resigns", color)
        self._finish(GameResult.win_for(color.opposite))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the side to move for a move until someone has to wait."""
        if self._prompting:
            self._reprompt = True
            return

        self._prompting = True
        try:
            self._reprompt = True
            while self._reprompt and not self.is_game_over:
                self._reprompt = False
                cp = self.current_player
                if cp is None:
                    return
                if cp.is_human:
                    self._set_phase(GamePhase.AWAITING_MOVE)
                    return
                self._set_phase(GamePhase.THINKING)
                cp.request_move(self._board, self.submit_move)
        finally:
            self._prompting = False

    def _finish(self, result: GameResult) -> None:
        self._result = result
        _LOGGER.info("Game over: %s", result.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_move(self, move: Move, mover: Color) -> None:
        for cb in self.events.on_move:
            cb(move, mover)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
