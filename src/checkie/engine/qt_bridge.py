"""Qt bridge to run move selection in a worker thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QEventLoop, QObject, QThread, pyqtSignal, pyqtSlot

from checkie.core.board import Board
from checkie.engine.controller import AIController
from checkie.engine.search import NoLegalMoveError

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.game.interfaces import MoveSubmitter
    from checkie.game.player import AIPlayer

_LOGGER = logging.getLogger(__name__)

ControllerFactory = Callable[[Board], AIController]


class EngineWorker(QObject):
    """Thread-affine worker that computes AI moves on demand.

    Each request searches a private copy of the board, so the board
    owned by the UI thread is never mutated from the worker thread.
    """

    best_move_ready = pyqtSignal(int, object, int, object)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_difficulty", "_controller_factory")

    def __init__(
        self,
        *,
        difficulty: int = 3,
        verify_restore: bool = False,
        controller_factory: ControllerFactory | None = None,
    ) -> None:
        super().__init__()
        if difficulty < 0:
            raise ValueError("Difficulty must be >= 0")
        self._difficulty = difficulty
        self._controller_factory = controller_factory or (
            lambda board: AIController(board, verify_restore=verify_restore)
        )

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @pyqtSlot(object, int)
    def request_move(self, board_obj: object, request_id: int) -> None:
        """Pick a move for the AI on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        controller = self._controller_factory(board_obj.copy())
        try:
            move = controller.get_move(self._difficulty)
        except NoLegalMoveError:
            self.search_no_move.emit(request_id)
            return
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        result = controller.last_result
        score = result.score if result is not None else 0
        self.best_move_ready.emit(request_id, move, score, controller.counters)

    @pyqtSlot(int)
    def set_difficulty(self, difficulty: int) -> None:
        """Update difficulty for the next request; negative values are ignored."""
        if difficulty < 0:
            _LOGGER.warning(
                "Ignoring difficulty %d, keeping %d", difficulty, self._difficulty
            )
            return
        self._difficulty = difficulty


class EngineThread(QObject):
    """Serves an :class:`AIPlayer`'s requests from an :class:`EngineWorker` on a QThread.

    Installed as the player's dispatcher, it forwards each request with a
    fresh id and submits the answer on this object's thread once the
    worker reports back. Answers to cancelled or superseded requests are
    dropped. :meth:`shutdown` must be called before the object goes away.
    """

    settled = pyqtSignal()
    failed = pyqtSignal(str)

    _search_requested = pyqtSignal(object, int)
    _difficulty_changed = pyqtSignal(int)

    __slots__ = ("_player", "_thread", "_worker", "_request_id", "_submit")

    def __init__(self, player: AIPlayer, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._player = player
        self._request_id = 0
        self._submit: MoveSubmitter | None = None

        self._thread = QThread()
        self._worker = EngineWorker(
            difficulty=player.difficulty,
            controller_factory=player.make_controller,
        )
        self._worker.moveToThread(self._thread)

        self._search_requested.connect(self._worker.request_move)
        self._difficulty_changed.connect(self._worker.set_difficulty)
        self._worker.best_move_ready.connect(self._on_best_move)
        self._worker.search_no_move.connect(self._on_no_move)
        self._worker.search_error.connect(self._on_error)

        self._thread.start()
        player.set_dispatcher(self)

    @property
    def pending(self) -> bool:
        return self._submit is not None

    def dispatch(self, board: Board, submit: MoveSubmitter) -> None:
        self._request_id += 1
        self._submit = submit
        self._difficulty_changed.emit(self._player.difficulty)
        self._search_requested.emit(board.copy(), self._request_id)

    def cancel(self) -> None:
        self._request_id += 1
        self._submit = None

    def wait_for_move(self) -> None:
        """Run a local event loop until the pending request is settled."""
        if self._submit is None:
            return
        loop = QEventLoop()
        self.settled.connect(loop.quit)
        try:
            loop.exec()
        finally:
            self.settled.disconnect(loop.quit)

    def shutdown(self) -> None:
        self.cancel()
        self._player.set_dispatcher(None)
        self._thread.quit()
        self._thread.wait()

    # ── Worker signals ───────────────────────────────────────────────────

    @pyqtSlot(int, object, int, object)
    def _on_best_move(self, request_id: int, move: Move, score: int, counters: object) -> None:
        if request_id != self._request_id or self._submit is None:
            return
        submit, self._submit = self._submit, None
        _LOGGER.debug("Engine answered request %d with %s (score %d)", request_id, move, score)
        if not submit(move):
            _LOGGER.error("Game rejected engine move %s", move)
        self.settled.emit()

    @pyqtSlot(int)
    def _on_no_move(self, request_id: int) -> None:
        self._fail(request_id, "AI has no legal move")

    @pyqtSlot(int, str)
    def _on_error(self, request_id: int, message: str) -> None:
        self._fail(request_id, message)

    def _fail(self, request_id: int, message: str) -> None:
        if request_id != self._request_id or self._submit is None:
            return
        self._submit = None
        _LOGGER.error("Engine request %d failed: %s", request_id, message)
        self.failed.emit(message)
        self.settled.emit()
