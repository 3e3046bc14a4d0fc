"""Tests for the alpha-beta search and AI move selection."""

import random
from dataclasses import replace

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color, Player
from checkie.core.move import Move
from checkie.core.notation import board_from_diagram, board_to_diagram
from checkie.core.piece import Piece
from checkie.core.types import parse_square
from checkie.engine import (
    MAX_SCORE,
    MIN_SCORE,
    AIController,
    AlphaBetaSearch,
    BoardStateError,
    MaterialEvaluator,
    NoLegalMoveError,
    ScoredMove,
    SearchCounters,
    attempt,
)

MIDGAME = """
.d.d.d.d
d.d.d...
.d...d.d
..d.l...
...l....
l.l...l.
.l.l.l.l
l.l.l.l.
"""

KINGS = """
........
..D.....
.....l..
........
...L....
..d.....
........
l.......
"""

# Dark (AI) on d6 can jump c5 or step to e5; light has spare men on a1 and c1.
DOMINANT = """
........
........
...d....
..l.....
........
........
........
l.l.....
"""

# Each side has a single man with a single move.
LONE_MEN = """
........
d.......
........
........
........
........
........
l.......
"""

# Dark alone on the board: light never has a move.
DARK_ONLY = """
........
d.......
........
........
........
........
........
........
"""

LIGHT_ONLY = """
........
........
........
........
........
........
........
l.l.....
"""


def _reference_minimax(
    board: Board,
    max_depth: int,
    depth: int = 0,
    player: Player = Player.AI,
) -> int:
    """Plain minimax with no pruning, same leaf rules as the engine."""
    if depth > max_depth:
        return MaterialEvaluator().evaluate(board)
    moves = board.available_moves(player)
    if not moves:
        return 0
    scores = []
    for move in moves:
        snapshot = board.snapshot_pieces()
        board.make_move(move, speculative=True)
        scores.append(_reference_minimax(board, max_depth, depth + 1, player.opponent))
        board.restore_pieces(snapshot)
    return max(scores) if player == Player.AI else min(scores)


class _CountingEvaluator(MaterialEvaluator):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def evaluate(self, board: Board) -> int:
        self.calls += 1
        return super().evaluate(board)


class _ConstantEvaluator:
    def __init__(self, score: int) -> None:
        self.score = score

    def evaluate(self, board: Board) -> int:
        return self.score


class _LeakyBoard(Board):
    """Board whose restore silently loses a piece."""

    __slots__ = ()

    def restore_pieces(self, snapshot):
        super().restore_pieces(snapshot[:-1])


class TestAlphaBetaSearch:
    @pytest.mark.parametrize("diagram", [None, MIDGAME, KINGS])
    @pytest.mark.parametrize("max_depth", [0, 1, 2, 3])
    def test_matches_unpruned_minimax(self, diagram: str | None, max_depth: int) -> None:
        board = Board.initial() if diagram is None else board_from_diagram(diagram)
        expected = _reference_minimax(board.copy(), max_depth)

        search = AlphaBetaSearch(board, MaterialEvaluator(), max_depth)
        assert search.search(0, Player.AI, MIN_SCORE, MAX_SCORE) == expected

    @pytest.mark.parametrize("max_depth", [0, 1, 2])
    def test_matches_unpruned_minimax_for_minimizer(self, max_depth: int) -> None:
        board = board_from_diagram(MIDGAME)
        expected = _reference_minimax(board.copy(), max_depth, player=Player.HUMAN)

        search = AlphaBetaSearch(board, MaterialEvaluator(), max_depth)
        assert search.search(0, Player.HUMAN, MIN_SCORE, MAX_SCORE) == expected

    @pytest.mark.parametrize("diagram", [None, MIDGAME, KINGS])
    def test_board_restored_after_search(self, diagram: str | None) -> None:
        board = Board.initial() if diagram is None else board_from_diagram(diagram)
        before = board_to_diagram(board)
        occupancy = (
            board.occupancy_bitboard(Color.LIGHT),
            board.occupancy_bitboard(Color.DARK),
        )

        AlphaBetaSearch(board, MaterialEvaluator(), 3, verify_restore=True).run()

        assert board_to_diagram(board) == before
        assert occupancy == (
            board.occupancy_bitboard(Color.LIGHT),
            board.occupancy_bitboard(Color.DARK),
        )
        assert board.history == []

    def test_one_scored_move_per_root_move(self, start_board: Board) -> None:
        root_moves = start_board.available_moves(Player.AI)
        scored = AlphaBetaSearch(start_board, MaterialEvaluator(), 2).run()

        assert [entry.move for entry in scored] == root_moves

    def test_root_scores_every_move_at_upper_bound(self, start_board: Board) -> None:
        root_moves = start_board.available_moves(Player.AI)
        search = AlphaBetaSearch(start_board, _ConstantEvaluator(MAX_SCORE), 1)
        scored = search.run()

        assert [entry.move for entry in scored] == root_moves
        assert {entry.score for entry in scored} == {MAX_SCORE}
        assert search.counters.prunings == len(root_moves) - 1

    def test_no_pruning_when_window_never_closes(self) -> None:
        search = AlphaBetaSearch(board_from_diagram(LONE_MEN), MaterialEvaluator(), 1)
        scored = search.run()

        assert search.counters == SearchCounters(
            static_evaluations=1,
            dynamic_evaluations=2,
            prunings=0,
        )
        assert scored == [ScoredMove(Move(parse_square("a7"), parse_square("b6")), 0)]

    def test_prunes_behind_dominant_move(self) -> None:
        search = AlphaBetaSearch(board_from_diagram(DOMINANT), MaterialEvaluator(), 1)
        scored = search.run()

        assert [entry.score for entry in scored] == [-1, -2]
        assert search.counters.prunings == 1
        assert search.counters.dynamic_evaluations == 6
        assert search.counters.static_evaluations == 4

    def test_prunes_from_start_position(self, start_board: Board) -> None:
        search = AlphaBetaSearch(start_board, MaterialEvaluator(), 2)
        search.run()
        assert search.counters.prunings > 0

    def test_side_without_moves_scores_zero(self) -> None:
        search = AlphaBetaSearch(board_from_diagram(DARK_ONLY), MaterialEvaluator(), 1)
        scored = search.run()

        assert [entry.score for entry in scored] == [0]
        assert search.counters.static_evaluations == 1

    def test_static_count_matches_evaluator_calls(self, start_board: Board) -> None:
        evaluator = _CountingEvaluator()
        search = AlphaBetaSearch(start_board, evaluator, 2)
        search.run()

        assert evaluator.calls == search.counters.static_evaluations

    def test_counters_reset_between_runs(self, start_board: Board) -> None:
        search = AlphaBetaSearch(start_board, MaterialEvaluator(), 2)
        search.run()
        first = replace(search.counters)
        search.run()

        assert search.counters == first

    def test_negative_depth_rejected(self, start_board: Board) -> None:
        with pytest.raises(ValueError):
            AlphaBetaSearch(start_board, MaterialEvaluator(), -1)

    def test_verify_restore_detects_leak(self) -> None:
        board = _LeakyBoard(Board.initial().all_pieces())
        search = AlphaBetaSearch(board, MaterialEvaluator(), 1, verify_restore=True)

        with pytest.raises(BoardStateError):
            search.run()


class TestAttempt:
    def test_restores_on_exception(self, capture_board: Board) -> None:
        before = capture_board.snapshot_pieces()
        capture = capture_board.available_moves(Player.AI)[1]

        with pytest.raises(RuntimeError, match="boom"):
            with attempt(capture_board, capture):
                assert capture_board.is_empty(parse_square("e5"))
                raise RuntimeError("boom")

        assert capture_board.snapshot_pieces() == before
        assert not capture_board.is_empty(parse_square("e5"))

    def test_move_is_visible_inside_block(self, start_board: Board) -> None:
        move = start_board.available_moves(Player.AI)[0]
        with attempt(start_board, move):
            assert start_board[move.to_sq] is not None
            assert start_board.history == []
        assert start_board[move.to_sq] is None


class TestAIController:
    def test_depth_one_prefers_capture(self, capture_board: Board) -> None:
        ai = AIController(capture_board)
        move = ai.get_move(1)

        assert move == Move(
            parse_square("d6"),
            parse_square("f4"),
            captured=Piece(Color.LIGHT, parse_square("e5")),
        )
        assert ai.last_result is not None
        assert ai.last_result.score == 0
        assert [e.score for e in ai.last_result.scored_moves] == [-1, 0]

    def test_dominant_move_selected(self) -> None:
        ai = AIController(board_from_diagram(DOMINANT))
        move = ai.get_move(1)

        assert move.is_capture
        assert ai.counters.prunings == 1

    def test_first_of_equal_scores_wins(self, start_board: Board) -> None:
        ai = AIController(start_board)
        move = ai.get_move(1)

        # Nothing can be captured within two plies, so every move ties at 0.
        assert move == start_board.available_moves(Player.AI)[0]

    def test_search_leaves_board_untouched(self, start_board: Board) -> None:
        before = board_to_diagram(start_board)
        AIController(start_board, verify_restore=True).get_move(3)
        assert board_to_diagram(start_board) == before

    def test_repeated_search_is_idempotent(self) -> None:
        ai = AIController(board_from_diagram(MIDGAME))

        first_move = ai.get_move(3)
        first_counters = ai.counters
        second_move = ai.get_move(3)

        assert first_move == second_move
        assert first_counters == ai.counters
        assert first_counters is not ai.counters

    def test_no_root_move_raises(self) -> None:
        board = board_from_diagram(LIGHT_ONLY)
        ai = AIController(board)

        with pytest.raises(NoLegalMoveError):
            ai.get_move(2)
        assert ai.last_result is None

    def test_random_with_no_move_raises(self) -> None:
        ai = AIController(board_from_diagram(LIGHT_ONLY))
        with pytest.raises(NoLegalMoveError):
            ai.get_move(0)

    def test_negative_difficulty_rejected(self, start_board: Board) -> None:
        with pytest.raises(ValueError):
            AIController(start_board).get_move(-1)

    def test_single_move_always_picked_at_random(self) -> None:
        ai = AIController(board_from_diagram(LONE_MEN))
        expected = Move(parse_square("a7"), parse_square("b6"))

        for _ in range(100):
            assert ai.get_move(0) == expected

    def test_random_move_spreads_over_choices(self, start_board: Board) -> None:
        ai = AIController(start_board, rng=random.Random(1234))
        legal = start_board.available_moves(Player.AI)

        picks = {ai.get_move(0) for _ in range(60)}

        assert picks <= set(legal)
        assert len(picks) > 1

    def test_random_move_resets_counters(self, start_board: Board) -> None:
        ai = AIController(start_board)
        ai.get_move(2)
        ai.get_move(0)

        assert ai.counters == SearchCounters()
        assert ai.last_result is None

    def test_ai_playing_light(self) -> None:
        board = Board.initial(ai_color=Color.LIGHT)
        move = AIController(board).get_move(1)

        piece = board[move.from_sq]
        assert piece is not None and piece.color == Color.LIGHT
