"""Tests for the one-ply greedy fallback engine."""

from chesspal.core.board import Board
from chesspal.core.enums import Color, PieceType
from chesspal.core.move_generator import MoveGenerator
from chesspal.core.notation import move_to_algebraic, position_from_fen
from chesspal.core.position import Position
from chesspal.core.types import A1, B1, D2, D5
from chesspal.engine import DEFAULT_CHECK_BONUS, PIECE_VALUES, GreedyEngine, material_score


class TestMaterial:
    def test_piece_values(self) -> None:
        assert PIECE_VALUES[PieceType.PAWN] == 1
        assert PIECE_VALUES[PieceType.KNIGHT] == 3
        assert PIECE_VALUES[PieceType.BISHOP] == 3
        assert PIECE_VALUES[PieceType.ROOK] == 5
        assert PIECE_VALUES[PieceType.QUEEN] == 9
        assert PIECE_VALUES[PieceType.KING] == 100

    def test_initial_material_is_even(self) -> None:
        assert material_score(Board.initial(), Color.WHITE) == 0
        assert material_score(Board.initial(), Color.BLACK) == 0

    def test_material_is_relative_to_color(self) -> None:
        board = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w").board
        assert material_score(board, Color.WHITE) == 5
        assert material_score(board, Color.BLACK) == -5


class TestEvaluate:
    def test_check_bonus_applied(self) -> None:
        board = position_from_fen("R6k/8/8/8/8/8/8/4K3 b").board
        assert GreedyEngine().evaluate(board, Color.WHITE) == 5 + DEFAULT_CHECK_BONUS

    def test_no_bonus_without_check(self) -> None:
        board = position_from_fen("7k/8/8/8/8/8/8/R3K3 b").board
        assert GreedyEngine().evaluate(board, Color.WHITE) == 5

    def test_custom_bonus(self) -> None:
        board = position_from_fen("R6k/8/8/8/8/8/8/4K3 b").board
        assert GreedyEngine(check_bonus=10).evaluate(board, Color.WHITE) == 15


class TestGreedySearch:
    def test_takes_the_queen(self) -> None:
        pos = position_from_fen("4k3/8/8/3q4/8/8/3Q4/4K3 w")
        result = GreedyEngine().search(pos)
        assert result.best_move is not None
        assert (result.best_move.from_sq, result.best_move.to_sq) == (D2, D5)
        assert move_to_algebraic(result.best_move) == "Qxd5"
        assert result.score == 9

    def test_prefers_check(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/R3K3 w")
        result = GreedyEngine().search(pos)
        assert result.best_move is not None
        assert move_to_algebraic(result.best_move) == "Ra8"
        assert result.score == 10

    def test_ties_resolve_to_first_move(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/R3K3 w")
        result = GreedyEngine(check_bonus=0).search(pos)
        assert result.best_move is not None
        assert (result.best_move.from_sq, result.best_move.to_sq) == (A1, B1)
        assert result.score == 5

    def test_start_position_picks_first_legal_move(self) -> None:
        pos = Position.initial()
        result = GreedyEngine().search(pos)
        first = MoveGenerator(pos.board).all_legal_moves(Color.WHITE)[0]
        assert result.best_move == first
        assert result.score == 0
        assert result.nodes == 20

    def test_no_legal_moves(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b")
        result = GreedyEngine().search(pos)
        assert result.best_move is None
        assert result.score == 0
        assert result.nodes == 0

    def test_result_is_always_legal(self) -> None:
        pos = position_from_fen("r3k2r/1pp2ppp/p1n5/3qp3/8/2N2N2/PPP2PPP/R2QK2R b")
        result = GreedyEngine().search(pos)
        legal = MoveGenerator(pos.board).all_legal_moves(Color.BLACK)
        assert result.best_move in legal

    def test_search_does_not_mutate_position(self) -> None:
        pos = position_from_fen("4k3/8/8/3q4/8/8/3Q4/4K3 w")
        snapshot = pos.board.copy()
        GreedyEngine().search(pos)
        assert pos.board == snapshot
