"""Tests for MoveGenerator: piece movement, legality filter, attacks."""

import pytest

from chesspal.core.board import Board
from chesspal.core.enums import Color, PieceType
from chesspal.core.move_generator import MoveGenerator
from chesspal.core.notation import position_from_fen
from chesspal.core.piece import Piece
from chesspal.core.position import Position
from chesspal.core.rules import Rules
from chesspal.core.types import (
    A1, A2, B2, B3, C3, C4, D1, D2, D3, D4, D5, D6, D7, D8,
    E1, E2, E3, E4, E5, E7, E8, F1, F2, F4, G4, H4, H8, A4, B4,
    Square,
)


def _board(*placements: tuple[Square, Color, PieceType]) -> Board:
    board = Board()
    for sq, color, pt in placements:
        board[sq] = Piece(color, pt)
    return board


def _perft(position: Position, depth: int) -> int:
    if depth == 0:
        return 1
    moves = Rules.legal_moves(position)
    if depth == 1:
        return len(moves)
    return sum(_perft(position.apply(m), depth - 1) for m in moves)


class TestInitialPosition:
    def test_twenty_moves_each_side(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert len(gen.all_legal_moves(Color.WHITE)) == 20
        assert len(gen.all_legal_moves(Color.BLACK)) == 20

    def test_sixteen_pawn_and_four_knight_moves(self) -> None:
        moves = MoveGenerator(Board.initial()).all_legal_moves(Color.WHITE)
        kinds = [m.piece.piece_type for m in moves]
        assert kinds.count(PieceType.PAWN) == 16
        assert kinds.count(PieceType.KNIGHT) == 4

    def test_scan_order(self) -> None:
        moves = MoveGenerator(Board.initial()).all_legal_moves(Color.WHITE)
        # rank 6 (white pawns) is scanned before rank 7 (white pieces)
        assert moves[0].from_sq == A2
        assert moves[-1].piece.piece_type == PieceType.KNIGHT

    def test_pawn_forward_before_double_step(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(E2) == [E3, E4]

    def test_blocked_piece_has_no_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(D1) == []
        assert gen.legal_moves(A1) == []

    def test_empty_square_has_no_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(E4) == []
        assert gen.pseudo_legal_moves(E4) == []


class TestPieceMovement:
    def test_rook_order_on_empty_board(self) -> None:
        gen = MoveGenerator(_board((D4, Color.WHITE, PieceType.ROOK)))
        assert gen.legal_moves(D4) == [
            E4, F4, G4, H4, C4, B4, A4, D3, D2, D1, D5, D6, D7, D8,
        ]

    @pytest.mark.parametrize(
        ("sq", "pt", "expected"),
        [
            (D4, PieceType.QUEEN, 27),
            (D4, PieceType.ROOK, 14),
            (D4, PieceType.BISHOP, 13),
            (D4, PieceType.KNIGHT, 8),
            (A1, PieceType.KNIGHT, 2),
            (A1, PieceType.KING, 3),
        ],
    )
    def test_counts_on_empty_board(self, sq: Square, pt: PieceType, expected: int) -> None:
        gen = MoveGenerator(_board((sq, Color.WHITE, pt)))
        assert len(gen.legal_moves(sq)) == expected

    def test_slider_stops_at_own_piece(self) -> None:
        board = _board(
            (D4, Color.WHITE, PieceType.ROOK),
            (F4, Color.WHITE, PieceType.PAWN),
        )
        moves = MoveGenerator(board).legal_moves(D4)
        assert E4 in moves
        assert F4 not in moves and G4 not in moves

    def test_slider_captures_enemy_and_stops(self) -> None:
        board = _board(
            (D4, Color.WHITE, PieceType.ROOK),
            (F4, Color.BLACK, PieceType.PAWN),
        )
        moves = MoveGenerator(board).legal_moves(D4)
        assert F4 in moves
        assert G4 not in moves

    def test_black_pawn_moves_down(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(E7) == [Square(2, 4), E5]

    def test_pawn_double_step_needs_both_squares_empty(self) -> None:
        board = _board(
            (E2, Color.WHITE, PieceType.PAWN),
            (E4, Color.BLACK, PieceType.KNIGHT),
        )
        assert MoveGenerator(board).legal_moves(E2) == [E3]

    def test_pawn_blocked_in_front(self) -> None:
        board = _board(
            (E2, Color.WHITE, PieceType.PAWN),
            (E3, Color.BLACK, PieceType.KNIGHT),
        )
        assert MoveGenerator(board).legal_moves(E2) == []

    def test_pawn_no_double_step_off_start_rank(self) -> None:
        board = _board((E3, Color.WHITE, PieceType.PAWN))
        assert MoveGenerator(board).legal_moves(E3) == [E4]

    def test_pawn_captures_diagonally_only_onto_enemies(self) -> None:
        board = _board(
            (B2, Color.WHITE, PieceType.PAWN),
            (C3, Color.BLACK, PieceType.KNIGHT),
            (Square(5, 0), Color.WHITE, PieceType.KNIGHT),  # a3, own piece
        )
        assert MoveGenerator(board).legal_moves(B2) == [B3, B4, C3]

    def test_pawn_on_last_rank_has_no_moves(self) -> None:
        board = _board((E8, Color.WHITE, PieceType.PAWN))
        assert MoveGenerator(board).legal_moves(E8) == []


class TestLegality:
    def test_pinned_knight_cannot_move(self) -> None:
        board = _board(
            (E1, Color.WHITE, PieceType.KING),
            (E2, Color.WHITE, PieceType.KNIGHT),
            (E8, Color.BLACK, PieceType.QUEEN),
            (C3, Color.BLACK, PieceType.KING),
        )
        gen = MoveGenerator(board)
        assert gen.is_in_check(Color.BLACK)
        assert gen.pseudo_legal_moves(E2)
        assert gen.legal_moves(E2) == []

    def test_king_avoids_attacked_file(self) -> None:
        board = _board(
            (E1, Color.WHITE, PieceType.KING),
            (D8, Color.BLACK, PieceType.ROOK),
            (H8, Color.BLACK, PieceType.KING),
        )
        assert set(MoveGenerator(board).legal_moves(E1)) == {F1, E2, F2}

    def test_king_cannot_step_onto_pawn_diagonal(self) -> None:
        board = _board(
            (E1, Color.WHITE, PieceType.KING),
            (E3, Color.BLACK, PieceType.PAWN),
            (H8, Color.BLACK, PieceType.KING),
        )
        moves = MoveGenerator(board).legal_moves(E1)
        assert D2 not in moves and F2 not in moves
        assert E2 in moves

    def test_legal_is_subset_of_pseudo_legal(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/4N3/r3K3 w")
        gen = MoveGenerator(pos.board)
        for sq in pos.board.all_pieces(Color.WHITE):
            assert set(gen.legal_moves(sq)) <= set(gen.pseudo_legal_moves(sq))

    def test_check_must_be_answered(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w")
        gen = MoveGenerator(pos.board)
        for move in gen.all_legal_moves(Color.WHITE):
            after = MoveGenerator(pos.board.apply_move(move.from_sq, move.to_sq))
            assert not after.is_in_check(Color.WHITE)

    def test_generation_leaves_board_untouched(self) -> None:
        board = Board.initial()
        MoveGenerator(board).all_legal_moves(Color.WHITE)
        assert board == Board.initial()

    def test_capture_records_captured_piece(self) -> None:
        pos = position_from_fen("4k3/8/8/3q4/8/8/3Q4/4K3 w")
        captures = [m for m in Rules.legal_moves(pos) if m.is_capture]
        assert len(captures) == 1
        assert captures[0].captured == Piece(Color.BLACK, PieceType.QUEEN)


class TestAttacks:
    def test_no_king_is_not_in_check(self) -> None:
        board = _board((D4, Color.BLACK, PieceType.QUEEN))
        assert not MoveGenerator(board).is_in_check(Color.WHITE)

    def test_square_attacked_by_slider(self) -> None:
        board = _board((A1, Color.BLACK, PieceType.ROOK))
        gen = MoveGenerator(board)
        assert gen.is_square_attacked(Square(0, 0), Color.BLACK)
        assert not gen.is_square_attacked(B2, Color.BLACK)

    def test_pawn_attacks_occupied_diagonal(self) -> None:
        board = _board(
            (E2, Color.WHITE, PieceType.PAWN),
            (D3, Color.BLACK, PieceType.KING),
        )
        assert MoveGenerator(board).is_in_check(Color.BLACK)

    def test_pawn_does_not_attack_empty_diagonal(self) -> None:
        board = _board((E2, Color.WHITE, PieceType.PAWN))
        gen = MoveGenerator(board)
        assert not gen.is_square_attacked(D3, Color.WHITE)
        assert gen.is_square_attacked(E3, Color.WHITE)

    def test_initial_position_not_in_check(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert not gen.is_in_check(Color.WHITE)
        assert not gen.is_in_check(Color.BLACK)


class TestPerft:
    @pytest.mark.parametrize(("depth", "expected"), [(1, 20), (2, 400), (3, 8902)])
    def test_initial_position(self, depth: int, expected: int) -> None:
        assert _perft(Position.initial(), depth) == expected

    @pytest.mark.slow
    def test_initial_position_depth_four(self) -> None:
        assert _perft(Position.initial(), 4) == 197281
