"""Tests for Position."""

import dataclasses

import pytest

from chesspal.core.board import Board
from chesspal.core.enums import Color, PieceType
from chesspal.core.move import Move
from chesspal.core.piece import Piece
from chesspal.core.position import Position
from chesspal.core.types import E2, E4


def _e4() -> Move:
    return Move(E2, E4, Piece(Color.WHITE, PieceType.PAWN))


class TestPosition:
    def test_initial(self) -> None:
        pos = Position.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos.board == Board.initial()

    def test_default_construction_is_initial(self) -> None:
        assert Position() == Position.initial()

    def test_apply_flips_side(self) -> None:
        after = Position.initial().apply(_e4())
        assert after.side_to_move == Color.BLACK
        assert after.board[E4] is not None

    def test_apply_keeps_original(self) -> None:
        pos = Position.initial()
        pos.apply(_e4())
        assert pos == Position.initial()

    def test_frozen(self) -> None:
        pos = Position.initial()
        with pytest.raises(dataclasses.FrozenInstanceError):
            pos.side_to_move = Color.BLACK  # type: ignore[misc]

    def test_with_side(self) -> None:
        pos = Position.initial().with_side(Color.BLACK)
        assert pos.side_to_move == Color.BLACK
        assert pos.board == Board.initial()


class TestMove:
    def test_uci(self) -> None:
        assert _e4().uci == "e2e4"

    def test_capture_flag(self) -> None:
        assert not _e4().is_capture
        capture = Move(E2, E4, Piece(Color.WHITE, PieceType.PAWN), Piece(Color.BLACK, PieceType.PAWN))
        assert capture.is_capture
