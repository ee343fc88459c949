"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chesspal.core import MoveGenerator, Position, Rules

    pos = Position.initial()
    for move in MoveGenerator(pos.board).all_legal_moves(pos.side_to_move):
        print(move)
"""

from chesspal.core.board import Board
from chesspal.core.enums import Color, GameStatus, PieceType
from chesspal.core.move import Move
from chesspal.core.move_generator import MoveGenerator
from chesspal.core.notation import (
    STARTING_FEN,
    FenError,
    IllegalMoveError,
    move_to_algebraic,
    movetext_from_sans,
    parse_algebraic,
    position_from_fen,
    position_to_fen,
)
from chesspal.core.piece import Piece
from chesspal.core.position import Position
from chesspal.core.rules import Rules, StatusReport
from chesspal.core.types import Square, is_valid_square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "StatusReport",
    # Notation
    "STARTING_FEN",
    "FenError",
    "IllegalMoveError",
    "move_to_algebraic",
    "movetext_from_sans",
    "parse_algebraic",
    "position_from_fen",
    "position_to_fen",
]
