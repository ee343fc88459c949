"""Notation package: FEN-style position strings and algebraic moves."""

from chesspal.core.notation.algebraic import (
    IllegalMoveError,
    move_to_algebraic,
    parse_algebraic,
)
from chesspal.core.notation.fen import (
    STARTING_FEN,
    FenError,
    board_from_fen_field,
    board_to_fen_field,
    position_from_fen,
    position_to_fen,
)
from chesspal.core.notation.history import movetext_from_sans

__all__ = [
    "STARTING_FEN",
    "FenError",
    "IllegalMoveError",
    "board_from_fen_field",
    "board_to_fen_field",
    "move_to_algebraic",
    "movetext_from_sans",
    "parse_algebraic",
    "position_from_fen",
    "position_to_fen",
]
