"""Short algebraic move strings: encoding and decoding against legal moves.

The encoding is deliberately simple: piece letter (none for pawns), the
origin file for pawn captures, ``x`` for captures and the destination
square.  No disambiguation, check or promotion suffixes are written.
"""

from __future__ import annotations

from chesspal.core.board import Board
from chesspal.core.enums import Color, PieceType
from chesspal.core.move import Move
from chesspal.core.move_generator import MoveGenerator
from chesspal.core.position import Position
from chesspal.core.types import file_letter, square_name

_STRIP_CHARS = " \t\r\n\"'`."
_SUFFIX_CHARS = "+#!?"


class IllegalMoveError(ValueError):
    """An algebraic string does not name exactly one legal move."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


def move_to_algebraic(move: Move) -> str:
    """Encode *move*, e.g. ``e4``, ``Nf3``, ``exd5``, ``Qxh7``."""
    san = ""
    if move.piece.piece_type != PieceType.PAWN:
        san += move.piece.letter
    if move.is_capture:
        if move.piece.piece_type == PieceType.PAWN:
            san += file_letter(move.from_sq)
        san += "x"
    return san + square_name(move.to_sq)


def _clean(text: str) -> str:
    return text.strip(_STRIP_CHARS).rstrip(_SUFFIX_CHARS)


def parse_algebraic(
    position: Position | Board,
    text: str,
    color: Color | None = None,
) -> Move:
    """Find the legal move whose encoding matches *text*.

    Matching is exact first and case-insensitive second; a string that
    matches no legal move, or several in the same pass, is rejected.
    *color* defaults to the position's side to move and is required when a
    bare :class:`Board` is given.
    """
    if isinstance(position, Position):
        board = position.board
        side = position.side_to_move if color is None else color
    else:
        if color is None:
            raise TypeError("color is required when parsing against a Board")
        board, side = position, color

    clean = _clean(text)
    if not clean:
        raise IllegalMoveError(text, "Empty move")

    encoded = [(move_to_algebraic(m), m) for m in MoveGenerator(board).all_legal_moves(side)]

    exact = [m for san, m in encoded if san == clean]
    candidates = exact or [m for san, m in encoded if san.lower() == clean.lower()]

    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise IllegalMoveError(text, "Illegal move")
    raise IllegalMoveError(text, "Ambiguous move")
