"""FEN parsing and serialization.

Only the piece-placement and side-to-move fields carry meaning here.  The
castling, en-passant and clock fields are always written as the "no rights"
placeholders ``- - 0 1`` and ignored when reading.
"""

from __future__ import annotations

from chesspal.core.board import Board
from chesspal.core.enums import Color
from chesspal.core.piece import Piece
from chesspal.core.position import Position
from chesspal.core.types import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"

_PLACEHOLDER_FIELDS = "- - 0 1"
_EMPTY_RUNS = "12345678"
_SIDE_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


class FenError(ValueError):
    """A position string could not be decoded."""

    def __init__(self, fen: str, reason: str) -> None:
        super().__init__(f"Invalid FEN ({reason}): {fen!r}")
        self.fen = fen
        self.reason = reason


def board_from_fen_field(placement: str) -> Board:
    """Decode the piece-placement field into a :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(placement, "board must contain 8 ranks")

    board = Board()
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                if ch not in _EMPTY_RUNS:
                    raise FenError(placement, f"bad digit {ch!r}")
                file += int(ch)
            else:
                if file >= 8:
                    raise FenError(placement, f"rank {rank + 1} is too wide")
                try:
                    board[Square(rank, file)] = Piece.from_char(ch)
                except ValueError:
                    raise FenError(placement, f"unknown piece {ch!r}") from None
                file += 1
            if file > 8:
                raise FenError(placement, f"rank {rank + 1} is too wide")
        if file != 8:
            raise FenError(placement, f"rank {rank + 1} must cover 8 files")
    return board


def board_to_fen_field(board: Board) -> str:
    """Run-length encode *board* rank by rank, top to bottom."""
    rows: list[str] = []
    for rank in range(8):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    A missing side-to-move field means white to move.
    """
    parts = fen.split()
    if not parts:
        raise FenError(fen, "empty string")

    board = board_from_fen_field(parts[0])

    side = Color.WHITE
    if len(parts) > 1:
        try:
            side = _SIDE_CHARS[parts[1].lower()]
        except KeyError:
            raise FenError(fen, f"bad side-to-move field {parts[1]!r}") from None

    return Position(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    return f"{board_to_fen_field(pos.board)} {side_str} {_PLACEHOLDER_FIELDS}"
