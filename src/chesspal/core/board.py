"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesspal.core.enums import Color, PieceType
from chesspal.core.piece import Piece
from chesspal.core.types import Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """8x8 grid of optional pieces, stored row-major from the top rank.

    The engine treats boards as values: every transition goes through
    :meth:`apply_move`, which returns an independent copy.  Item assignment
    exists only for building positions (FEN decoding, tests).
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_valid_square(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        self._rows[sq.rank][sq.file] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        """Bounds-checked lookup; ``None`` for squares off the board."""
        if not is_valid_square(sq):
            return None
        return self._rows[sq.rank][sq.file]

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in scan order (rank 0..7, file 0..7)."""
        for rank, row in enumerate(self._rows):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield Square(rank, file), piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if there is none."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Transitions / copying ----------------------------------------------

    def apply_move(self, from_sq: Square, to_sq: Square) -> Board:
        """Return a new board with the piece on *from_sq* moved to *to_sq*.

        Whatever stood on *to_sq* is discarded.  Legality is not checked.
        """
        b = self.copy()
        piece = self.piece_at(from_sq)
        if piece is None:
            return b
        b[to_sq] = piece.moved()
        b[from_sq] = None
        return b

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, pt in enumerate(_BACK_RANK):
            b[Square(0, file)] = Piece(Color.BLACK, pt)
            b[Square(1, file)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, file)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, file)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(tuple(tuple(row) for row in self._rows))

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
