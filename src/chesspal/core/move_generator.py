"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from chesspal.core.board import Board
from chesspal.core.enums import Color, PieceType
from chesspal.core.move import Move
from chesspal.core.types import Square, is_valid_square

# (d_rank, d_file) pairs; rank 0 is the top of the board.

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS
KING_OFFSETS: tuple[tuple[int, int], ...] = QUEEN_DIRS

# White advances towards rank 0, black towards rank 7.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.ROOK: ROOK_DIRS,
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}
_STEPPING_OFFSETS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.KNIGHT: KNIGHT_OFFSETS,
    PieceType.KING: KING_OFFSETS,
}


class MoveGenerator:
    """Generates moves and answers attack queries for a :class:`Board`.

    The generator never mutates the board.  Legality is decided by playing
    each candidate on a copy (:meth:`Board.apply_move`) and asking whether
    the mover's king is attacked there.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Legal moves --------------------------------------------------------

    def legal_moves(self, from_sq: Square) -> list[Square]:
        """Pseudo-legal destinations that keep the mover's king safe."""
        piece = self._board.piece_at(from_sq)
        if piece is None:
            return []

        legal: list[Square] = []
        for to_sq in self.pseudo_legal_moves(from_sq):
            after = MoveGenerator(self._board.apply_move(from_sq, to_sq))
            if not after.is_in_check(piece.color):
                legal.append(to_sq)
        return legal

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move for *color*, in board scan order."""
        board = self._board
        moves: list[Move] = []
        for from_sq, piece in list(board.occupied()):
            if piece.color != color:
                continue
            for to_sq in self.legal_moves(from_sq):
                moves.append(Move(from_sq, to_sq, piece, board[to_sq]))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        for from_sq, piece in list(self._board.occupied()):
            if piece.color == color and self.legal_moves(from_sq):
                return True
        return False

    # -- Pseudo-legal moves -------------------------------------------------

    def pseudo_legal_moves(self, from_sq: Square) -> list[Square]:
        """Destinations reachable by the piece on *from_sq*.

        Blocking and captures are honoured; own-king safety is not.
        """
        piece = self._board.piece_at(from_sq)
        if piece is None:
            return []

        moves: list[Square] = []
        if piece.piece_type == PieceType.PAWN:
            self._gen_pawn(from_sq, piece.color, moves)
        elif piece.piece_type in _SLIDING_DIRS:
            self._gen_sliding(from_sq, piece.color, _SLIDING_DIRS[piece.piece_type], moves)
        else:
            self._gen_stepping(
                from_sq, piece.color, _STEPPING_OFFSETS[piece.piece_type], moves
            )
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A side without a king is reported as not in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* among the pseudo-legal destinations of any *by_color* piece?"""
        for from_sq, piece in self._board.occupied():
            if piece.color != by_color:
                continue
            if sq in self.pseudo_legal_moves(from_sq):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Square]) -> None:
        board = self._board
        direction = _PAWN_DIRECTION[color]

        one_step = sq.offset(direction, 0)
        if is_valid_square(one_step) and board.is_empty(one_step):
            moves.append(one_step)
            two_step = sq.offset(2 * direction, 0)
            if (
                sq.rank == _PAWN_START_RANK[color]
                and is_valid_square(two_step)
                and board.is_empty(two_step)
            ):
                moves.append(two_step)

        for d_file in (-1, 1):
            cap_sq = sq.offset(direction, d_file)
            target = board.piece_at(cap_sq)
            if target is not None and target.color != color:
                moves.append(cap_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_rank, d_file in directions:
            to_sq = sq.offset(d_rank, d_file)
            while is_valid_square(to_sq):
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    to_sq = to_sq.offset(d_rank, d_file)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_stepping(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_rank, d_file in offsets:
            to_sq = sq.offset(d_rank, d_file)
            if not is_valid_square(to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)
