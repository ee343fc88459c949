"""One-ply greedy move chooser used when the advisor cannot be used."""

from __future__ import annotations

from chesspal.core.board import Board
from chesspal.core.enums import Color, PieceType
from chesspal.core.move import Move
from chesspal.core.move_generator import MoveGenerator
from chesspal.core.position import Position
from chesspal.engine.search import IEngine, SearchResult

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 100,
}

DEFAULT_CHECK_BONUS = 5


def material_score(board: Board, color: Color) -> int:
    """Material of *color* minus material of the opponent."""
    score = 0
    for _sq, piece in board.occupied():
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == color else -value
    return score


class GreedyEngine(IEngine):
    """Material-only evaluator with no look-ahead.

    Each legal move is played once and the resulting board scored from the
    mover's point of view.  The first move with the highest score wins, so
    ties resolve in board scan order.
    """

    __slots__ = ("_check_bonus",)

    def __init__(self, check_bonus: int = DEFAULT_CHECK_BONUS) -> None:
        self._check_bonus = check_bonus

    @property
    def check_bonus(self) -> int:
        return self._check_bonus

    def evaluate(self, board: Board, color: Color) -> int:
        score = material_score(board, color)
        if MoveGenerator(board).is_in_check(color.opposite):
            score += self._check_bonus
        return score

    def score_move(self, board: Board, move: Move) -> int:
        after = board.apply_move(move.from_sq, move.to_sq)
        return self.evaluate(after, move.piece.color)

    def search(self, position: Position) -> SearchResult:
        board = position.board
        moves = MoveGenerator(board).all_legal_moves(position.side_to_move)
        if not moves:
            return SearchResult(best_move=None, score=0, nodes=0)

        best_move: Move | None = None
        best_score = 0
        for move in moves:
            score = self.score_move(board, move)
            if best_move is None or score > best_score:
                best_move = move
                best_score = score

        return SearchResult(best_move=best_move, score=best_score, nodes=len(moves))
