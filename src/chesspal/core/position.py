"""Position: board plus side to move."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesspal.core.board import Board
from chesspal.core.enums import Color
from chesspal.core.move import Move


@dataclass(frozen=True, slots=True)
class Position:
    """Unit passed through the engine.

    There are no clocks or draw counters.  :meth:`apply` never touches
    ``self``; the previous position stays valid for history and undo.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE

    @classmethod
    def initial(cls) -> Position:
        return cls(Board.initial(), Color.WHITE)

    def apply(self, move: Move) -> Position:
        """New position with *move* played and the turn passed."""
        return Position(
            self.board.apply_move(move.from_sq, move.to_sq),
            self.side_to_move.opposite,
        )

    def with_side(self, side: Color) -> Position:
        return Position(self.board, side)
