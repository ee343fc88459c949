"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesspal.core.enums import Color, GameStatus
from chesspal.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesspal.core.move import Move
    from chesspal.core.position import Position


@dataclass(frozen=True, slots=True)
class StatusReport:
    """Status of the side to move; ``winner`` is set only after checkmate."""

    status: GameStatus
    winner: Color | None = None

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Status is computed fresh from the position every time; nothing is
    tracked incrementally.
    """

    @staticmethod
    def legal_moves(position: Position) -> list[Move]:
        gen = MoveGenerator(position.board)
        return gen.all_legal_moves(position.side_to_move)

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position.board)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.evaluate_status(position).status == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.evaluate_status(position).status == GameStatus.STALEMATE

    @staticmethod
    def evaluate_status(position: Position) -> StatusReport:
        """Classify the position for the side about to move."""
        gen = MoveGenerator(position.board)
        side = position.side_to_move
        in_check = gen.is_in_check(side)

        if not gen.has_legal_move(side):
            if in_check:
                return StatusReport(GameStatus.CHECKMATE, winner=side.opposite)
            return StatusReport(GameStatus.STALEMATE)

        if in_check:
            return StatusReport(GameStatus.CHECK)
        return StatusReport(GameStatus.PLAYING)
