"""Game state machine: tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesspal.core.enums import Color, GameStatus
from chesspal.core.move import Move
from chesspal.core.move_generator import MoveGenerator
from chesspal.core.notation import (
    STARTING_FEN,
    move_to_algebraic,
    movetext_from_sans,
    position_from_fen,
    position_to_fen,
)
from chesspal.core.position import Position
from chesspal.core.rules import Rules, StatusReport
from chesspal.core.types import Square
from chesspal.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    algebraic: str
    fen_after: str
    status: GameStatus = GameStatus.PLAYING

    @property
    def was_check(self) -> bool:
        return self.status in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def was_capture(self) -> bool:
        return self.move.is_capture


@dataclass
class GameState:
    """Manages game lifecycle: phase, status, move history.

    Every position reached is kept, so undo simply steps back to the
    previous one.  It holds data and logic only; threading and UI live elsewhere.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    report: StatusReport = field(
        default_factory=lambda: StatusReport(GameStatus.PLAYING), init=False
    )
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)
    _positions: list[Position] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._positions = [self.position]

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game.

        Raises :class:`~chesspal.core.notation.FenError` for a bad *fen*.
        """
        position = position_from_fen(fen) if fen else Position.initial()
        self.start_fen = fen or STARTING_FEN
        self.position = position
        self.move_history.clear()
        self._positions = [position]
        self._refresh_status()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a legal move and return the history record.

        *move* is matched on its squares, and the generated move (with its
        real captured piece) is the one recorded.  Raises ``ValueError`` if no
        legal move joins those squares.
        """
        legal = next(
            (
                m
                for m in self.legal_moves()
                if (m.from_sq, m.to_sq) == (move.from_sq, move.to_sq)
            ),
            None,
        )
        if legal is None:
            raise ValueError(f"Illegal move: {move}")
        move = legal

        self.position = self.position.apply(move)
        self._positions.append(self.position)
        self._refresh_status()

        record = MoveRecord(
            move=move,
            algebraic=move_to_algebraic(move),
            fen_after=position_to_fen(self.position),
            status=self.report.status,
        )
        self.move_history.append(record)
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self._positions.pop()
        self.position = self._positions[-1]
        self._refresh_status()
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def status(self) -> GameStatus:
        return self.report.status

    @property
    def winner(self) -> Color | None:
        return self.report.winner

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def sans(self) -> list[str]:
        """Algebraic strings of every move played so far."""
        return [record.algebraic for record in self.move_history]

    @property
    def movetext(self) -> str:
        first_mover = self._positions[0].side_to_move
        return movetext_from_sans(self.sans, first_mover)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return Rules.legal_moves(self.position)

    def legal_destinations(self, square: Square) -> list[Square]:
        """Legal target squares for the side-to-move piece on *square*."""
        piece = self.position.board.piece_at(square)
        if piece is None or piece.color != self.side_to_move:
            return []
        return MoveGenerator(self.position.board).legal_moves(square)

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh_status(self) -> None:
        self.report = Rules.evaluate_status(self.position)
        if self.report.is_game_over:
            self.phase = GamePhase.GAME_OVER
        else:
            self.phase = GamePhase.AWAITING_MOVE
