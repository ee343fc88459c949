"""GameController: the central orchestrator of a chess game.

Coordinates: Players, GameState, MoveResolver.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesspal.advisor.protocol import ResolvedMove
from chesspal.advisor.resolver import MoveResolver
from chesspal.core.enums import Color
from chesspal.core.move import Move
from chesspal.core.notation import IllegalMoveError, parse_algebraic
from chesspal.core.rules import StatusReport
from chesspal.game.interfaces import GamePhase, IGameController, IPlayer
from chesspal.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[StatusReport], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, switches turns,
    notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Advisor results computed in a worker thread must
    be handed back through a queued signal before calling ``submit_move``.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        color = self._state.side_to_move
        return self._players.get(color)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}

        self._state = GameState()
        self._state.setup(fen)

        if self._state.is_game_over:
            self._emit_game_over(self._state.report)
            return

        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        try:
            record = self._state.apply_move(move)
        except ValueError:
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.report)
            return True

        self._prompt_current_player()
        return True

    def submit_algebraic(self, text: str) -> bool:
        """Submit a move given as an algebraic string, e.g. ``"Nf3"``."""
        try:
            move = parse_algebraic(self._state.position, text)
        except IllegalMoveError:
            return False
        return self.submit_move(move)

    def play_advisor_move(self, resolver: MoveResolver) -> ResolvedMove | None:
        """Resolve and play a move for the side to move.

        Returns the resolution, or ``None`` when the game is already over or
        the controller does not accept the resolved move.
        """
        if self._state.is_game_over:
            return None
        resolved = resolver.resolve(self._state.position, self._state.sans)
        if resolved.move is not None and not self.submit_move(resolved.move):
            _LOGGER.warning(
                "Resolved move %s not accepted in phase %s",
                resolved.algebraic,
                self._state.phase.name,
            )
            return None
        return resolved

    def undo_move(self) -> bool:
        if not self._state.move_history:
            return False

        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.position, self._state.sans)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, report: StatusReport) -> None:
        _LOGGER.info("Game over: %s (winner: %s)", report.status, report.winner)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(report)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
