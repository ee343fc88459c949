"""Player and controller contracts shared by the game layer.

``GameController`` talks to seats through :class:`IPlayer`, so a seat can be
a person at the board or a side whose moves come from a ``MoveResolver``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesspal.core.enums import Color

if TYPE_CHECKING:
    from chesspal.core.move import Move
    from chesspal.core.position import Position


class GamePhase(IntEnum):
    """Where the controller is in the turn cycle."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # waiting on a resolver reply
    GAME_OVER = auto()


# ── Seats ───────────────────────────────────────────────────────────────────


class IPlayer(ABC):
    """One side of the board."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, position: Position, history: list[str]) -> None:
        """Called when it is this side's turn.

        *history* holds the algebraic moves played so far.  A person answers
        later through ``submit_move``; a resolver-backed side may answer
        before this call returns.
        """


class IGameController(ABC):
    @abstractmethod
    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        """Seat both sides and start from *fen*, or the initial position."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move; ``False`` if it was refused."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Take back one ply; ``False`` with nothing to take back."""
