"""Contract with the external move-suggestion service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from chesspal.core.enums import Color

if TYPE_CHECKING:
    from chesspal.core.move import Move


@dataclass(slots=True, frozen=True)
class SuggestionRequest:
    """Everything the service gets for one request; no session state.

    ``context`` replaces the bare FEN as the position description when set
    (hint requests send the full position report).
    """

    side: Color
    fen: str
    history: tuple[str, ...] = ()
    context: str | None = None


class IMoveAdvisor(Protocol):
    """A remote collaborator proposing one algebraic move.

    Implementations return the raw reply text, or ``None`` when they have
    nothing to offer.  Transport failures may be raised as any exception.
    """

    def suggest(self, request: SuggestionRequest) -> str | None: ...


class MoveSource(StrEnum):
    """Where a resolved move came from."""

    ADVISOR = "advisor"
    FALLBACK = "fallback"


@dataclass(slots=True, frozen=True)
class ResolvedMove:
    """Outcome of one resolve step.

    ``move`` is ``None`` only when the side to move has no legal move.
    ``suggestion`` keeps the raw advisor reply, if any, for diagnostics.
    """

    move: Move | None
    algebraic: str | None
    source: MoveSource
    suggestion: str | None = None


def validate_side(text: str) -> Color:
    """Parse ``"white"`` / ``"black"`` as sent by request payloads."""
    if text == "white":
        return Color.WHITE
    if text == "black":
        return Color.BLACK
    raise ValueError(f'side must be either "white" or "black", got {text!r}')
