"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chesspal.core.move import Move
    from chesspal.core.position import Position


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine search."""

    best_move: Move | None
    score: int
    nodes: int


class IEngine(Protocol):
    """Protocol for local move choosers used by the advisor layer."""

    def search(self, position: Position) -> SearchResult: ...
