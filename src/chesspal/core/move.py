"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesspal.core.piece import Piece
from chesspal.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``captured`` is the piece that stood on ``to_sq`` before the move.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """Coordinate notation, e.g. ``'e2e4'``."""
        return str(self)
