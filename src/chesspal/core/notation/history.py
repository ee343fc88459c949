"""Move-history text for display and advisor requests."""

from __future__ import annotations

from collections.abc import Iterable

from chesspal.core.enums import Color


def movetext_from_sans(
    sans: Iterable[str],
    first_mover: Color = Color.WHITE,
) -> str:
    """Build numbered movetext, e.g. ``"1. e4 e5 2. Nf3"``.

    When black made the first recorded move the list opens with ``"1..."``.
    """
    parts: list[str] = []
    offset = 1 if first_mover == Color.BLACK else 0
    for idx, san in enumerate(sans):
        ply = idx + offset
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        elif idx == 0:
            parts.append("1...")
        parts.append(san)
    return " ".join(parts)
