"""Instruction text for text-generation advisors."""

from __future__ import annotations

from chesspal.advisor.protocol import SuggestionRequest

MOVE_MAX_TOKENS = 50

_MOVE_TEMPLATE = """\
You are a chess engine. Analyze this chess position: {position}

Game history: {history}
Current player: {side}

Suggest the best move for {side}. Consider:
- Material advantage
- Piece development
- King safety
- Tactical opportunities

Respond with ONLY the move in algebraic notation (e.g. "e4", "Nf3", "exd5", "Qxd5").
Do not include explanations, just the move."""


def build_move_prompt(request: SuggestionRequest) -> str:
    """Prompt asking for a single algebraic move."""
    position = request.context if request.context is not None else request.fen
    history = ", ".join(request.history) if request.history else "(none)"
    return _MOVE_TEMPLATE.format(
        position=position,
        history=history,
        side=str(request.side),
    )
