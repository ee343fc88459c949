"""Advisor boundary: request contract, prompt text and move resolution.

The Qt worker lives in :mod:`chesspal.advisor.qt_bridge` and is imported
explicitly so the rest of the package does not need a Qt installation at
import time.
"""

from chesspal.advisor.prompts import MOVE_MAX_TOKENS, build_move_prompt
from chesspal.advisor.protocol import (
    IMoveAdvisor,
    MoveSource,
    ResolvedMove,
    SuggestionRequest,
    validate_side,
)
from chesspal.advisor.resolver import MoveResolver, ResolverConfig

__all__ = [
    "IMoveAdvisor",
    "MOVE_MAX_TOKENS",
    "MoveResolver",
    "MoveSource",
    "ResolvedMove",
    "ResolverConfig",
    "SuggestionRequest",
    "build_move_prompt",
    "validate_side",
]
