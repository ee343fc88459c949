"""Local engine package: greedy fallback evaluator and search protocol."""

from chesspal.engine.greedy import (
    DEFAULT_CHECK_BONUS,
    PIECE_VALUES,
    GreedyEngine,
    material_score,
)
from chesspal.engine.search import IEngine, SearchResult

__all__ = [
    "DEFAULT_CHECK_BONUS",
    "GreedyEngine",
    "IEngine",
    "PIECE_VALUES",
    "SearchResult",
    "material_score",
]
