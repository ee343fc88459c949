"""Position analysis helpers."""

from chesspal.analysis.report import (
    CENTER_SQUARES,
    build_position_report,
    material_balance,
)

__all__ = [
    "CENTER_SQUARES",
    "build_position_report",
    "material_balance",
]
