"""chesspal: chess position engine with an advisor-backed computer opponent."""

__version__ = "0.1.0"
