"""Plain-text position report sent to the advisor as hint context."""

from __future__ import annotations

from collections import Counter

from chesspal.core.board import Board
from chesspal.core.enums import Color, PieceType
from chesspal.core.move import Move
from chesspal.core.move_generator import MoveGenerator
from chesspal.core.types import D4, D5, E4, E5, Square, square_name
from chesspal.engine.greedy import PIECE_VALUES, GreedyEngine

CENTER_SQUARES: tuple[Square, ...] = (D5, E5, D4, E4)

# Display order for material listings.
_KIND_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


def material_balance(board: Board) -> tuple[int, int]:
    """Total piece value for (white, black)."""
    totals = {Color.WHITE: 0, Color.BLACK: 0}
    for _sq, piece in board.occupied():
        totals[piece.color] += PIECE_VALUES[piece.piece_type]
    return totals[Color.WHITE], totals[Color.BLACK]


def _diagram(board: Board) -> list[str]:
    lines = ["   a b c d e f g h"]
    for rank in range(8):
        cells = []
        for file in range(8):
            piece = board[Square(rank, file)]
            cells.append(str(piece) if piece else ".")
        lines.append(f"{8 - rank}  {' '.join(cells)}  {8 - rank}")
    lines.append("   a b c d e f g h")
    return lines


def _inventory(board: Board, color: Color) -> str:
    counts = Counter(p.piece_type for _sq, p in board.occupied() if p.color == color)
    parts = []
    for kind in _KIND_ORDER:
        count = counts.get(kind, 0)
        if count:
            name = kind.name.lower()
            parts.append(f"{count} {name}{'s' if count > 1 else ''}")
    return ", ".join(parts)


def _gives_check(board: Board, move: Move) -> bool:
    after = board.apply_move(move.from_sq, move.to_sq)
    return MoveGenerator(after).is_in_check(move.piece.color.opposite)


def build_position_report(board: Board, color: Color) -> str:
    """Describe *board* from the point of view of *color*, who is to move."""
    gen = MoveGenerator(board)
    lines: list[str] = ["=== POSITION ANALYSIS ===", ""]

    lines.append("Board:")
    lines.extend(_diagram(board))
    lines.append("")

    white, black = material_balance(board)
    if white > black:
        leader = "White"
    elif black > white:
        leader = "Black"
    else:
        leader = "Even"
    lines.append("Material:")
    lines.append(f"White: {white} points - {_inventory(board, Color.WHITE)}")
    lines.append(f"Black: {black} points - {_inventory(board, Color.BLACK)}")
    lines.append(f"Material advantage: {leader} ({abs(white - black)} points)")
    lines.append("")

    for side in (Color.WHITE, Color.BLACK):
        if gen.is_in_check(side):
            lines.append(f"CHECK: {str(side).capitalize()} king is in check")
            lines.append("")

    legal = gen.all_legal_moves(color)
    lines.append(f"{str(color).upper()} TO MOVE - {len(legal)} legal moves")

    captures = [(m, cap) for m in legal if (cap := m.captured) is not None]
    checks = [m for m in legal if _gives_check(board, m)]

    if captures:
        lines.append("")
        lines.append("Captures:")
        for m, cap in captures:
            lines.append(
                f"  {m.piece.letter}{square_name(m.from_sq)}x{square_name(m.to_sq)}"
                f" (takes {cap.letter}, +{PIECE_VALUES[cap.piece_type]})"
            )

    if checks:
        lines.append("")
        lines.append("Checks:")
        for m in checks:
            lines.append(
                f"  {m.piece.letter}{square_name(m.from_sq)}-{square_name(m.to_sq)}+"
            )

    lines.append("")
    lines.append("Mobility:")
    for sq, piece in board.occupied():
        if piece.color != color:
            continue
        targets = gen.legal_moves(sq)
        if targets:
            names = ", ".join(square_name(t) for t in targets)
            lines.append(f"  {piece.letter}{square_name(sq)}: {len(targets)} ({names})")

    lines.append("")
    lines.append("Summary:")
    if captures:
        best, best_cap = max(captures, key=lambda pair: PIECE_VALUES[pair[1].piece_type])
        lines.append(
            f"- Best capture: {square_name(best.from_sq)}x{square_name(best.to_sq)}"
            f" wins {PIECE_VALUES[best_cap.piece_type]}"
        )
    if checks:
        lines.append(f"- {len(checks)} moves give check")

    controlled = sum(1 for sq in CENTER_SQUARES if gen.is_square_attacked(sq, color))
    lines.append(f"- Center control: {controlled}/{len(CENTER_SQUARES)}")

    score = GreedyEngine().evaluate(board, color)
    if score > 0:
        verdict = "advantage"
    elif score < 0:
        verdict = "disadvantage"
    else:
        verdict = "balanced"
    lines.append(f"- Evaluation: {score:+d} ({verdict})")

    lines.append("")
    lines.append(f"=== Suggest the best move for {str(color).upper()} ===")
    return "\n".join(lines)
