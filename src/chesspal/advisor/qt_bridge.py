"""Qt bridge to resolve advisor moves in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesspal.advisor.protocol import IMoveAdvisor
from chesspal.advisor.resolver import MoveResolver, ResolverConfig
from chesspal.core.position import Position


class SuggestionWorker(QObject):
    """Thread-affine worker that resolves moves on demand.

    Every result carries the caller's request id so a GUI can drop replies
    that arrive after the game moved on.
    """

    move_ready = pyqtSignal(int, object, str, str)  # id, move, algebraic, source
    no_move = pyqtSignal(int)
    resolve_error = pyqtSignal(int, str)

    __slots__ = ("_resolver",)

    def __init__(
        self,
        advisor: IMoveAdvisor | None = None,
        *,
        timeout_s: float | None = 10.0,
    ) -> None:
        super().__init__()
        self._resolver = MoveResolver(advisor, config=ResolverConfig(timeout_s=timeout_s))

    @pyqtSlot(object, object, int)
    def request_move(self, position_obj: object, history_obj: object, request_id: int) -> None:
        """Resolve a move for *position_obj* and emit the result."""
        self._run(position_obj, history_obj, request_id, hint=False)

    @pyqtSlot(object, object, int)
    def request_hint(self, position_obj: object, history_obj: object, request_id: int) -> None:
        """Resolve a hint (report-backed request) and emit the result."""
        self._run(position_obj, history_obj, request_id, hint=True)

    def _run(
        self,
        position_obj: object,
        history_obj: object,
        request_id: int,
        *,
        hint: bool,
    ) -> None:
        if not isinstance(position_obj, Position):
            self.resolve_error.emit(request_id, "Worker received invalid position")
            return
        history = [str(s) for s in history_obj] if isinstance(history_obj, (list, tuple)) else []

        try:
            if hint:
                resolved = self._resolver.hint(position_obj, history)
            else:
                resolved = self._resolver.resolve(position_obj, history)
        except Exception as exc:
            self.resolve_error.emit(request_id, str(exc))
            return

        if resolved.move is None or resolved.algebraic is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(
            request_id,
            resolved.move,
            resolved.algebraic,
            str(resolved.source),
        )
