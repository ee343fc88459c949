"""Turn an advisor reply into a legal move, falling back to the local engine."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass

from chesspal.advisor.protocol import (
    IMoveAdvisor,
    MoveSource,
    ResolvedMove,
    SuggestionRequest,
)
from chesspal.analysis.report import build_position_report
from chesspal.core.notation import (
    IllegalMoveError,
    move_to_algebraic,
    parse_algebraic,
    position_to_fen,
)
from chesspal.core.position import Position
from chesspal.engine.greedy import DEFAULT_CHECK_BONUS, GreedyEngine
from chesspal.engine.search import IEngine

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ResolverConfig:
    """Limits for a single resolve step.

    ``timeout_s`` of ``None`` waits for the advisor indefinitely.
    """

    timeout_s: float | None = 10.0
    check_bonus: int = DEFAULT_CHECK_BONUS


class MoveResolver:
    """Asks the advisor for a move and never applies an unvalidated reply.

    Advisor errors, timeouts, empty replies and replies that do not decode
    to exactly one legal move are logged and replaced by the fallback
    engine's choice.  Nothing is raised to the caller.
    """

    __slots__ = ("_advisor", "_fallback", "_config")

    def __init__(
        self,
        advisor: IMoveAdvisor | None = None,
        fallback: IEngine | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._advisor = advisor
        self._fallback = fallback or GreedyEngine(self._config.check_bonus)

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(self, position: Position, history: Sequence[str] = ()) -> ResolvedMove:
        """Pick a move for the side to move in *position*."""
        request = SuggestionRequest(
            side=position.side_to_move,
            fen=position_to_fen(position),
            history=tuple(history),
        )
        return self._resolve(position, request)

    def hint(self, position: Position, history: Sequence[str] = ()) -> ResolvedMove:
        """Like :meth:`resolve`, sending the full position report as context."""
        request = SuggestionRequest(
            side=position.side_to_move,
            fen=position_to_fen(position),
            history=tuple(history),
            context=build_position_report(position.board, position.side_to_move),
        )
        return self._resolve(position, request)

    # ── Internal ─────────────────────────────────────────────────────────

    def _resolve(self, position: Position, request: SuggestionRequest) -> ResolvedMove:
        reply = self._ask_advisor(request)
        if reply:
            try:
                move = parse_algebraic(position, reply)
            except IllegalMoveError as exc:
                _LOGGER.warning("Rejected advisor move: %s", exc)
            else:
                _LOGGER.debug("Advisor move accepted: %s", reply)
                return ResolvedMove(
                    move=move,
                    algebraic=move_to_algebraic(move),
                    source=MoveSource.ADVISOR,
                    suggestion=reply,
                )

        _LOGGER.info("Using fallback move generation for %s", request.side)
        result = self._fallback.search(position)
        move = result.best_move
        return ResolvedMove(
            move=move,
            algebraic=move_to_algebraic(move) if move is not None else None,
            source=MoveSource.FALLBACK,
            suggestion=reply,
        )

    def _ask_advisor(self, request: SuggestionRequest) -> str | None:
        advisor = self._advisor
        if advisor is None:
            return None

        timeout = self._config.timeout_s
        try:
            if timeout is None:
                reply = advisor.suggest(request)
            else:
                reply = _suggest_with_timeout(advisor, request, timeout)
        except TimeoutError:
            _LOGGER.warning("Advisor timed out after %.1fs", timeout)
            return None
        except Exception:
            _LOGGER.warning("Advisor request failed", exc_info=True)
            return None

        if reply is None:
            return None
        return reply.strip() or None


def _suggest_with_timeout(
    advisor: IMoveAdvisor, request: SuggestionRequest, timeout: float
) -> str | None:
    """Run ``advisor.suggest`` on a daemon thread and wait at most *timeout*.

    A call that outlives the timeout is abandoned on its daemon thread and
    does not block interpreter exit.
    """
    outcome: dict[str, object] = {}

    def _call() -> None:
        try:
            outcome["reply"] = advisor.suggest(request)
        except Exception as exc:
            outcome["error"] = exc

    worker = threading.Thread(target=_call, name="chesspal-advisor", daemon=True)
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        raise TimeoutError(f"advisor gave no reply within {timeout}s")

    error = outcome.get("error")
    if isinstance(error, Exception):
        raise error
    reply = outcome.get("reply")
    return reply if isinstance(reply, str) else None
