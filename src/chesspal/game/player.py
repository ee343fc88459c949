"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chesspal.core.enums import Color
from chesspal.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chesspal.core.position import Position


class HumanPlayer(IPlayer):
    """A human participant: moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, position: Position, history: list[str]) -> None:
        pass  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """A computer participant that delegates move choice to a callback.

    In a GUI the callback forwards the request to a
    :class:`~chesspal.advisor.qt_bridge.SuggestionWorker` in a ``QThread``;
    in scripts and tests it can resolve synchronously and submit the move
    straight back to the controller.

    Args:
        color: Side the player plays.
        name: Display name.
        on_request_move: ``(Position, history) -> None``, called when the
            game controller asks this player to move.
    """

    __slots__ = ("_color", "_name", "_on_request_move")

    def __init__(
        self,
        color: Color,
        name: str = "Advisor",
        on_request_move: Callable[[Position, list[str]], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._on_request_move = on_request_move

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, position: Position, history: list[str]) -> None:
        if self._on_request_move is not None:
            self._on_request_move(position, history)
