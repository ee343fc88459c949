"""Game management layer: controller, players, state machine.

Quick start::

    from chesspal.core import Color
    from chesspal.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
    ctrl.submit_algebraic("e4")
"""

from chesspal.game.controller import GameController, GameEvents
from chesspal.game.interfaces import GamePhase, IGameController, IPlayer
from chesspal.game.player import AIPlayer, HumanPlayer
from chesspal.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
