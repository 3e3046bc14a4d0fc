"""Game management layer — controller, players, state machine.

Quick start::

    from checkie.core import Color
    from checkie.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        light=HumanPlayer(Color.LIGHT, "Alice"),
        dark=HumanPlayer(Color.DARK, "Bob"),
    )
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GamePhase, IGameController, IPlayer, MoveSubmitter
from checkie.game.player import AIPlayer, HumanPlayer, MoveDispatcher

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    "MoveDispatcher",
    "MoveSubmitter",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "HumanPlayer",
]
