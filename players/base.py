"""
Base player interface for headless runs.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for autopilot logic.

    A player is an input producer: given a snapshot it returns the heading
    to push into the game's direction mailbox before the next tick.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
