"""
Move directions of the 2048 game and the symmetry relating them.
"""

from enum import Enum


class Action(str, Enum):
    """
    Direction of a move.

    Vertical moves are solved as horizontal ones on the transposed grid, so every action knows its
    image under transposition: UP <-> LEFT and DOWN <-> RIGHT.
    """

    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'
    LEFT = 'left'

    @property
    def is_vertical(self) -> bool:
        """True for UP and DOWN."""
        return self in (Action.UP, Action.DOWN)

    def transpose(self) -> 'Action':
        """
        Image of the action when the grid is transposed.

        Returns
        -------
        Action
            LEFT for UP, RIGHT for DOWN and conversely. Applying it twice gives back the action.
        """
        return _TRANSPOSED[self]


_TRANSPOSED = {
    Action.UP: Action.LEFT,
    Action.LEFT: Action.UP,
    Action.DOWN: Action.RIGHT,
    Action.RIGHT: Action.DOWN,
}
