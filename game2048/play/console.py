"""
Text front-end: read directions from a terminal and print the grid after every move.
"""

import logging
from typing import Callable

from game2048.config import ConsoleConfig
from game2048.core import Action, Grid

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##: Digits accepted at the prompt.
KEY_ACTIONS = {'1': Action.UP, '2': Action.RIGHT, '3': Action.DOWN, '4': Action.LEFT}

CLEAR_SCREEN = '\x1b[2J\x1b[1;1H'


def parse_action(text: str) -> Action | None:
    """
    Map a line typed by the player to an action.

    Parameters
    ----------
    text : str
        Raw input line.

    Returns
    -------
    Action or None
        The chosen action, or None when the line is not one of the menu digits.
    """
    return KEY_ACTIONS.get(text.strip())


class ConsoleGame:
    """
    Play a game of 2048 in a terminal.

    Parameters
    ----------
    grid : Grid
        Grid to play on. Mutated in place.
    config : ConsoleConfig, optional
        Retry budget and screen handling.
    reader : Callable[[str], str], optional
        Reads one line after showing a prompt, ``input`` by default.
    writer : Callable[[str], None], optional
        Prints one message, ``print`` by default.
    """

    def __init__(
        self,
        grid: Grid,
        config: ConsoleConfig | None = None,
        reader: Callable[[str], str] = input,
        writer: Callable[[str], None] = print,
    ):
        self.grid = grid
        self.config = config or ConsoleConfig()
        self._read = reader
        self._write = writer

    def read_action(self) -> Action | None:
        """
        Prompt until a valid direction is entered or the retry budget is spent.

        Returns
        -------
        Action or None
            The direction, or None when the session should be abandoned.
        """
        tries = self.config.max_input_tries
        for attempt in range(1, tries + 1):
            self._write('\nAction options: 1) Up, 2) Right, 3) Down, 4) Left')
            try:
                line = self._read('Enter your action: ')
            except EOFError:
                _logger.info('Input closed, abandoning the session')
                return None

            action = parse_action(line)
            if action is not None:
                return action

            self._write('\n~~~~Invalid input~~~~')
            self._write(f'{attempt}/{tries} tries')

        _logger.info('No valid input after %d tries, abandoning the session', tries)
        return None

    def run(self) -> Grid:
        """
        Play until the game is over or the player gives up.

        Returns
        -------
        Grid
            The final grid.
        """
        self._write('~~~~Welcome to 2048!~~~~')
        while not self.grid.game_over():
            self._write('\nCurrent state:')
            self._write(str(self.grid))

            action = self.read_action()
            if self.config.clear_screen:
                self._write(CLEAR_SCREEN)

            if action is None:
                break
            self.grid.update(action)
            self.grid.insert_random_cell()
        else:
            _logger.info('No move left')

        self._write('\n~~~~Game Over!~~~~')
        self._write('\nFinal state:')
        self._write(str(self.grid))
        return self.grid
