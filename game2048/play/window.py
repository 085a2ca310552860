# -*- coding: utf-8 -*-
"""
Graphical front-end for the 2048 game.

The board is drawn with Matplotlib: one sub-plot per cell, filled with a colour whose lightness follows the
tile value, and the tile numeral written in its centre. Arrow keys move the tiles.
"""

import logging
import time
from typing import Any, Callable

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray

from game2048.config import WindowConfig
from game2048.core import Action, Grid
from game2048.utils import KeyDebouncer, cell_color

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##: Matplotlib key names of the arrow keys.
KEY_ACTIONS = {'up': Action.UP, 'right': Action.RIGHT, 'down': Action.DOWN, 'left': Action.LEFT}


class WindowBoard:
    """
    Render a 2048 board in a Matplotlib window.

    Methods
    -------
    show_image(board: ndarray)
        Update the display with the current tiles.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the window.
    close()
        Close the window.
    """

    def __init__(self, size: int, config: WindowConfig | None = None):
        """
        Initialize the game board window.

        Parameters
        ----------
        size : int
            Width and height of the board.
        config : WindowConfig, optional
            Title and colour parameters.
        """
        self.config = config or WindowConfig()
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(self.config.title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect('close_event', self._close_handler)

    def _setup_axes(self, size: int):
        """
        Create one sub-plot and one text per cell.

        Parameters
        ----------
        size : int
            Width and height of the board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor('#BBADA0')
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, '', ha='center', va='center', fontsize='x-large', fontweight='demibold')
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Event | None = None):
        self.closed = True

    def show_image(self, board: ndarray):
        """
        Show or update the tiles.

        Parameters
        ----------
        board : ndarray
            Tiles to draw, row by row.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else '')
            ax.set_facecolor(cell_color(value, self.config))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """Call ``key_handler`` with every key press event of the window."""
        self.fig.canvas.mpl_connect('key_press_event', key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True


class WindowGame:
    """
    Drive a grid from the key presses of a window.

    Parameters
    ----------
    grid : Grid
        Grid to play on. Mutated in place.
    window : WindowBoard
        Window drawing the grid and emitting key events.
    config : WindowConfig, optional
        Delay between accepted moves.
    clock : Callable[[], float], optional
        Source of the current time, ``time.monotonic`` by default.
    """

    def __init__(
        self,
        grid: Grid,
        window: WindowBoard,
        config: WindowConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.grid = grid
        self.window = window
        self.config = config or WindowConfig()
        self._debouncer = KeyDebouncer(self.config.input_delay, clock=clock)

    def redraw(self):
        """Draw the current grid."""
        self.window.show_image(self.grid.cells)

    def key_handler(self, event: Any):
        """
        Handle one key press.

        Parameters
        ----------
        event : Any
            Matplotlib key event, only its ``key`` attribute is read.
        """
        if event.key == 'escape':
            self.window.close()
            return

        action = KEY_ACTIONS.get(event.key)
        if action is None or self.grid.game_over():
            return
        if not self._debouncer.accept():
            _logger.debug('Key %s ignored, too close to the previous move', event.key)
            return

        self.grid.update(action)
        self.grid.insert_random_cell()
        self.redraw()

        if self.grid.game_over():
            _logger.info('No move left')

    def run(self, block: bool = True) -> Grid:
        """
        Open the window and play until it is closed.

        Parameters
        ----------
        block : bool, optional
            Block on the Matplotlib event loop (default is True).

        Returns
        -------
        Grid
            The grid as left when the event loop returns.
        """
        self.window.register_key_handler(self.key_handler)
        self.redraw()
        self.window.show(block=block)
        return self.grid
