"""
Set of tests for the Matplotlib front-end.
"""
from types import SimpleNamespace
from unittest import TestCase, main

import matplotlib

matplotlib.use('Agg')

import numpy as np  # noqa: E402
from matplotlib.colors import to_hex  # noqa: E402

from game2048.config import WindowConfig  # noqa: E402
from game2048.core import Grid  # noqa: E402
from game2048.play.window import WindowBoard, WindowGame  # noqa: E402
from game2048.utils import cell_color  # noqa: E402


class StubWindow:
    """Window recording what it is asked to do."""

    def __init__(self):
        self.frames = []
        self.handlers = []
        self.closed = False
        self.shown = False

    def show_image(self, board):
        self.frames.append(board.copy())

    def register_key_handler(self, key_handler):
        self.handlers.append(key_handler)

    def show(self, block=True):
        self.shown = True

    def close(self):
        self.closed = True


class FakeClock:
    def __init__(self):
        self.now = 10.0

    def __call__(self):
        return self.now


def press(key):
    return SimpleNamespace(key=key)


class TestWindowGame(TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.window = StubWindow()
        self.grid = Grid.from_cells(
            [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], rng=np.random.default_rng(0)
        )
        self.game = WindowGame(self.grid, self.window, WindowConfig(input_delay=0.2), clock=self.clock)

    def test_run(self):
        """Running registers the key handler, draws the grid and shows the window."""
        self.game.run()
        self.assertEqual(self.window.handlers, [self.game.key_handler])
        self.assertEqual(len(self.window.frames), 1)
        self.assertTrue(self.window.shown)

    def test_arrow_key_moves(self):
        """An arrow key resolves the move, spawns a tile and redraws."""
        self.game.key_handler(press('left'))
        self.assertEqual(self.grid.cells[0, 0], 4)
        self.assertEqual(np.count_nonzero(self.grid.cells), 2)
        self.assertEqual(len(self.window.frames), 1)

    def test_repeated_keys_are_debounced(self):
        """Presses closer than the input delay are ignored."""
        self.game.key_handler(press('left'))
        self.clock.now += 0.1
        before = self.grid.cells.copy()
        self.game.key_handler(press('right'))
        np.testing.assert_array_equal(self.grid.cells, before)

        self.clock.now += 0.2
        self.game.key_handler(press('right'))
        self.assertEqual(len(self.window.frames), 2)

    def test_other_keys(self):
        """Unknown keys are ignored and escape closes the window."""
        self.game.key_handler(press('a'))
        self.assertEqual(self.window.frames, [])
        self.game.key_handler(press('escape'))
        self.assertTrue(self.window.closed)

    def test_finished_grid_ignores_moves(self):
        """No move is applied once the game is over."""
        cells = [[2, 4], [4, 2]]
        game = WindowGame(Grid.from_cells(cells), self.window, clock=self.clock)
        game.key_handler(press('up'))
        np.testing.assert_array_equal(game.grid.cells, cells)
        self.assertEqual(self.window.frames, [])


class TestWindowBoard(TestCase):
    def test_show_image(self):
        """Cells are coloured from their value and labelled, empty cells stay blank."""
        window = WindowBoard(size=2)
        try:
            window.show_image(np.array([[0, 2], [4, 2048]]))
            self.assertEqual([text.get_text() for text in window.texts], ['', '2', '4', '2048'])
            self.assertEqual(to_hex(window.axes[3].get_facecolor()), cell_color(2048, window.config))
        finally:
            window.close()
        self.assertTrue(window.closed)


if __name__ == '__main__':
    main()
