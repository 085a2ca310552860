"""
Set of tests for the front-end helpers.
"""
from unittest import TestCase, main

from matplotlib.colors import to_rgb

from game2048.config import WindowConfig
from game2048.utils import KeyDebouncer, cell_color, cell_lightness


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestPalette(TestCase):
    def test_empty_cell_is_brightest(self):
        """Empty cells get the upper lightness bound."""
        self.assertEqual(cell_lightness(0, 0.3, 0.9), 0.9)

    def test_log_interpolation(self):
        """Lightness decreases with log2 of the value down to the lower bound."""
        self.assertAlmostEqual(cell_lightness(2, 0.0, 1.0, max_tile=1024), 0.9)
        self.assertAlmostEqual(cell_lightness(32, 0.0, 1.0, max_tile=1024), 0.5)
        self.assertAlmostEqual(cell_lightness(1024, 0.3, 0.9, max_tile=1024), 0.3)

    def test_clipped_above_max_tile(self):
        """Tiles beyond the reference maximum keep the lower bound."""
        self.assertAlmostEqual(cell_lightness(8192, 0.3, 0.9, max_tile=2048), 0.3)

    def test_cell_color(self):
        """Colours are hex strings, darker for larger tiles."""
        config = WindowConfig()
        empty, small, large = cell_color(0, config), cell_color(2, config), cell_color(2048, config)
        for color in (empty, small, large):
            self.assertRegex(color, r'^#[0-9a-f]{6}$')
        self.assertGreater(sum(to_rgb(empty)), sum(to_rgb(small)))
        self.assertGreater(sum(to_rgb(small)), sum(to_rgb(large)))


class TestKeyDebouncer(TestCase):
    def test_delay(self):
        """Presses within the delay of the last accepted one are dropped."""
        clock = FakeClock()
        debouncer = KeyDebouncer(0.2, clock=clock)
        self.assertTrue(debouncer.accept())
        clock.now = 0.1
        self.assertFalse(debouncer.accept())
        clock.now = 0.25
        self.assertTrue(debouncer.accept())
        clock.now = 0.4
        self.assertFalse(debouncer.accept())
        clock.now = 0.5
        self.assertTrue(debouncer.accept())


if __name__ == '__main__':
    main()
