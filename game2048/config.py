"""
Configuration for the 2048 game and its front-ends.

Default values are the reference constants of the game: a 4x4 grid seeded with three tiles of value 2,
three tries for console input and a 0.2 second gap between accepted key presses in the window.
"""

from dataclasses import dataclass

# ##>: Reference game constants.
GRID_SIZE = 4
INIT_FILLED_CELLS = 3
SPAWN_VALUE = 2


@dataclass
class GameConfig:
    """Parameters of a game session."""

    size: int = GRID_SIZE  # Width and height of the grid
    initial_tiles: int = INIT_FILLED_CELLS  # Tiles spawned at construction
    seed: int | None = None  # Seed for the tile generator, None for OS entropy


@dataclass
class ConsoleConfig:
    """Parameters of the text front-end."""

    max_input_tries: int = 3  # Invalid lines accepted before abandoning the session
    clear_screen: bool = True  # Clear the terminal after each read


@dataclass
class WindowConfig:
    """
    Parameters of the graphical front-end.

    Lightness of a cell is interpolated between ``max_lightness`` (empty cell) and ``min_lightness``
    (``max_tile`` and above) on a logarithmic scale.
    """

    title: str = '2048'
    input_delay: float = 0.2  # Seconds between two accepted moves
    min_lightness: float = 0.35
    max_lightness: float = 0.92
    max_tile: int = 2048
    hue: float = 0.08
    saturation: float = 0.6
