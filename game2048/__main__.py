"""
Play 2048.

Usage:
    python -m game2048
    python -m game2048 --mode window --seed 7
"""

import logging
from argparse import ArgumentParser

from game2048.config import GRID_SIZE, ConsoleConfig, GameConfig, WindowConfig
from game2048.core import Grid


def main(argv: list[str] | None = None):
    parser = ArgumentParser(description='Play 2048')
    parser.add_argument('--mode', choices=['console', 'window'], default='console', help='Front-end to use')
    parser.add_argument('--size', type=int, default=GRID_SIZE, help='Width and height of the grid')
    parser.add_argument('--seed', type=int, default=None, help='Seed of the tile generator')
    parser.add_argument('--log-level', default='WARNING', help='Logging level')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(name)s %(levelname)s %(message)s')

    config = GameConfig(size=args.size, seed=args.seed)
    grid = Grid(size=config.size, initial_tiles=config.initial_tiles, seed=config.seed)

    if args.mode == 'window':
        # ##>: Import here so the console mode does not load Matplotlib.
        from game2048.play.window import WindowBoard, WindowGame

        window_config = WindowConfig()
        WindowGame(grid, WindowBoard(size=grid.size, config=window_config), config=window_config).run()
    else:
        from game2048.play.console import ConsoleGame

        ConsoleGame(grid, config=ConsoleConfig()).run()


if __name__ == '__main__':
    main()
