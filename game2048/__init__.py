# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

The engine lives in `game2048.core`; `game2048.play` provides a console and a matplotlib front-end.
"""

from .config import GRID_SIZE
from .core import Action, Grid

__all__ = ["Action", "Grid", "GRID_SIZE"]

__version__ = "0.1.0"
