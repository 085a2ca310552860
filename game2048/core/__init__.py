# -*- coding: utf-8 -*-
"""
Rule engine of the 2048 game.

It provides the `Action` enumeration of move directions and the `Grid` class holding the tiles, resolving
moves, spawning random tiles and detecting the end of the game.
"""

from .action import Action
from .grid import Grid

__all__ = ["Action", "Grid"]
