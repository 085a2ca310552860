# -*- coding: utf-8 -*-
"""
This module provides helpers for the front-ends of the game.

It includes the colour mapping of tile values and a `KeyDebouncer` filtering repeated key presses.
"""

from .debounce import KeyDebouncer
from .palette import cell_color, cell_lightness

__all__ = ["KeyDebouncer", "cell_color", "cell_lightness"]
