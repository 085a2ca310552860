# -*- coding: utf-8 -*-
"""
Front-ends driving a game of 2048.

`ConsoleGame` plays in a terminal. The Matplotlib front-end lives in `game2048.play.window` and is not
imported here so that the console does not load Matplotlib.
"""

from .console import ConsoleGame, parse_action

__all__ = ["ConsoleGame", "parse_action"]
