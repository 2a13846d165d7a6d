"""A timed grid puzzle: draw one path from the start cell through every cell to the goal."""

__version__ = "0.1.0"