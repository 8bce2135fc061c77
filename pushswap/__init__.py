"""Two-stack integer sorting with a restricted set of moves, plus small string, byte and list helpers."""

__version__ = "1.0.0"