"""A two-player chess game played in the terminal, with its board and move logic."""

__version__ = "0.1.0"
__all__ = ["board", "game"]