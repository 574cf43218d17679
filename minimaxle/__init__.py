"""Worst-case (minimax) solver for Wordle-style word puzzles."""

__version__ = "0.1.0"
