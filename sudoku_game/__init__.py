"""Sudoku puzzle engine: generation, uniqueness-checked clue removal and game scoring."""

__version__ = "1.0.0"
