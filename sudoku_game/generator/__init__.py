"""Generator module for creating Sudoku puzzles."""

from .generator import (
    PuzzleGenerator,
    Difficulty,
    GeneratedPuzzle,
    RemovalConstraints,
    resolve_difficulty,
)

__all__ = [
    "PuzzleGenerator",
    "Difficulty",
    "GeneratedPuzzle",
    "RemovalConstraints",
    "resolve_difficulty",
]
