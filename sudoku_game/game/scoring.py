"""Score rules for a puzzle session."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    """
    Point values used by SudokuPuzzle.

    The starting score is ``points_per_clue`` for every given. A correct
    entry earns ``entry_points`` once per cell, plus ``section_bonus`` the
    first time each row, column or box it belongs to becomes fully correct.
    Wrong entries cost a penalty that grows as the difficulty value falls.
    """
    points_per_clue: int = 5
    entry_points: int = 5
    section_bonus: int = 10
    easy_penalty: int = 1
    medium_penalty: int = 2
    hard_penalty: int = 3
    easy_threshold: float = 0.7
    medium_threshold: float = 0.3

    def initial_score(self, clues: int) -> int:
        return clues * self.points_per_clue

    def penalty_for(self, difficulty: float) -> int:
        """Points lost for a wrong entry at this difficulty value."""
        if difficulty >= self.easy_threshold:
            return self.easy_penalty
        if difficulty >= self.medium_threshold:
            return self.medium_penalty
        return self.hard_penalty
