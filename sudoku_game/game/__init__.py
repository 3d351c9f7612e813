"""Game session state built on the generator."""

from .puzzle import SudokuPuzzle, HighlightState
from .scoring import ScoringRules
from .theme import Theme, ThemePalette

__all__ = ["SudokuPuzzle", "HighlightState", "ScoringRules", "Theme", "ThemePalette"]
