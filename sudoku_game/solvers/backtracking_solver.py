"""Randomized depth-first backtracking used to build complete grids."""

from __future__ import annotations
import random
from typing import Optional

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, DIGITS


class SearchLimitReached(Exception):
    """Raised internally when the iteration ceiling is hit."""


class BacktrackingSolver(BaseSolver):
    """
    Recursive backtracking over the first empty cell in row-major order.

    Digits are tried in a freshly shuffled order at every cell, which is
    what makes generated grids differ from run to run. Pass a seeded
    ``random.Random`` to make the search reproducible.
    """

    name = "Randomized Backtracking"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_iterations: Optional[int] = None,
        track_memory: bool = True
    ):
        """
        Initialize the solver.

        Args:
            rng: Random source for digit ordering (default: fresh Random()).
            max_iterations: Give up (return None) after this many recursive
                            calls. None means search exhaustively.
            track_memory: Forwarded to BaseSolver.
        """
        super().__init__(track_memory=track_memory)
        self.rng = rng if rng is not None else random.Random()
        self.max_iterations = max_iterations

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve in place on the copy handed over by BaseSolver.solve."""
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0

        if not board.is_valid():
            return None

        try:
            solved = self._backtrack(board)
        except SearchLimitReached:
            self.stats.extra["error"] = "iteration limit reached"
            return None

        return board if solved else None

    def _backtrack(self, board: SudokuBoard) -> bool:
        """
        Fill the grid recursively.

        Returns True when no empty cell remains. On failure every cell this
        call filled has been reset to empty.
        """
        self.stats.iterations += 1
        if self.max_iterations is not None and self.stats.iterations > self.max_iterations:
            raise SearchLimitReached()

        cell = board.find_empty_cell()
        if cell is None:
            return True

        row, col = cell
        self.stats.nodes_explored += 1

        digits = list(DIGITS)
        self.rng.shuffle(digits)

        for digit in digits:
            if not board.is_valid_placement(row, col, digit):
                continue
            board.set(row, col, digit)
            if self._backtrack(board):
                return True
            board.clear(row, col)
            self.stats.backtracks += 1

        return False
