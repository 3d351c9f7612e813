"""Sudoku puzzle generator with difficulty-calibrated clue removal."""

from __future__ import annotations
import logging
import os
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

import numpy as np

from ..core.board import SudokuBoard, GRID_SIZE, BOX_SIZE, DIGITS
from ..core.validator import count_solutions
from ..solvers.backtracking_solver import BacktrackingSolver

logger = logging.getLogger(__name__)

# Below this difficulty value a removal may leave up to two solutions.
HARD_THRESHOLD = 0.3


class Difficulty(Enum):
    """Named difficulty presets. 0.0 is hardest, 1.0 is easiest."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def slider(self) -> float:
        """Difficulty value in [0, 1] for this preset."""
        values = {
            Difficulty.EASY: 1.0,
            Difficulty.MEDIUM: 0.5,
            Difficulty.HARD: 0.1,
        }
        return values[self]


DifficultyLike = Union[float, int, Difficulty]


def resolve_difficulty(difficulty: DifficultyLike) -> float:
    """Turn a preset or number into a difficulty value, rejecting values outside [0, 1]."""
    if isinstance(difficulty, Difficulty):
        return difficulty.slider
    value = float(difficulty)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Difficulty must be within [0, 1], got {difficulty}")
    return value


@dataclass(frozen=True)
class RemovalConstraints:
    """Clue targets and per-unit floors for one difficulty value."""
    min_clues: int
    max_clues: int
    min_region_clues: int
    min_row_col_clues: int
    max_solutions: int

    @classmethod
    def from_difficulty(cls, difficulty: DifficultyLike) -> RemovalConstraints:
        """
        Derive the constraints for a difficulty value.

        Harder settings target fewer clues and lower the floors; below
        HARD_THRESHOLD a second solution is tolerated.
        """
        value = resolve_difficulty(difficulty)
        return cls(
            min_clues=int(20 + value * 20),
            max_clues=int(30 + value * 20),
            min_region_clues=int(2 + value * 3),
            min_row_col_clues=int(2 + value * 2),
            max_solutions=2 if value < HARD_THRESHOLD else 1,
        )


@dataclass
class GeneratedPuzzle:
    """A puzzle, its reference solution and the givens mask."""
    puzzle: SudokuBoard
    solution: SudokuBoard
    fixed: np.ndarray
    difficulty: float
    target_clues: int
    solution_probes: int = 0

    @property
    def clues(self) -> int:
        return int(self.fixed.sum())


class PuzzleGenerator:
    """
    Generator for Sudoku puzzles driven by a difficulty value.

    Algorithm:
    1. Seed the three diagonal boxes with shuffled permutations of 1-9
    2. Complete the grid with randomized backtracking
    3. Remove cells in random order while the solution count stays within
       bounds and no row, column or box drops below its floor

    A single ``random.Random`` drives every random choice, so a seed makes
    the whole pipeline reproducible.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_attempts: int = 10,
        max_solver_iterations: Optional[int] = 50_000
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility (ignored when rng is given).
            rng: Random source to use directly.
            max_attempts: Complete-grid attempts before giving up.
            max_solver_iterations: Per-attempt ceiling for the backtracking
                                   search; a stuck attempt is regenerated.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_attempts = max_attempts
        self.solver = BacktrackingSolver(
            rng=self.rng,
            max_iterations=max_solver_iterations,
            track_memory=False
        )

    def generate(self, difficulty: DifficultyLike = Difficulty.MEDIUM) -> GeneratedPuzzle:
        """
        Generate a puzzle with the specified difficulty.

        Args:
            difficulty: Preset or value in [0, 1].

        Returns:
            GeneratedPuzzle holding puzzle, solution and givens mask.
        """
        value = resolve_difficulty(difficulty)
        solution = self.generate_solution()
        result = self.remove_cells(solution, value)
        logger.info(
            "Generated puzzle at difficulty %.2f with %d clues (target %d)",
            value, result.clues, result.target_clues
        )
        return result

    def generate_batch(self, count: int, difficulty: DifficultyLike = Difficulty.MEDIUM) -> List[GeneratedPuzzle]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty.

        Returns:
            List of GeneratedPuzzle objects.
        """
        return [self.generate(difficulty) for _ in range(count)]

    def generate_solution(self) -> SudokuBoard:
        """
        Generate a complete valid Sudoku grid.

        Each attempt starts from an empty grid; a failed attempt is thrown
        away rather than repaired.

        Raises:
            RuntimeError: If every attempt fails.
        """
        for attempt in range(1, self.max_attempts + 1):
            board = SudokuBoard()
            self._fill_diagonal_boxes(board)
            solution, stats = self.solver.solve(board)
            if solution is not None:
                logger.debug(
                    "Completed grid on attempt %d after %d iterations",
                    attempt, stats.iterations
                )
                return solution
            logger.debug(
                "Grid attempt %d failed after %d iterations; regenerating",
                attempt, stats.iterations
            )

        raise RuntimeError(f"Could not generate a complete grid in {self.max_attempts} attempts")

    def _fill_diagonal_boxes(self, board: SudokuBoard) -> None:
        """Fill the diagonal boxes, which share no row, column or box."""
        for box_idx in range(BOX_SIZE):
            start = box_idx * BOX_SIZE
            self._fill_box(board, start, start)

    def _fill_box(self, board: SudokuBoard, start_row: int, start_col: int) -> None:
        """Fill a single box with random values."""
        values = list(DIGITS)
        self.rng.shuffle(values)

        idx = 0
        for i in range(BOX_SIZE):
            for j in range(BOX_SIZE):
                board.set(start_row + i, start_col + j, values[idx])
                idx += 1

    def remove_cells(self, solution: SudokuBoard, difficulty: DifficultyLike) -> GeneratedPuzzle:
        """
        Remove cells from a complete solution to create a puzzle.

        Every cell starts as a given. Cells are visited once each in random
        order; a removal is kept only if the unit floors hold and the
        solution count stays between 1 and the allowed maximum.

        Args:
            solution: A complete, valid grid. Not modified.
            difficulty: Preset or value in [0, 1].

        Returns:
            GeneratedPuzzle with the reduced puzzle and its givens mask.
        """
        value = resolve_difficulty(difficulty)
        constraints = RemovalConstraints.from_difficulty(value)
        target_clues = self.rng.randint(constraints.min_clues, constraints.max_clues)

        puzzle = solution.copy()
        fixed = np.ones((GRID_SIZE, GRID_SIZE), dtype=bool)

        current_clues = GRID_SIZE * GRID_SIZE
        clues_per_row = [GRID_SIZE] * GRID_SIZE
        clues_per_col = [GRID_SIZE] * GRID_SIZE
        clues_per_region = [GRID_SIZE] * GRID_SIZE

        cells = [(i, j) for i in range(GRID_SIZE) for j in range(GRID_SIZE)]
        self.rng.shuffle(cells)

        probes = 0
        for row, col in cells:
            if current_clues <= target_clues:
                break

            original_value = puzzle.get(row, col)
            if original_value == 0:
                continue

            region = puzzle.get_box_index(row, col)
            if clues_per_region[region] <= constraints.min_region_clues:
                continue
            if clues_per_row[row] <= constraints.min_row_col_clues:
                continue
            if clues_per_col[col] <= constraints.min_row_col_clues:
                continue

            puzzle.clear(row, col)
            solutions = count_solutions(puzzle, cutoff=constraints.max_solutions)
            probes += 1

            if solutions == 0 or solutions > constraints.max_solutions:
                puzzle.set(row, col, original_value)
                fixed[row, col] = True
            else:
                fixed[row, col] = False
                current_clues -= 1
                clues_per_region[region] -= 1
                clues_per_row[row] -= 1
                clues_per_col[col] -= 1

        logger.debug(
            "Removal finished: %d clues left (target %d) after %d probes",
            current_clues, target_clues, probes
        )

        return GeneratedPuzzle(
            puzzle=puzzle,
            solution=solution.copy(),
            fixed=fixed,
            difficulty=value,
            target_clues=target_clues,
            solution_probes=probes
        )

    @staticmethod
    def save_to_folder(puzzles: List[GeneratedPuzzle], folder_path: str, prefix: str = "puzzle") -> None:
        """
        Save a list of puzzles to a folder as individual text files.

        Args:
            puzzles: List of GeneratedPuzzle objects.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").
        """
        os.makedirs(folder_path, exist_ok=True)

        for i, generated in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(generated.puzzle.to_string())
                f.write("\n")
                f.write(generated.solution.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(generated.puzzle))
