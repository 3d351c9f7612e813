"""Puzzle session state: working grid, givens, scoring and highlighting."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..core.board import SudokuBoard, GRID_SIZE, check_position
from ..generator.generator import (
    PuzzleGenerator,
    Difficulty,
    DifficultyLike,
    GeneratedPuzzle,
    resolve_difficulty,
)
from .scoring import ScoringRules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HighlightState:
    """Digit picked for highlighting (0 = none) and whether it is shown."""
    digit: int = 0
    visible: bool = False


class SudokuPuzzle:
    """
    A single game session.

    Owns the working grid, the reference solution, the givens mask and the
    score bookkeeping. Starting a new game replaces all of it at once via
    ``new_puzzle``; nothing is reset piecemeal.

    Example:
        >>> game = SudokuPuzzle(difficulty=0.5, generator=PuzzleGenerator(seed=1))
        >>> row, col = game.empty_cells()[0]
        >>> game.set_number(row, col, game.solution_at(row, col))
        True
    """

    def __init__(
        self,
        difficulty: DifficultyLike = Difficulty.MEDIUM,
        generator: Optional[PuzzleGenerator] = None,
        rules: Optional[ScoringRules] = None
    ):
        """
        Generate the first puzzle.

        Args:
            difficulty: Preset or value in [0, 1], 0 hardest.
            generator: Puzzle source; share one to reuse its random state.
            rules: Point values (default: ScoringRules()).
        """
        self.generator = generator if generator is not None else PuzzleGenerator()
        self.rules = rules if rules is not None else ScoringRules()
        self.new_puzzle(difficulty)

    @classmethod
    def from_boards(
        cls,
        puzzle: SudokuBoard,
        solution: SudokuBoard,
        difficulty: DifficultyLike = Difficulty.MEDIUM,
        rules: Optional[ScoringRules] = None
    ) -> SudokuPuzzle:
        """
        Build a session from an explicit puzzle and its solution.

        Every filled cell of ``puzzle`` becomes a given.

        Raises:
            ValueError: If the solution is not a complete valid grid or the
                        givens disagree with it.
        """
        if not solution.is_solved():
            raise ValueError("Solution must be a complete valid grid")
        fixed = puzzle.grid != 0
        if (puzzle.grid[fixed] != solution.grid[fixed]).any():
            raise ValueError("Puzzle givens do not match the solution")

        value = resolve_difficulty(difficulty)
        session = cls.__new__(cls)
        session.generator = PuzzleGenerator()
        session.rules = rules if rules is not None else ScoringRules()
        session._load(GeneratedPuzzle(
            puzzle=puzzle.copy(),
            solution=solution.copy(),
            fixed=fixed,
            difficulty=value,
            target_clues=int(fixed.sum()),
        ))
        return session

    def new_puzzle(self, difficulty: DifficultyLike) -> None:
        """Discard the current game and generate a fresh one."""
        self._load(self.generator.generate(difficulty))

    def _load(self, generated: GeneratedPuzzle) -> None:
        self.difficulty = generated.difficulty
        self.grid = generated.puzzle.copy()
        self.solution = generated.solution.copy()
        self.fixed = generated.fixed.copy()
        self.scored = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)
        self.wrong_answers = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)
        self._completed_rows = set()
        self._completed_cols = set()
        self._completed_boxes = set()
        self.correct_inputs = 0
        self.total_attempts = 0
        self.highlight = HighlightState()
        self.initialize_score()

    def initialize_score(self) -> None:
        """Reset the score to the per-clue starting value."""
        self._score = self.rules.initial_score(self.fixed_count)

    # Edits

    def set_number(self, row: int, col: int, digit: int) -> bool:
        """
        Write a digit (or 0 to clear) into a non-fixed cell.

        Entries are stored even when they clash with peers. Scoring:
        a correct digit earns entry points once per cell, plus section
        bonuses the first time a row, column or box becomes fully correct;
        a wrong digit costs the difficulty penalty unless it repeats the
        last wrong digit entered at this cell.

        Args:
            row, col: Cell position, 0-8.
            digit: 0-9.

        Returns:
            False if the cell is a given (nothing changes), else True.

        Raises:
            ValueError: For coordinates or digits out of range, or a
                        digit that is not an integer.
        """
        check_position(row, col)
        if not isinstance(digit, (int, np.integer)) or isinstance(digit, bool):
            raise ValueError(f"Digit must be an integer, got {digit!r}")
        if not 0 <= digit <= GRID_SIZE:
            raise ValueError(f"Digit must be 0-{GRID_SIZE}, got {digit}")

        if self.fixed[row, col]:
            logger.debug("Rejected edit of given at (%d, %d)", row, col)
            return False

        self.grid.set(row, col, digit)
        if digit == 0:
            return True

        self.total_attempts += 1
        if digit == self.solution.get(row, col):
            self.correct_inputs += 1
            self._award_correct(row, col)
        else:
            self._penalize_wrong(row, col, digit)

        if self.is_solved():
            logger.info("Puzzle solved with score %d", self._score)
        return True

    def _award_correct(self, row: int, col: int) -> None:
        if not self.scored[row, col]:
            self.scored[row, col] = True
            self._score += self.rules.entry_points

        # Sections can first complete through a cell that was scored earlier.
        if row not in self._completed_rows and self.is_row_complete(row):
            self._completed_rows.add(row)
            self._score += self.rules.section_bonus
        if col not in self._completed_cols and self.is_column_complete(col):
            self._completed_cols.add(col)
            self._score += self.rules.section_bonus
        box = self.grid.get_box_index(row, col)
        if box not in self._completed_boxes and self.is_box_complete(row, col):
            self._completed_boxes.add(box)
            self._score += self.rules.section_bonus

    def _penalize_wrong(self, row: int, col: int, digit: int) -> None:
        if self.wrong_answers[row, col] == digit:
            return
        self.wrong_answers[row, col] = digit
        self._score -= self.rules.penalty_for(self.difficulty)

    # Section checks

    def is_row_complete(self, row: int) -> bool:
        return bool(np.array_equal(self.grid.get_row(row), self.solution.get_row(row)))

    def is_column_complete(self, col: int) -> bool:
        return bool(np.array_equal(self.grid.get_col(col), self.solution.get_col(col)))

    def is_box_complete(self, row: int, col: int) -> bool:
        """True if the box containing (row, col) matches the solution."""
        return bool(np.array_equal(self.grid.get_box(row, col), self.solution.get_box(row, col)))

    def is_solved(self) -> bool:
        """True iff every cell equals the solution."""
        return self.grid == self.solution

    # Queries

    def digit_at(self, row: int, col: int) -> int:
        check_position(row, col)
        return self.grid.get(row, col)

    def solution_at(self, row: int, col: int) -> int:
        check_position(row, col)
        return self.solution.get(row, col)

    def is_editable(self, row: int, col: int) -> bool:
        check_position(row, col)
        return not self.fixed[row, col]

    def is_valid_placement(self, row: int, col: int) -> bool:
        """
        Whether the current value at (row, col) is free of peer conflicts.

        Empty cells are always valid. Nothing is mutated.
        """
        check_position(row, col)
        return self.grid.is_valid_placement(row, col, self.grid.get(row, col))

    def conflicting_cells(self) -> List[Tuple[int, int]]:
        """Filled cells whose value clashes with a peer."""
        return [
            (row, col)
            for row in range(GRID_SIZE)
            for col in range(GRID_SIZE)
            if not self.grid.is_empty(row, col) and not self.is_valid_placement(row, col)
        ]

    def empty_cells(self) -> List[Tuple[int, int]]:
        return self.grid.get_empty_cells()

    @property
    def score(self) -> int:
        return self._score

    @property
    def fixed_count(self) -> int:
        return int(self.fixed.sum())

    @property
    def accuracy_percentage(self) -> float:
        """Share of non-zero entries that matched the solution, in percent."""
        if self.total_attempts == 0:
            return 0.0
        return self.correct_inputs / self.total_attempts * 100.0

    def digit_counts(self) -> np.ndarray:
        """How many times each digit 1-9 appears on the working grid (index 0 is digit 1)."""
        values = self.grid.grid[self.grid.grid > 0]
        return np.bincount(values, minlength=GRID_SIZE + 1)[1:]

    def completed_digits(self) -> List[int]:
        """Digits already placed nine times."""
        return [int(d) + 1 for d in np.flatnonzero(self.digit_counts() == GRID_SIZE)]

    # Highlighting

    @property
    def highlight_state(self) -> HighlightState:
        return self.highlight

    def toggle_highlight(self, digit: int) -> HighlightState:
        """
        Show highlighting for a digit, or hide it if that digit is shown.

        Raises:
            ValueError: If digit is not 1-9.
        """
        if not 1 <= digit <= GRID_SIZE:
            raise ValueError(f"Highlight digit must be 1-{GRID_SIZE}, got {digit}")
        if self.highlight.digit == digit and self.highlight.visible:
            self.highlight = HighlightState(digit=digit, visible=False)
        else:
            self.highlight = HighlightState(digit=digit, visible=True)
        return self.highlight

    def clear_highlight(self) -> None:
        self.highlight = HighlightState()

    def highlighted_cells(self) -> List[Tuple[int, int]]:
        """Cells currently holding the visible highlighted digit."""
        if not self.highlight.visible:
            return []
        rows, cols = np.nonzero(self.grid.grid == self.highlight.digit)
        return list(zip(rows.tolist(), cols.tolist()))

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the session for serialization."""
        return {
            "difficulty": self.difficulty,
            "puzzle": self.grid.to_string(),
            "solution": self.solution.to_string(),
            "fixed": self.fixed.astype(int).tolist(),
            "clues": self.fixed_count,
            "score": self._score,
            "solved": self.is_solved(),
        }

    def __str__(self) -> str:
        return str(self.grid)

    def __repr__(self) -> str:
        return (
            f"SudokuPuzzle(difficulty={self.difficulty:.2f}, "
            f"clues={self.fixed_count}, score={self._score})"
        )
