"""Validation and solution counting for Sudoku grids."""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from .board import GRID_SIZE, BOX_SIZE, DIGITS

if TYPE_CHECKING:
    from .board import SudokuBoard


# Bits 1..9 set; bit 0 unused so a digit is its own bit index.
_ALL_DIGITS = sum(1 << d for d in DIGITS)


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if value may stand at (row, col) without clashing with a peer.

    The cell itself is skipped, so the answer does not depend on what is
    currently written at (row, col).

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if no other cell in the row, column or box holds value.
    """
    if value < 1 or value > GRID_SIZE:
        return False
    return board.is_valid_placement(row, col, value)


def count_solutions(board: SudokuBoard, cutoff: int = 1) -> int:
    """
    Count the number of solutions for a puzzle, stopping past cutoff.

    Works on private bitmask copies of the board, so the caller's grid is
    never touched. The search stops as soon as more than ``cutoff``
    complete assignments have been found, so the result is at most
    ``cutoff + 1``. Branch order does not change the count; the most
    constrained empty cell is expanded first.

    Args:
        board: The puzzle board.
        cutoff: Largest count that still needs to be told apart.

    Returns:
        Number of solutions found (0 to cutoff + 1).
    """
    rows = [0] * GRID_SIZE
    cols = [0] * GRID_SIZE
    boxes = [0] * GRID_SIZE
    empty: List[Tuple[int, int, int]] = []

    for r, line in enumerate(board.grid.tolist()):
        for c, value in enumerate(line):
            b = (r // BOX_SIZE) * BOX_SIZE + c // BOX_SIZE
            if value == 0:
                empty.append((r, c, b))
                continue
            bit = 1 << value
            if rows[r] & bit or cols[c] & bit or boxes[b] & bit:
                # Givens already clash
                return 0
            rows[r] |= bit
            cols[c] |= bit
            boxes[b] |= bit

    count = 0

    def backtrack() -> bool:
        """Returns True once the cutoff has been passed."""
        nonlocal count
        if not empty:
            count += 1
            return count > cutoff

        # MRV heuristic - pick cell with fewest candidates
        best_index = 0
        best_mask = 0
        min_candidates = GRID_SIZE + 1
        for index, (r, c, b) in enumerate(empty):
            mask = _ALL_DIGITS & ~(rows[r] | cols[c] | boxes[b])
            candidates = bin(mask).count("1")
            if candidates < min_candidates:
                min_candidates = candidates
                best_index = index
                best_mask = mask
                if candidates <= 1:
                    break

        if min_candidates == 0:
            return False

        cell = empty.pop(best_index)
        r, c, b = cell
        for digit in DIGITS:
            bit = 1 << digit
            if not best_mask & bit:
                continue
            rows[r] |= bit
            cols[c] |= bit
            boxes[b] |= bit
            done = backtrack()
            rows[r] &= ~bit
            cols[c] &= ~bit
            boxes[b] &= ~bit
            if done:
                break
        else:
            done = False

        empty.insert(best_index, cell)
        return done

    backtrack()
    return count


def has_unique_solution(board: SudokuBoard) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Args:
        board: The puzzle board.

    Returns:
        True if the puzzle has exactly one solution.
    """
    return count_solutions(board, cutoff=1) == 1


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    clues = puzzle.grid != 0
    if (puzzle.grid[clues] != solution.grid[clues]).any():
        return False

    return solution.is_solved()
