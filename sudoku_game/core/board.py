"""Sudoku board representation for the standard 9x9 grid."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set


GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = tuple(range(1, GRID_SIZE + 1))


def _build_peer_index() -> Tuple[np.ndarray, np.ndarray]:
    """Precompute, for every cell, the coordinates of its 20 peers."""
    peer_rows = np.zeros((GRID_SIZE, GRID_SIZE, 20), dtype=np.intp)
    peer_cols = np.zeros((GRID_SIZE, GRID_SIZE, 20), dtype=np.intp)
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            peers = set()
            for i in range(GRID_SIZE):
                peers.add((row, i))
                peers.add((i, col))
            box_row = (row // BOX_SIZE) * BOX_SIZE
            box_col = (col // BOX_SIZE) * BOX_SIZE
            for i in range(BOX_SIZE):
                for j in range(BOX_SIZE):
                    peers.add((box_row + i, box_col + j))
            peers.remove((row, col))
            ordered = sorted(peers)
            peer_rows[row, col] = [r for r, _ in ordered]
            peer_cols[row, col] = [c for _, c in ordered]
    return peer_rows, peer_cols


_PEER_ROWS, _PEER_COLS = _build_peer_index()


def check_position(row: int, col: int) -> None:
    """Raise ValueError unless (row, col) lies on the 9x9 grid."""
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise ValueError(f"Cell must be within 0-{GRID_SIZE - 1}, got ({row}, {col})")


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells hold 0 (empty) or a digit 1-9. The grid is a numpy int32 array
    owned by the board; ``copy()`` gives an independent board.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates empty board.
        """
        self.size = GRID_SIZE
        self.box_size = BOX_SIZE

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (GRID_SIZE, GRID_SIZE):
                raise ValueError(f"Grid shape must be ({GRID_SIZE}, {GRID_SIZE}), got {grid.shape}")
            if grid.min() < 0 or grid.max() > GRID_SIZE:
                raise ValueError(f"Grid values must be 0-{GRID_SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > GRID_SIZE:
            raise ValueError(f"Value must be 0-{GRID_SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def box_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left cell of the box containing (row, col)."""
        return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = self.box_origin(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_box_index(self, row: int, col: int) -> int:
        """Get the box index (0 to 8) for a cell."""
        return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)

    def get_peer_values(self, row: int, col: int) -> np.ndarray:
        """Values of the 20 cells sharing a row, column or box with (row, col)."""
        return self.grid[_PEER_ROWS[row, col], _PEER_COLS[row, col]]

    def get_peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """
        Get all peer cell positions (those in same row, column, or box).
        Args:
            row, col: Cell position.
        Returns:
            Set of (r, c) tuples, excluding (row, col) itself.
        """
        return set(zip(_PEER_ROWS[row, col].tolist(), _PEER_COLS[row, col].tolist()))

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of digits that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_peer_values(row, col).tolist())
        return set(DIGITS) - used

    def is_valid_placement(self, row: int, col: int, value: int) -> bool:
        """
        Check whether value may stand at (row, col).

        The cell itself is not compared, so this answers the same question
        whether or not value is already written there.
        """
        if value == 0:
            return True
        return not np.any(self.get_peer_values(row, col) == value)

    def find_empty_cell(self) -> Optional[Tuple[int, int]]:
        """First empty cell in row-major order, or None when the grid is full."""
        empty = np.flatnonzero(self.grid == 0)
        if empty.size == 0:
            return None
        return divmod(int(empty[0]), GRID_SIZE)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions."""
        rows, cols = np.nonzero(self.grid == 0)
        return list(zip(rows.tolist(), cols.tolist()))

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        for i in range(GRID_SIZE):
            row = self.get_row(i)
            non_zero = row[row != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

            col = self.get_col(i)
            non_zero = col[col != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        for box_row in range(0, GRID_SIZE, BOX_SIZE):
            for box_col in range(0, GRID_SIZE, BOX_SIZE):
                box = self.get_box(box_row, box_col)
                non_zero = box[box != 0]
                if len(non_zero) != len(set(non_zero.tolist())):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        s = s.strip()
        if len(s) != GRID_SIZE * GRID_SIZE:
            raise ValueError(f"String length must be {GRID_SIZE * GRID_SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character in puzzle string: {c!r}")

        grid = np.array(values, dtype=np.int32).reshape(GRID_SIZE, GRID_SIZE)
        return cls(grid)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(GRID_SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(GRID_SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
