"""Unit tests for the backtracking solver."""

import random

import pytest
from sudoku_game.core.board import SudokuBoard
from sudoku_game.solvers import BacktrackingSolver

from test_board import TEST_PUZZLE, TEST_SOLUTION


class TestBacktrackingSolver:
    """Tests for the randomized backtracking solver."""

    def test_solve_puzzle(self):
        """Test solving a known puzzle."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = BacktrackingSolver(rng=random.Random(0))

        solution, stats = solver.solve(board)

        assert stats.solved
        assert solution is not None
        assert solution.is_solved()
        assert solution.to_string() == TEST_SOLUTION

    def test_input_board_untouched(self):
        """Test that the caller's board is not modified."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        BacktrackingSolver(rng=random.Random(0)).solve(board)
        assert board.to_string() == TEST_PUZZLE

    def test_stats_collected(self):
        """Test that stats are collected."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = BacktrackingSolver(rng=random.Random(1))

        solution, stats = solver.solve(board)

        assert stats.time_seconds > 0
        assert stats.iterations > 0
        assert stats.nodes_explored >= board.count_empty()
        assert stats.memory_bytes > 0

    def test_memory_tracking_can_be_disabled(self):
        """Test memory is not measured when tracking is off."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = BacktrackingSolver(rng=random.Random(1), track_memory=False)
        _, stats = solver.solve(board)
        assert stats.solved
        assert stats.memory_bytes == 0

    def test_fills_nearly_empty_grid(self):
        """A grid with only one box filled still completes to a valid solution."""
        board = SudokuBoard()
        for i, value in enumerate([1, 2, 3, 4, 5, 6, 7, 8, 9]):
            board.set(i // 3, i % 3, value)

        solution, stats = BacktrackingSolver(rng=random.Random(7)).solve(board)

        assert stats.solved
        assert solution.get(1, 1) == 5

    def test_seed_controls_result(self):
        """Same seed, same grid; the digit order comes from the injected rng."""
        board = SudokuBoard()
        for i, value in enumerate([9, 8, 7, 6, 5, 4, 3, 2, 1]):
            board.set(i // 3, i % 3, value)

        first, _ = BacktrackingSolver(rng=random.Random(11)).solve(board)
        second, _ = BacktrackingSolver(rng=random.Random(11)).solve(board)

        assert first is not None
        assert first == second

    def test_iteration_limit(self):
        """Hitting the ceiling reports failure instead of searching on."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = BacktrackingSolver(rng=random.Random(0), max_iterations=3)

        solution, stats = solver.solve(board)

        assert solution is None
        assert not stats.solved
        assert stats.extra["error"] == "iteration limit reached"

    def test_invalid_puzzle(self):
        """Conflicting givens cannot be solved."""
        board = SudokuBoard.from_string("55" + TEST_PUZZLE[2:])
        solution, stats = BacktrackingSolver().solve(board)
        assert solution is None
        assert not stats.solved

    def test_stats_to_dict(self):
        """Test stats serialization."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        _, stats = BacktrackingSolver(rng=random.Random(0)).solve(board)
        data = stats.to_dict()
        assert data["algorithm"] == BacktrackingSolver.name
        assert data["solved"] is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
