"""Unit tests for puzzle generator."""

import numpy as np
import pytest
from sudoku_game.core.board import SudokuBoard
from sudoku_game.core.validator import count_solutions, has_unique_solution, validate_solution
from sudoku_game.generator import (
    PuzzleGenerator,
    Difficulty,
    RemovalConstraints,
    resolve_difficulty,
)

from test_board import TEST_SOLUTION


def unit_counts(fixed):
    """Givens per row, per column and per 3x3 region."""
    rows = fixed.sum(axis=1)
    cols = fixed.sum(axis=0)
    regions = fixed.reshape(3, 3, 3, 3).sum(axis=(1, 3)).flatten()
    return rows, cols, regions


class TestSolutionGeneration:
    """Tests for complete-grid generation."""

    def test_solution_is_valid(self):
        """Test that generated solutions are valid."""
        generator = PuzzleGenerator(seed=42)
        solution = generator.generate_solution()

        assert solution.is_solved()
        for i in range(9):
            assert sorted(solution.get_row(i).tolist()) == list(range(1, 10))
            assert sorted(solution.get_col(i).tolist()) == list(range(1, 10))

    def test_diagonal_boxes_are_permutations(self):
        """Test that each diagonal box holds 1-9 once."""
        generator = PuzzleGenerator(seed=3)
        board = SudokuBoard()
        generator._fill_diagonal_boxes(board)

        assert board.count_filled() == 27
        assert board.is_valid()
        for start in (0, 3, 6):
            assert sorted(board.get_box(start, start).tolist()) == list(range(1, 10))

    def test_seed_reproducible(self):
        """Test that the same seed gives the same puzzle."""
        first = PuzzleGenerator(seed=123).generate(0.5)
        second = PuzzleGenerator(seed=123).generate(0.5)

        assert first.solution == second.solution
        assert first.puzzle == second.puzzle

    def test_exhausted_attempts_raise(self):
        """Every attempt is cut off by the iteration ceiling."""
        generator = PuzzleGenerator(seed=1, max_attempts=2, max_solver_iterations=1)
        with pytest.raises(RuntimeError):
            generator.generate_solution()


class TestCellRemoval:
    """Tests for uniqueness-constrained clue removal."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_givens_match_solution(self, seed):
        """Test givens equal the solution and other cells are empty."""
        generated = PuzzleGenerator(seed=seed).generate(Difficulty.MEDIUM)
        puzzle, solution, fixed = generated.puzzle, generated.solution, generated.fixed

        assert solution.is_solved()
        assert np.array_equal(fixed, puzzle.grid != 0)
        assert np.array_equal(puzzle.grid[fixed], solution.grid[fixed])
        assert (puzzle.grid[~fixed] == 0).all()
        assert generated.clues == puzzle.count_filled()

    @pytest.mark.parametrize("difficulty", [0.3, 0.5, 0.8, 1.0])
    def test_unique_at_non_hard_difficulty(self, difficulty):
        """Test puzzles have one solution from difficulty 0.3 up."""
        generated = PuzzleGenerator(seed=17).generate(difficulty)

        assert has_unique_solution(generated.puzzle)
        assert validate_solution(generated.puzzle, generated.solution)

    def test_hard_allows_at_most_two_solutions(self):
        """Test hard puzzles have one or two solutions."""
        generated = PuzzleGenerator(seed=5).generate(0.1)
        assert 1 <= count_solutions(generated.puzzle, cutoff=2) <= 2
        assert validate_solution(generated.puzzle, generated.solution)

    @pytest.mark.parametrize("difficulty", [0.0, 0.1, 0.5, 1.0])
    def test_unit_floors_respected(self, difficulty):
        """Test no row, column or box drops below its floor."""
        constraints = RemovalConstraints.from_difficulty(difficulty)
        generated = PuzzleGenerator(seed=8).generate(difficulty)
        rows, cols, regions = unit_counts(generated.fixed)

        assert rows.min() >= constraints.min_row_col_clues
        assert cols.min() >= constraints.min_row_col_clues
        assert regions.min() >= constraints.min_region_clues

    @pytest.mark.parametrize("seed", [10, 11, 12])
    def test_easiest_clue_count(self, seed):
        """The region floor of 5 keeps at least 45 givens."""
        generated = PuzzleGenerator(seed=seed).generate(1.0)
        assert 40 <= generated.target_clues <= 50
        assert generated.clues >= 45
        assert generated.clues >= generated.target_clues

    def test_harder_has_fewer_clues(self):
        """Test that harder puzzles have fewer clues."""
        generator = PuzzleGenerator(seed=42)

        easy = generator.generate(Difficulty.EASY)
        hard = generator.generate(Difficulty.HARD)

        assert easy.clues > hard.clues

    def test_solution_not_modified(self):
        """Test that removal works on a copy of the solution."""
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        generated = PuzzleGenerator(seed=4).remove_cells(solution, 0.5)

        assert solution.to_string() == TEST_SOLUTION
        assert generated.solution == solution
        assert generated.solution_probes > 0

    def test_two_calls_differ(self):
        """Test that consecutive puzzles differ."""
        generator = PuzzleGenerator(seed=9)
        first = generator.generate(0.5)
        second = generator.generate(0.5)
        assert first.puzzle != second.puzzle

    def test_generate_batch(self):
        """Test generating multiple puzzles."""
        puzzles = PuzzleGenerator(seed=42).generate_batch(2, Difficulty.EASY)
        assert len(puzzles) == 2
        for generated in puzzles:
            assert generated.puzzle.is_valid()

    def test_save_to_folder(self, tmp_path):
        """Test that puzzles are written one file each."""
        puzzles = PuzzleGenerator(seed=6).generate_batch(2, Difficulty.EASY)
        PuzzleGenerator.save_to_folder(puzzles, str(tmp_path), prefix="easy")

        lines = (tmp_path / "easy_1.txt").read_text().splitlines()
        assert lines[0] == puzzles[0].puzzle.to_string()
        assert lines[1] == puzzles[0].solution.to_string()


class TestDifficultyLevels:
    """Test difficulty presets and derived constraints."""

    def test_preset_values(self):
        """Test preset difficulty values."""
        assert Difficulty.EASY.slider == 1.0
        assert Difficulty.MEDIUM.slider == 0.5
        assert Difficulty.HARD.slider < 0.3

    def test_easiest_constraints(self):
        """Test constraints at difficulty 1.0."""
        c = RemovalConstraints.from_difficulty(1.0)
        assert (c.min_clues, c.max_clues) == (40, 50)
        assert c.min_region_clues == 5
        assert c.min_row_col_clues == 4
        assert c.max_solutions == 1

    def test_hardest_constraints(self):
        """Test constraints at difficulty 0.0."""
        c = RemovalConstraints.from_difficulty(0.0)
        assert (c.min_clues, c.max_clues) == (20, 30)
        assert c.min_region_clues == 2
        assert c.min_row_col_clues == 2
        assert c.max_solutions == 2

    def test_medium_constraints(self):
        """Test constraints at the medium preset."""
        c = RemovalConstraints.from_difficulty(Difficulty.MEDIUM)
        assert (c.min_clues, c.max_clues) == (30, 40)
        assert c.min_region_clues == 3
        assert c.min_row_col_clues == 3
        assert c.max_solutions == 1

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_out_of_range_rejected(self, value):
        """Test difficulties outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            resolve_difficulty(value)
        with pytest.raises(ValueError):
            PuzzleGenerator(seed=1).generate(value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
