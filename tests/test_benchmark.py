"""Tests for the generation benchmark and its charts."""

import json

import matplotlib
matplotlib.use("Agg")

import pytest
from sudoku_game.benchmark import GenerationBenchmark, Visualizer
from sudoku_game.generator import Difficulty


@pytest.fixture(scope="module")
def benchmark():
    bench = GenerationBenchmark(puzzles_per_difficulty=2, difficulties=[1.0, 0.5], seed=1)
    bench.run(show_progress=False)
    return bench


class TestGenerationBenchmark:
    """Tests for running and summarizing the benchmark."""

    def test_default_difficulties(self):
        """Test that all presets are benchmarked by default."""
        assert GenerationBenchmark().difficulties == [1.0, 0.5, 0.1]

    def test_duplicate_difficulties_merged(self):
        """Test a preset and its number are benchmarked once, in first-seen order."""
        bench = GenerationBenchmark(
            puzzles_per_difficulty=1, difficulties=[0.5, 1.0, Difficulty.MEDIUM], seed=2
        )
        assert bench.difficulties == [0.5, 1.0]

        bench.run(show_progress=False)
        assert len(bench.results) == 2
        assert len(bench.puzzles[0.5]) == 1
        assert bench.get_summary()["results_by_difficulty"]["0.50"]["tested"] == 1

    def test_run(self, benchmark):
        """Test that every generated puzzle is timed and unique."""
        assert len(benchmark.results) == 4
        for result in benchmark.results:
            assert result.time_seconds > 0
            assert result.solution_probes > 0
            assert result.unique

    def test_summary(self, benchmark):
        """Test summary statistics grouped by difficulty."""
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 4
        assert set(summary["results_by_difficulty"]) == {"1.00", "0.50"}
        easy = summary["results_by_difficulty"]["1.00"]
        assert easy["tested"] == 2
        assert easy["unique_rate"] == 100
        assert easy["min_clues"] >= 45

    def test_save_results(self, benchmark, tmp_path):
        """Test that results, summary and puzzles are written."""
        benchmark.save_results(str(tmp_path))

        with open(tmp_path / "generation_results.json") as f:
            results = json.load(f)
        assert len(results) == 4
        assert (tmp_path / "generation_summary.json").exists()
        assert (tmp_path / "puzzles" / "0.50" / "puzzle_0.50_2.txt").exists()


class TestVisualizer:
    """Tests for chart output."""

    def test_generate_all(self, benchmark, tmp_path):
        """Test that every chart file is created."""
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        paths = visualizer.generate_all()

        assert len(paths) == 3
        for path in paths:
            assert (tmp_path / path.split("/")[-1]).exists()

    def test_summary_table(self, benchmark, tmp_path):
        """Test the markdown summary has a row per difficulty."""
        path = Visualizer(benchmark.results, str(tmp_path)).generate_summary_table()
        with open(path) as f:
            content = f.read()
        assert "| 0.50 |" in content
        assert "| 1.00 |" in content


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
