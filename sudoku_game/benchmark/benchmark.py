"""Benchmarking framework for puzzle generation across difficulty values."""

from __future__ import annotations
import json
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ..core.validator import count_solutions
from ..generator import PuzzleGenerator, Difficulty, GeneratedPuzzle, resolve_difficulty
from ..generator.generator import DifficultyLike

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Measurements for a single generated puzzle."""
    puzzle_id: int
    difficulty: float
    clues: int
    target_clues: int
    time_seconds: float
    solution_probes: int
    solutions: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def unique(self) -> bool:
        return self.solutions == 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "clues": self.clues,
            "target_clues": self.target_clues,
            "time_seconds": self.time_seconds,
            "solution_probes": self.solution_probes,
            "solutions": self.solutions,
            "unique": self.unique,
            **self.extra
        }


class GenerationBenchmark:
    """
    Measures how the generator behaves as the difficulty value changes.

    For every difficulty value it generates a batch of puzzles, timing each
    one and recording clue count, removal probes and whether the result is
    unique (solutions are counted up to 2).
    """

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[DifficultyLike]] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_difficulty: Number of puzzles to generate per difficulty.
            difficulties: Presets or values to test (default: all presets).
            seed: Random seed for reproducibility.
        """
        self.puzzles_per_difficulty = puzzles_per_difficulty
        # Presets and numbers can name the same value; keep first occurrence.
        resolved = [resolve_difficulty(d) for d in (difficulties or list(Difficulty))]
        self.difficulties = list(dict.fromkeys(resolved))
        self.seed = seed
        self.generator = PuzzleGenerator(seed=seed)

        self.results: List[BenchmarkResult] = []
        self.puzzles: Dict[float, List[GeneratedPuzzle]] = {}

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        self.puzzles = {}

        total = len(self.difficulties) * self.puzzles_per_difficulty
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        for difficulty in self.difficulties:
            batch = self.puzzles.setdefault(difficulty, [])
            for puzzle_id in range(self.puzzles_per_difficulty):
                result, generated = self._run_single(puzzle_id, difficulty)
                self.results.append(result)
                batch.append(generated)
                pbar.update(1)

        pbar.close()
        logger.info("Benchmark generated %d puzzles", len(self.results))
        return self.results

    def _run_single(self, puzzle_id: int, difficulty: float) -> tuple[BenchmarkResult, GeneratedPuzzle]:
        """Generate and measure one puzzle."""
        start_time = time.perf_counter()
        generated = self.generator.generate(difficulty)
        elapsed = time.perf_counter() - start_time

        result = BenchmarkResult(
            puzzle_id=puzzle_id,
            difficulty=difficulty,
            clues=generated.clues,
            target_clues=generated.target_clues,
            time_seconds=elapsed,
            solution_probes=generated.solution_probes,
            solutions=count_solutions(generated.puzzle, cutoff=1),
        )
        return result, generated

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.results),
            "difficulties": self.difficulties,
            "results_by_difficulty": {}
        }

        for difficulty in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == difficulty]
            if not diff_results:
                continue

            clues = [r.clues for r in diff_results]
            times = [r.time_seconds for r in diff_results]
            probes = [r.solution_probes for r in diff_results]
            unique = [r for r in diff_results if r.unique]

            summary["results_by_difficulty"][f"{difficulty:.2f}"] = {
                "avg_clues": sum(clues) / len(clues),
                "min_clues": min(clues),
                "max_clues": max(clues),
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "avg_probes": sum(probes) / len(probes),
                "unique_rate": len(unique) / len(diff_results) * 100,
                "tested": len(diff_results)
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for difficulty, puzzles in self.puzzles.items():
            label = f"{difficulty:.2f}"
            diff_dir = os.path.join(puzzles_dir, label)
            PuzzleGenerator.save_to_folder(puzzles, diff_dir, prefix=f"puzzle_{label}")

        logger.info("Results and puzzles saved to %s", output_dir)
