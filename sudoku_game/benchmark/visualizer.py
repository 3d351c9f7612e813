"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for generation benchmark results.

    Plots how clue counts, generation time and uniqueness probes vary with
    the difficulty value.
    """

    BAR_COLOR = "#3498db"
    TARGET_COLOR = "#e74c3c"

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _difficulties(self) -> List[float]:
        return sorted(set(r.difficulty for r in self.results))

    def _labels(self) -> List[str]:
        return [f"{d:.2f}" for d in self._difficulties()]

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_clue_distribution(),
            self.plot_time_by_difficulty(),
            self.plot_probes_by_difficulty(),
        ]

    def plot_clue_distribution(self) -> str:
        """Box plot of clue counts per difficulty, with the target range mean overlaid."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        data = [[r.clues for r in self.results if r.difficulty == d] for d in difficulties]
        targets = [
            np.mean([r.target_clues for r in self.results if r.difficulty == d])
            for d in difficulties
        ]

        positions = np.arange(1, len(difficulties) + 1)
        bp = ax.boxplot(data, positions=positions, patch_artist=True)
        for patch in bp['boxes']:
            patch.set_facecolor(self.BAR_COLOR)
            patch.set_alpha(0.7)

        ax.plot(positions, targets, marker='o', linestyle='--',
                color=self.TARGET_COLOR, label='Mean target clues')

        ax.set_xticks(positions)
        ax.set_xticklabels(self._labels())
        ax.set_xlabel('Difficulty value', fontsize=12)
        ax.set_ylabel('Clues', fontsize=12)
        ax.set_title('Clue Count by Difficulty', fontsize=14, fontweight='bold')
        ax.legend()

        plt.tight_layout()
        path = os.path.join(self.output_dir, "clue_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_time_by_difficulty(self) -> str:
        """Bar chart of average generation time per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.difficulty == d])
            for d in self._difficulties()
        ]
        labels = self._labels()

        bars = ax.bar(labels, avg_times, color=self.BAR_COLOR, edgecolor='black', linewidth=0.5)

        for bar, elapsed in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{elapsed:.3f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Difficulty value', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Generation Time by Difficulty', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_difficulty.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_probes_by_difficulty(self) -> str:
        """Bar chart of average solution-count probes per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        avg_probes = [
            np.mean([r.solution_probes for r in self.results if r.difficulty == d])
            for d in self._difficulties()
        ]

        ax.bar(self._labels(), avg_probes, color=self.BAR_COLOR, edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Difficulty value', fontsize=12)
        ax.set_ylabel('Average Probes', fontsize=12)
        ax.set_title('Uniqueness Probes by Difficulty', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "probes_by_difficulty.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Generation Summary\n",
            "| Difficulty | Avg Clues | Min | Max | Avg Time | Avg Probes | Unique |",
            "|------------|-----------|-----|-----|----------|------------|--------|"
        ]

        for difficulty, label in zip(self._difficulties(), self._labels()):
            diff_results = [r for r in self.results if r.difficulty == difficulty]
            clues = [r.clues for r in diff_results]
            unique = sum(1 for r in diff_results if r.unique) / len(diff_results) * 100

            lines.append(
                f"| {label} | {np.mean(clues):.1f} | {min(clues)} | {max(clues)} | "
                f"{np.mean([r.time_seconds for r in diff_results]):.3f}s | "
                f"{np.mean([r.solution_probes for r in diff_results]):.1f} | {unique:.0f}% |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "generation_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
