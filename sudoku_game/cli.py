"""Command-line interface for the Sudoku puzzle engine."""

import argparse
import json
import logging
import random
import sys

from .core.board import SudokuBoard
from .core.validator import count_solutions
from .generator import PuzzleGenerator, Difficulty, resolve_difficulty
from .solvers import BacktrackingSolver


def parse_difficulty(text: str) -> float:
    """argparse type: a preset name (easy/medium/hard) or a number in [0, 1]."""
    try:
        return Difficulty(text.lower()).slider
    except ValueError:
        pass
    try:
        return resolve_difficulty(float(text))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected easy, medium, hard or a number in [0, 1], got {text!r}"
        )


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator, Validator & Scorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium puzzles
  sudoku-game generate --count 5 --difficulty medium

  # Generate one puzzle at difficulty value 0.8 and keep the solution
  sudoku-game generate -d 0.8 --show-solution

  # Check and solve a puzzle
  sudoku-game solve --puzzle "530070000600195000..."

  # Measure generation across difficulty values
  sudoku-game benchmark --puzzles 10 --difficulties 0.1 0.5 1.0
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d", type=parse_difficulty, default=Difficulty.MEDIUM.slider,
        help="easy, medium, hard or a value in [0, 1], 0 hardest (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--show-solution", action="store_true",
        help="Print the solution below each puzzle"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Check and solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for the solver's digit order"
    )
    solve_parser.add_argument(
        "--max-iterations", type=int, default=200_000,
        help="Give up after this many search steps (default: 200000)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulties", "-d", type=parse_difficulty, nargs="+", default=None,
        help="Difficulty presets or values to test (default: easy medium hard)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_generate(args):
    """Handle the generate command."""
    generator = PuzzleGenerator(seed=args.seed)

    print(f"Generating {args.count} puzzle(s) at difficulty {args.difficulty:.2f}...")
    all_puzzles = []

    for i in range(1, args.count + 1):
        generated = generator.generate(args.difficulty)
        all_puzzles.append({
            "difficulty": generated.difficulty,
            "index": i,
            "puzzle": generated.puzzle.to_string(),
            "solution": generated.solution.to_string(),
            "clues": generated.clues
        })

        print(f"\n--- Puzzle {i} ({generated.clues} clues) ---")
        print(generated.puzzle)
        if args.show_solution:
            print("Solution:")
            print(generated.solution)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solutions = count_solutions(board, cutoff=1)
    if solutions == 0:
        print("✗ Puzzle has no solution")
        sys.exit(1)
    print("Puzzle has a unique solution" if solutions == 1 else "Puzzle has multiple solutions")

    solver = BacktrackingSolver(rng=random.Random(args.seed), max_iterations=args.max_iterations)
    solution, stats = solver.solve(board)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Iterations: {stats.iterations:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print(solution)
    else:
        print("✗ Failed to solve")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Iterations: {stats.iterations:,}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationBenchmark
    from .benchmark.visualizer import Visualizer

    benchmark = GenerationBenchmark(
        puzzles_per_difficulty=args.puzzles,
        difficulties=args.difficulties,
        seed=args.seed
    )

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles per difficulty: {args.puzzles}")
    print(f"Difficulties: {[f'{d:.2f}' for d in benchmark.difficulties]}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for difficulty, stats in summary["results_by_difficulty"].items():
        print(f"\nDifficulty {difficulty}:")
        print(f"  Clues: {stats['avg_clues']:.1f} avg ({stats['min_clues']}-{stats['max_clues']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Probes: {stats['avg_probes']:.1f}")
        print(f"  Unique: {stats['unique_rate']:.1f}%")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
