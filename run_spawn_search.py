"""
Quick-run script for the spawn search.

Usage:
    python run_spawn_search.py                               # default board, target (10, 6)
    python run_spawn_search.py --target 3 9 --target 12 2    # several targets
    python run_spawn_search.py --speed 2.5                   # heavier spawn-delay weight
    python run_spawn_search.py --config config/default_board.yaml

Prints the chosen spawn point and its effective time to stdout.
"""

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from src.board.config import load_config, BoardConfig
from src.board.grid import Point
from src.board.layout import GridBoardGenerator
from src.spawn.fastest import FastestSpawnSolver, SpawnStatus


def main():
    """Main function that runs if the file is run directly."""

    parser = argparse.ArgumentParser(description="Find the fastest reachable spawn point")
    parser.add_argument(
        "--config",
        type=str,
        default="config/default_board.yaml",
        help="Path to board config YAML",
    )
    parser.add_argument(
        "--target",
        type=int,
        nargs=2,
        action="append",
        metavar=("X", "Y"),
        help="Target cell (repeatable). Default: 10 6",
    )
    parser.add_argument(
        "--speed", type=float, default=None, help="Move speed (overrides config)"
    )
    parser.add_argument(
        "--parallel", action="store_true", help="Score candidates in a thread pool"
    )
    parser.add_argument("--log-level", type=str, default=None, help="Overrides config log level")
    args = parser.parse_args()

    # Load config
    config_path = Path(args.config)
    if config_path.exists():
        config = load_config(config_path)
        print(f"Loaded config from {config_path}")
    else:
        print(f"Config {config_path} not found, using defaults")
        config = BoardConfig()

    logging.basicConfig(
        level=getattr(logging, (args.log_level or config.logging.level).upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Apply CLI overrides
    solver_config = config.solver
    if args.speed is not None or args.parallel:
        solver_config = replace(
            solver_config,
            move_speed=args.speed if args.speed is not None else solver_config.move_speed,
            parallel_scoring=args.parallel or solver_config.parallel_scoring,
        )

    targets = [Point(x, y) for x, y in (args.target or [(10, 6)])]

    # Run
    board = GridBoardGenerator(config).generate()
    solver = FastestSpawnSolver(board, solver_config)

    def announce(spawn: Point, target: Point) -> None:
        print(f"→ spawn at {spawn} heading for {target}")

    result = solver.solve_with_diagnostics(targets, action=announce)

    print(f"\n{'=' * 60}")
    print("Spawn Decision:")
    print(f"{'=' * 60}")
    print(f"{'Board':<18} {board.width}x{board.height}, {len(board.spawn_points())} spawn points")
    print(f"{'Targets':<18} {', '.join(str(t) for t in targets)}")
    print(f"{'Move speed':<18} {solver_config.move_speed:g}")
    if result.status == SpawnStatus.FOUND:
        print(f"{'Spawn point':<18} {result.spawn_point}")
        print(f"{'Effective time':<18} {result.effective_time:.2f}")
        print(f"{'Candidates':<18} {result.n_candidates} ({result.n_evaluated} pairings scored)")
    else:
        print(f"{'Spawn point':<18} none reachable ({result.spawn_point})")
    print(f"{'Solve time':<18} {result.solve_time_ms:.2f} ms")


if __name__ == "__main__":
    main()
