"""
Generate board / cost-table diagrams.

Runs the spawn search for the given targets and renders the board with the
search cost table as a heat map and the chosen spawn highlighted. Outputs a
PNG file to the current directory.

Usage:
    python plot_board.py                               # Default config, target (10, 6)
    python plot_board.py --config path/to/config.yaml
    python plot_board.py --target 3 9 --target 12 2
    python plot_board.py --output my_board.png
"""

import argparse
from pathlib import Path

from src.board.config import load_config, BoardConfig
from src.board.grid import GridBoard, Point
from src.board.layout import GridBoardGenerator
from src.spawn.fastest import FastestSpawnSolver
from src.analysis.visualizations import plot_cost_table


def print_summary(board: GridBoard) -> None:
    """Print board summary to console."""
    print(f"\nBoard: {board.width}x{board.height}, {board.n_cells} cells, {board.n_edges} edges")
    print(f"  {'walls':15s}: {len(board.walls())}")
    print(f"  {'spawn points':15s}: {len(board.spawn_points())}")

    issues = board.validate()
    if issues:
        print("\n⚠️  Validation warnings:")
        for issue in issues:
            print(f"  - {issue}")
    else:
        print("\n✅ Validation passed")


def main():
    """Main function"""

    parser = argparse.ArgumentParser(description="Generate board cost-table diagrams")
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to board YAML config (default: config/default_board.yaml)",
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
        "--output",
        "-o",
        type=str,
        default="board_cost_table.png",
        help="Output PNG filename (default: board_cost_table.png)",
    )
    parser.add_argument("--dpi", type=int, default=150, help="Output image resolution")
    args = parser.parse_args()

    # ── Load config ──────────────────────────────────────────────
    config_path = args.config
    if config_path is None:
        default_path = Path(__file__).parent / "config" / "default_board.yaml"
        if default_path.exists():
            config_path = str(default_path)

    if config_path:
        print(f"Loading config from: {config_path}")
        config = load_config(config_path)
    else:
        print("Using default config (no YAML found)")
        config = BoardConfig()

    # ── Build board and solve ────────────────────────────────────
    board = GridBoardGenerator(config).generate()
    print_summary(board)

    targets = [Point(x, y) for x, y in (args.target or [(10, 6)])]
    result = FastestSpawnSolver(board, config.solver).solve_with_diagnostics(targets)
    search = result.search

    title = "Cost to Nearest Target"
    path = None
    if result.spawn_point.is_valid:
        path = search.path_from(result.spawn_point)
        title += f"\nspawn {result.spawn_point} (effective time {result.effective_time:.1f})"
    else:
        print("\n⚠️  No reachable spawn point")

    # ── Generate plot ────────────────────────────────────────────
    fig = plot_cost_table(
        board, search.cost_table, targets, spawn=result.spawn_point, path=path, title=title
    )
    output_path = Path(args.output)
    fig.savefig(output_path, dpi=args.dpi, bbox_inches="tight")
    print(f"\n📊 Board saved: {output_path}")


if __name__ == "__main__":
    main()
