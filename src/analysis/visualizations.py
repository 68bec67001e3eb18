"""
Board and cost-table visualization.

Renders a grid board as a top-down map with:
- The search cost table as a heat map (cost to the nearest target)
- Walls as dark cells
- Spawn points labelled with their spawn delay
- Targets as crosses
- The chosen spawn and its path to the nearest target highlighted

Usage:
    from src.board.config import load_config
    from src.board.layout import GridBoardGenerator
    from src.board.search import Search
    from src.analysis.visualizations import plot_cost_table

    board = GridBoardGenerator(load_config("config/default_board.yaml")).generate()
    search = Search(board, targets, board.is_passable)
    fig = plot_cost_table(board, search.cost_table, targets)
    fig.savefig("cost_table.png", dpi=150, bbox_inches="tight")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import matplotlib.pyplot as plt
import numpy as np

from src.board.grid import GridBoard, Point

if TYPE_CHECKING:
    from matplotlib.figure import Figure


# ── Styling constants ────────────────────────────────────────────

WALL_COLOR = "#252525"
SPAWN_COLOR = "#31a354"
SPAWN_SIZE = 120
TARGET_COLOR = "#e41a1c"
TARGET_SIZE = 140
CHOSEN_COLOR = "#ffd92f"
CHOSEN_SIZE = 320
PATH_COLOR = "#fd8d3c"
COST_CMAP = "viridis"


def cost_grid(board: GridBoard, cost_table: dict[Point, float]) -> np.ndarray:
    """Cost table as a (height, width) array; unreached cells are NaN."""
    grid = np.full((board.height, board.width), np.nan, dtype=np.float64)
    for p, c in cost_table.items():
        if board.in_bounds(p):
            grid[p.y, p.x] = c
    return grid


def plot_cost_table(
    board: GridBoard,
    cost_table: dict[Point, float],
    targets: Iterable[Point] = (),
    spawn: Point | None = None,
    path: list[Point] | None = None,
    title: str = "Cost to Nearest Target",
    figsize: tuple[float, float] | None = None,
) -> Figure:
    """Render the board with the cost table as a heat map.

    Args:
        board: The GridBoard to plot.
        cost_table: Cell → cost to the nearest target (from a Search).
        targets: Target cells to mark.
        spawn: Chosen spawn point to highlight; ignored if invalid.
        path: Optional cell path to draw (e.g. spawn → target).
        title: Plot title.
        figsize: Figure size in inches. Auto-calculated if None.

    Returns:
        matplotlib Figure object.
    """
    if figsize is None:
        aspect = board.width / max(board.height, 1)
        fig_width = min(16, max(6, aspect * 6))
        figsize = (fig_width, fig_width / max(aspect, 0.4))

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    # ── Heat map ─────────────────────────────────────────────────
    grid = np.ma.masked_invalid(cost_grid(board, cost_table))
    image = ax.imshow(grid, origin="lower", cmap=COST_CMAP, interpolation="nearest")
    fig.colorbar(image, ax=ax, label="cost")

    # ── Walls ────────────────────────────────────────────────────
    walls = board.walls()
    if walls:
        ax.scatter(
            [p.x for p in walls],
            [p.y for p in walls],
            c=WALL_COLOR,
            s=220,
            marker="s",
            zorder=3,
            label="wall",
        )

    # ── Spawn points ─────────────────────────────────────────────
    spawns = board.spawn_points()
    if spawns:
        ax.scatter(
            [p.x for p in spawns],
            [p.y for p in spawns],
            c=SPAWN_COLOR,
            s=SPAWN_SIZE,
            marker="o",
            edgecolors="white",
            zorder=4,
            label="spawn",
        )
        for p in spawns:
            ax.annotate(
                f"{board.spawn_delay(p):g}",
                (p.x, p.y),
                textcoords="offset points",
                xytext=(6, 6),
                fontsize=7,
                zorder=6,
            )

    # ── Targets ──────────────────────────────────────────────────
    targets = list(targets)
    if targets:
        ax.scatter(
            [p.x for p in targets],
            [p.y for p in targets],
            c=TARGET_COLOR,
            s=TARGET_SIZE,
            marker="X",
            zorder=5,
            label="target",
        )

    # ── Highlights ───────────────────────────────────────────────
    if path:
        ax.plot(
            [p.x for p in path],
            [p.y for p in path],
            color=PATH_COLOR,
            linewidth=2.5,
            zorder=4,
        )
    if spawn is not None and spawn.is_valid:
        ax.scatter(
            [spawn.x],
            [spawn.y],
            c=CHOSEN_COLOR,
            s=CHOSEN_SIZE,
            marker="*",
            edgecolors="black",
            zorder=7,
            label="chosen spawn",
        )

    # ── Axis formatting ──────────────────────────────────────────
    ax.set_title(title, fontsize=13, fontweight="bold", pad=10)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_xlim(-0.5, board.width - 0.5)
    ax.set_ylim(-0.5, board.height - 0.5)
    ax.legend(loc="upper right", fontsize=8, framealpha=0.9)
    fig.tight_layout()
    return fig
