"""
Board layout generator — open grid with walls and spawn points.

Builds a GridBoard from a BoardConfig. Every cell of the ``width × height``
rectangle becomes a node; orthogonally adjacent cells are joined by an edge.
Walls stay in the graph as impassable nodes so that lookups on them answer
"not passable" rather than "unknown".

Layout geometry (top-down, y grows north):

    y=3   .  .  #  .  S
    y=2   .  .  #  .  .
    y=1   .  .  .  .  .
    y=0   S  .  #  .  .
         x=0          x=4

    .  = open cell
    #  = wall
    S  = spawn point (spawnable cell with a spawn delay)
"""

from __future__ import annotations

from src.board.config import BoardConfig
from src.board.grid import GridBoard, Point


class GridBoardGenerator:
    """Generates a 4-connected grid board with walls and spawn points."""

    def __init__(self, config: BoardConfig) -> None:
        self.layout = config.board
        self.config = config

        if self.layout.default_edge_cost <= 0:
            raise ValueError(
                f"default_edge_cost must be positive, got {self.layout.default_edge_cost}"
            )

    def generate(self) -> GridBoard:
        """Build and return the complete board."""
        b = GridBoard(self.layout.width, self.layout.height)

        self._add_cells(b)
        self._add_edges(b)
        self._add_walls(b)
        self._add_spawn_points(b)

        issues = b.validate()
        if issues:
            for issue in issues:
                print(f"[LAYOUT WARNING] {issue}")

        return b

    # ── Cells and edges ──────────────────────────────────────────

    def _add_cells(self, b: GridBoard) -> None:
        for y in range(self.layout.height):
            for x in range(self.layout.width):
                b.add_cell(Point(x, y))

    def _add_edges(self, b: GridBoard) -> None:
        """Join each cell to its east and north neighbour."""
        cost = self.layout.default_edge_cost
        for y in range(self.layout.height):
            for x in range(self.layout.width):
                if x + 1 < self.layout.width:
                    b.connect(Point(x, y), Point(x + 1, y), cost)
                if y + 1 < self.layout.height:
                    b.connect(Point(x, y), Point(x, y + 1), cost)

    # ── Obstacles ────────────────────────────────────────────────

    def _wall_cells(self) -> list[Point]:
        cells = [Point(x, y) for x, y in self.layout.walls]
        for x0, y0, x1, y1 in self.layout.wall_rects:
            for y in range(min(y0, y1), max(y0, y1) + 1):
                for x in range(min(x0, x1), max(x0, x1) + 1):
                    cells.append(Point(x, y))
        return cells

    def _add_walls(self, b: GridBoard) -> None:
        for p in self._wall_cells():
            if not b.in_bounds(p):
                raise ValueError(f"Wall {p} lies outside the board")
            b.set_wall(p)

    # ── Spawn points ─────────────────────────────────────────────

    def _add_spawn_points(self, b: GridBoard) -> None:
        for sp in self.config.spawn_points:
            p = Point(sp.x, sp.y)
            if not b.in_bounds(p):
                raise ValueError(f"Spawn point {p} lies outside the board")
            b.set_spawn_point(p, sp.delay)
