"""
Multi-source shortest-path search over a GridBoard.

The search is rooted at a *set* of target cells and expands outward, so the
resulting cost table answers "how far is this cell from the nearest target"
for every cell it settles. Running it backward from the targets means one
expansion covers every candidate origin at once.

Usage:
    search = Search(board, targets, board.is_passable)
    search.cost_table[Point(3, 4)]   # cost from (3, 4) to the nearest target
    search.path_from(Point(3, 4))    # [(3, 4), ..., nearest target]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

import networkx as nx

if TYPE_CHECKING:
    from src.board.grid import GridBoard, Point

logger = logging.getLogger(__name__)


def never_stop(point: Point) -> bool:  # pylint: disable=unused-argument
    """Early-stop predicate that forces a full expansion."""
    return False


class Search:
    """Dijkstra expansion from every target at once.

    Targets that are on the board are seeded with cost 0, whether or not they
    are passable themselves; off-board targets are ignored. Only passable
    neighbours are expanded. Cells are settled in cost order, ties in the
    order they were pushed, so ``cost_table`` iteration order is reproducible.

    ``early_stop`` is checked on each cell in settle order; the first cell
    for which it returns True is the last one kept and is recorded in
    ``stopped_at``.

    Attributes:
        cost_table: Settled cell → minimal cost to the nearest target.
        came_from: Cell → next cell on its path toward a target (None at targets).
        stopped_at: Cell that triggered early termination, or None.
    """

    def __init__(
        self,
        board: GridBoard,
        targets: Iterable[Point],
        passable: Callable[[Point], bool] | None = None,
        early_stop: Callable[[Point], bool] | None = None,
    ) -> None:
        self.board = board
        self.targets: tuple[Point, ...] = tuple(
            dict.fromkeys(t for t in targets if t in board.graph)
        )
        self.passable = passable or board.is_passable
        self.early_stop = early_stop or never_stop

        self.cost_table: dict[Point, float] = {}
        self.came_from: dict[Point, Point | None] = {}
        self.stopped_at: Point | None = None

        self._expand()

    @property
    def g_score(self) -> dict[Point, float]:
        return self.cost_table

    def _edge_weight(self, u: Point, v: Point, data: dict) -> float | None:
        # None hides the edge from networkx
        return data["cost"] if self.passable(v) else None

    def _expand(self) -> None:
        if not self.targets:
            return

        # dist is filled in settle order, paths run target → cell
        dist, paths = nx.multi_source_dijkstra(
            self.board.graph, self.targets, weight=self._edge_weight
        )

        for point, cost in dist.items():
            path = paths[point]
            self.cost_table[point] = float(cost)
            self.came_from[point] = path[-2] if len(path) > 1 else None
            if self.early_stop(point):
                self.stopped_at = point
                break

        logger.debug(
            "Search from %d targets settled %d cells%s",
            len(self.targets),
            len(self.cost_table),
            f" (stopped at {self.stopped_at})" if self.stopped_at is not None else "",
        )

    # ── Queries ──────────────────────────────────────────────────────

    def reachable(self, point: Point) -> bool:
        return point in self.cost_table

    def cost(self, point: Point) -> float:
        """Cost to the nearest target; inf if the point was never settled."""
        return self.cost_table.get(point, float("inf"))

    def path_from(self, point: Point) -> list[Point]:
        """Path from ``point`` to its nearest target (empty if unreachable)."""
        if point not in self.cost_table:
            return []
        path = [point]
        step = self.came_from[point]
        while step is not None:
            path.append(step)
            step = self.came_from[step]
        return path
