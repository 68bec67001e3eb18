"""Grid board representation.

The board is modeled as an undirected graph where:
- Nodes are integer grid cells (``Point``) carrying passability,
  spawn delay and spawnability
- Edges connect 4-neighbouring cells and carry a movement cost
- The graph is the single source of truth for board topology

The spawn solver and the search only ever read from the board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import networkx as nx


@dataclass(frozen=True, order=True)
class Point:
    """Immutable 2D integer grid coordinate."""

    x: int
    y: int

    @property
    def is_valid(self) -> bool:
        return self.x >= 0 and self.y >= 0

    def neighbors4(self) -> list[Point]:
        """Orthogonal neighbours, east / west / north / south."""
        return [
            Point(self.x + 1, self.y),
            Point(self.x - 1, self.y),
            Point(self.x, self.y + 1),
            Point(self.x, self.y - 1),
        ]

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


# Returned when no spawn point qualifies
INVALID_POINT = Point(-1, -1)


class GridBoard:
    """Rectangular board of cells backed by a NetworkX Graph.

    Wraps the graph with typed cell attributes and provides the lookups the
    spawn solver needs (passability, spawn delay, spawnability) while keeping
    the raw graph accessible for search algorithms.

    Attributes:
        graph: The underlying NetworkX Graph.
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.graph = nx.Graph()
        self.width = width
        self.height = height

    # ── Cell management ──────────────────────────────────────────────

    def add_cell(
        self,
        point: Point,
        passable: bool = True,
        spawn_delay: float = 0.0,
        spawnable: bool = False,
    ) -> None:
        """Add a cell with its board attributes.

        Args:
            point: Grid coordinate of the cell.
            passable: Whether an actor can stand on / move through the cell.
            spawn_delay: Fixed wait before an actor spawned here may move.
            spawnable: Whether actors may be spawned on this cell.
        """
        if not self.in_bounds(point):
            raise ValueError(f"{point} is outside the {self.width}x{self.height} board")
        self.graph.add_node(
            point,
            passable=passable,
            spawn_delay=float(spawn_delay),
            spawnable=spawnable,
        )

    def connect(self, a: Point, b: Point, cost: float = 1.0) -> None:
        """Add a traversable edge between two cells."""
        if cost <= 0:
            raise ValueError(f"Edge cost must be positive, got {cost}")
        self.graph.add_edge(a, b, cost=float(cost))

    def set_wall(self, point: Point) -> None:
        """Mark a cell impassable. Walls can never be spawn points."""
        attrs = self.graph.nodes[point]
        attrs["passable"] = False
        attrs["spawnable"] = False

    def set_spawn_point(self, point: Point, delay: float = 0.0) -> None:
        """Mark a passable cell as a spawn point with the given delay."""
        attrs = self.graph.nodes[point]
        if not attrs["passable"]:
            raise ValueError(f"Cannot place a spawn point on wall {point}")
        if delay < 0:
            raise ValueError(f"Spawn delay must be non-negative, got {delay}")
        attrs["spawnable"] = True
        attrs["spawn_delay"] = float(delay)

    # ── Queries ──────────────────────────────────────────────────────

    @property
    def n_cells(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def n_edges(self) -> int:
        return self.graph.number_of_edges()

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def cells(self) -> list[Point]:
        """All cells in insertion (row-major) order."""
        return list(self.graph.nodes)

    def is_passable(self, point: Point) -> bool:
        """Unknown points are impassable."""
        if point not in self.graph:
            return False
        return self.graph.nodes[point]["passable"]

    def spawn_delay(self, point: Point) -> float:
        """Spawn delay of a cell; 0 for unknown points."""
        if point not in self.graph:
            return 0.0
        return self.graph.nodes[point]["spawn_delay"]

    def is_spawnable(self, point: Point) -> bool:
        if point not in self.graph:
            return False
        return self.graph.nodes[point]["spawnable"]

    def spawn_points(self) -> list[Point]:
        """Return all spawnable cells."""
        return [p for p, d in self.graph.nodes(data=True) if d.get("spawnable")]

    def walls(self) -> list[Point]:
        return [p for p, d in self.graph.nodes(data=True) if not d.get("passable")]

    def neighbors(self, point: Point) -> list[Point]:
        """Return adjacent cells regardless of passability."""
        if point not in self.graph:
            return []
        return list(self.graph.neighbors(point))

    def edge_cost(self, a: Point, b: Point) -> float:
        """Movement cost of a specific edge. Raises KeyError if the edge doesn't exist."""
        return self.graph.edges[a, b]["cost"]

    def validate(self) -> list[str]:
        """Run basic sanity checks on the board.

        Returns:
            List of warning messages (empty = all good).
        """
        issues = []

        if not self.spawn_points():
            issues.append("No spawn points on the board")

        passable = [p for p in self.graph.nodes if self.is_passable(p)]
        if not passable:
            issues.append("Board has no passable cells")
            return issues

        open_area = self.graph.subgraph(passable)
        if not nx.is_connected(open_area):
            components = list(nx.connected_components(open_area))
            issues.append(
                f"Passable area is not connected: {len(components)} components "
                f"(sizes: {sorted(len(c) for c in components)})"
            )

        return issues
