"""
Fastest reachable spawn point.

Picks, among the spawnable cells of a board, the one from which an actor
reaches any cell of a target set soonest. "Soonest" is the effective time

    effective_time(s) = path_cost(s → nearest target) + spawn_delay(s) × move_speed

The search runs once, backward from the targets, with no early termination;
its cost table is then reused as the lookup for every candidate. Scoring is
the negated effective time so the generic maximizer in
``src.assignment.optimizer`` does the minimization.

Ties between candidates with the same effective time go to the one that comes
first in the cost table, i.e. the one the search settled first.
"""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Iterable

from src.assignment.enumerators import PairingSet, PairStrategy
from src.assignment.optimizer import ActionFunction, optimize_and_act_with_diagnostics
from src.assignment.selector import select_best_parallel, select_best_with_score
from src.board.config import SpawnSolverConfig
from src.board.grid import INVALID_POINT, GridBoard, Point
from src.board.search import Search, never_stop

logger = logging.getLogger(__name__)

SearchFactory = Callable[..., Search]


class SpawnStatus(Enum):
    """Outcome of a spawn search."""

    FOUND = auto()
    NO_REACHABLE_SPAWN = auto()  # nothing both spawnable and reachable


@dataclass
class SpawnResult:
    """Spawn decision plus diagnostics."""

    spawn_point: Point
    target: Point | None
    effective_time: float
    status: SpawnStatus
    n_candidates: int
    n_evaluated: int
    solve_time_ms: float
    search: Any = field(default=None, repr=False)  # the search whose cost table was scored


class FastestSpawnSolver:
    """Chooses the spawn point with the lowest effective time to a target set.

    The board is held read-only for the lifetime of the solver. The search
    implementation is injectable; it is called as
    ``search_factory(board, targets, passable, early_stop)`` and must expose
    a ``cost_table`` mapping.
    """

    def __init__(
        self,
        board: GridBoard,
        solver_config: SpawnSolverConfig | None = None,
        search_factory: SearchFactory = Search,
    ) -> None:
        self._board = board
        self.config = solver_config or SpawnSolverConfig()
        self.search_factory = search_factory
        self.total_solves: int = 0
        self.total_misses: int = 0
        self.total_solve_time_ms: float = 0.0

    @property
    def board(self) -> GridBoard:
        return self._board

    # ── Public interface ──────────────────────────────────────────────────────

    def fastest_spawn_act(
        self,
        is_spawnable: Callable[[Point], bool] | None,
        targets: Iterable[Point],
        move_speed: float | None = None,
        action: ActionFunction | None = None,
    ) -> Point:
        """Find the fastest spawn, call ``action(spawn, target)`` and return the spawn.

        Returns INVALID_POINT, without calling ``action``, when no spawnable
        cell can reach the targets.
        """
        return self.solve_with_diagnostics(
            targets, move_speed=move_speed, is_spawnable=is_spawnable, action=action
        ).spawn_point

    def solve(
        self,
        targets: Iterable[Point],
        move_speed: float | None = None,
        is_spawnable: Callable[[Point], bool] | None = None,
        action: ActionFunction | None = None,
    ) -> Point:
        """Spawn point only."""
        return self.solve_with_diagnostics(targets, move_speed, is_spawnable, action).spawn_point

    def solve_with_diagnostics(
        self,
        targets: Iterable[Point],
        move_speed: float | None = None,
        is_spawnable: Callable[[Point], bool] | None = None,
        action: ActionFunction | None = None,
    ) -> SpawnResult:
        """Pick the fastest spawn and report how the decision was reached.

        Targets are de-duplicated and those off the board are dropped before
        the search runs, so the winning pair only ever names a searched target.

        Args:
            targets: Cells the actor must reach; any one of them will do.
            move_speed: Multiplier on spawn delay. None uses the solver config.
            is_spawnable: Candidate filter. None uses the board's spawn points.
            action: Called once as ``action(spawn, target)`` for the winner.

        Returns:
            SpawnResult with the chosen spawn, or INVALID_POINT and
            NO_REACHABLE_SPAWN when no spawnable cell reaches a target. The
            search is attached so callers can reuse its cost table.
        """
        t0 = time.perf_counter()
        targets = tuple(t for t in dict.fromkeys(targets) if t in self._board.graph)
        speed = self.config.move_speed if move_speed is None else move_speed
        spawnable = is_spawnable or self._board.is_spawnable

        search = self.search_factory(self._board, targets, self._board.is_passable, never_stop)
        cost_table = search.cost_table
        sources = [p for p in cost_table if spawnable(p)]

        if not sources or not targets:
            ms = (time.perf_counter() - t0) * 1e3
            self.total_solves += 1
            self.total_misses += 1
            self.total_solve_time_ms += ms
            logger.info(
                "No reachable spawn for %d targets (%d cells reachable)",
                len(targets),
                len(cost_table),
            )
            return SpawnResult(
                spawn_point=INVALID_POINT,
                target=None,
                effective_time=float("inf"),
                status=SpawnStatus.NO_REACHABLE_SPAWN,
                n_candidates=0,
                n_evaluated=0,
                solve_time_ms=ms,
                search=search,
            )

        def shortest_travel_time(pairing: PairingSet) -> float:
            ((source, _),) = pairing
            return -(cost_table[source] + self._board.spawn_delay(source) * speed)

        if self.config.parallel_scoring:
            selector = functools.partial(select_best_parallel, max_workers=self.config.max_workers)
        else:
            selector = select_best_with_score

        selection = optimize_and_act_with_diagnostics(
            sources,
            targets,
            PairStrategy.SINGLE_PAIR,
            shortest_travel_time,
            action,
            selector,
        )
        ((spawn, target),) = selection.pairing

        ms = (time.perf_counter() - t0) * 1e3
        self.total_solves += 1
        self.total_solve_time_ms += ms
        logger.debug(
            "Spawn %s → %s effective time %.2f (%d candidates)",
            spawn,
            target,
            -selection.score,
            len(sources),
        )
        return SpawnResult(
            spawn_point=spawn,
            target=target,
            effective_time=-selection.score,
            status=SpawnStatus.FOUND,
            n_candidates=len(sources),
            n_evaluated=selection.n_evaluated,
            solve_time_ms=ms,
            search=search,
        )
