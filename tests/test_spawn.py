"""
Tests for the fastest reachable spawn solver.

Tests cover:
1. Effective-time scoring (path cost + spawn delay × move speed)
2. Tie-break by cost-table order
3. NoReachableSpawn sentinel, action never invoked
4. Search invoked with full expansion on the board's passability
5. End-to-end on a generated board, serial and parallel scoring

Run with: pytest tests/test_spawn.py -v
"""

from types import SimpleNamespace

import pytest

from src.board.config import BoardConfig, BoardLayoutConfig, SpawnPointConfig, SpawnSolverConfig
from src.board.grid import GridBoard, Point, INVALID_POINT
from src.board.layout import GridBoardGenerator
from src.board.search import never_stop
from src.spawn.fastest import FastestSpawnSolver, SpawnStatus


S1 = Point(0, 0)
S2 = Point(3, 3)
T = Point(1, 1)


class RecordingAction:
    """Collects every (spawn, target) call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, spawn, target) -> None:
        self.calls.append((spawn, target))


def fixed_search(cost_table: dict, calls: list | None = None):
    """Search factory that returns a canned cost table."""

    def _factory(board, targets, passable, early_stop):
        if calls is not None:
            calls.append((board, targets, passable, early_stop))
        return SimpleNamespace(cost_table=dict(cost_table))

    return _factory


# ── Fixtures ──────────────────────────────────────────────────────


@pytest.fixture
def tiny_board() -> GridBoard:
    """Two spawn points and one target cell; edges are irrelevant with a canned search."""
    b = GridBoard(4, 4)
    b.add_cell(S1)
    b.add_cell(S2)
    b.add_cell(T)
    b.set_spawn_point(S1, delay=2.0)
    b.set_spawn_point(S2, delay=0.0)
    return b


@pytest.fixture
def walled_board() -> GridBoard:
    """5x4 board, wall column at x=2 open only at y=1, spawns at (0,0) d=1 and (4,3) d=0."""
    config = BoardConfig(
        board=BoardLayoutConfig(width=5, height=4, walls=((2, 0),), wall_rects=((2, 2, 2, 3),)),
        spawn_points=(
            SpawnPointConfig(x=0, y=0, delay=1.0),
            SpawnPointConfig(x=4, y=3, delay=0.0),
        ),
    )
    return GridBoardGenerator(config).generate()


# ── Test: Scoring with a canned cost table ────────────────────────


class TestFastestSpawnScoring:
    """Scenarios driven by a fixed cost table."""

    def test_tie_goes_to_first_in_cost_table(self, tiny_board):
        # effective times: S1 = 3 + 2*1 = 5, S2 = 5 + 0 = 5
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3, S2: 5}))
        act = RecordingAction()
        spawn = solver.fastest_spawn_act(tiny_board.is_spawnable, [T], 1.0, act)
        assert spawn == S1
        assert act.calls == [(S1, T)]

    def test_tie_follows_table_order_not_coordinates(self, tiny_board):
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S2: 5, S1: 3}))
        assert solver.solve([T], move_speed=1.0) == S2

    def test_spawn_delay_scaled_by_move_speed(self, tiny_board):
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3, S2: 5}))
        # S1 = 3 + 2*0.5 = 4 beats S2 = 5
        result = solver.solve_with_diagnostics([T], move_speed=0.5)
        assert result.spawn_point == S1
        assert result.effective_time == pytest.approx(4.0)
        # S1 = 3 + 2*3 = 9 loses to S2 = 5
        assert solver.solve([T], move_speed=3.0) == S2

    def test_move_speed_defaults_to_config(self, tiny_board):
        solver = FastestSpawnSolver(
            tiny_board,
            solver_config=SpawnSolverConfig(move_speed=3.0),
            search_factory=fixed_search({S1: 3, S2: 5}),
        )
        assert solver.solve([T]) == S2

    def test_non_spawnable_cells_skipped(self, tiny_board):
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({T: 0, S2: 5}))
        result = solver.solve_with_diagnostics([T], move_speed=1.0)
        assert result.spawn_point == S2
        assert result.n_candidates == 1

    def test_custom_spawnable_predicate(self, tiny_board):
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3, S2: 5}))
        spawn = solver.fastest_spawn_act(lambda p: p == S2, [T], 1.0)
        assert spawn == S2

    def test_no_spawnable_point_returns_sentinel(self, tiny_board):
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3, S2: 5}))
        act = RecordingAction()
        spawn = solver.fastest_spawn_act(lambda p: False, [T], 1.0, act)
        assert spawn == INVALID_POINT
        assert act.calls == []

        result = solver.solve_with_diagnostics([T], is_spawnable=lambda p: False)
        assert result.status == SpawnStatus.NO_REACHABLE_SPAWN
        assert result.target is None
        assert result.effective_time == float("inf")

    def test_search_runs_full_expansion_on_board(self, tiny_board):
        calls: list = []
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3}, calls))
        solver.solve([T, T], move_speed=1.0)

        assert len(calls) == 1
        board, targets, passable, early_stop = calls[0]
        assert board is tiny_board
        assert targets == (T,)
        assert passable == tiny_board.is_passable
        assert early_stop is never_stop

    def test_result_carries_the_scored_search(self, tiny_board):
        calls: list = []
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3, S2: 5}, calls))
        found = solver.solve_with_diagnostics([T])
        missed = solver.solve_with_diagnostics([T], is_spawnable=lambda p: False)
        assert len(calls) == 2
        assert found.search.cost_table == {S1: 3, S2: 5}
        assert missed.search is not None

    def test_off_board_targets_dropped_before_pairing(self, tiny_board):
        calls: list = []
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3}, calls))
        act = RecordingAction()
        result = solver.solve_with_diagnostics([Point(40, 40), T], action=act)
        assert calls[0][1] == (T,)
        assert result.target == T
        assert act.calls == [(S1, T)]

    def test_only_off_board_targets_returns_sentinel(self, tiny_board):
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3}))
        act = RecordingAction()
        assert solver.fastest_spawn_act(None, [Point(-5, 2)], 1.0, act) == INVALID_POINT
        assert act.calls == []

    def test_statistics_accumulate(self, tiny_board):
        solver = FastestSpawnSolver(tiny_board, search_factory=fixed_search({S1: 3, S2: 5}))
        solver.solve([T])
        solver.solve([T], is_spawnable=lambda p: False)
        solver.solve([T])
        assert solver.total_solves == 3
        assert solver.total_misses == 1
        assert solver.total_solve_time_ms >= 0.0


# ── Test: End to end on a generated board ─────────────────────────


class TestFastestSpawnOnBoard:
    """Real search over a generated board."""

    def test_nearest_spawn_wins(self, walled_board):
        # (4,3): 3 steps, no delay. (0,0): 6 steps through the gap + 1 delay.
        solver = FastestSpawnSolver(walled_board)
        act = RecordingAction()
        result = solver.solve_with_diagnostics([Point(4, 0)], move_speed=1.0, action=act)
        assert result.status == SpawnStatus.FOUND
        assert result.spawn_point == Point(4, 3)
        assert result.effective_time == pytest.approx(3.0)
        assert result.n_candidates == 2
        assert act.calls == [(Point(4, 3), Point(4, 0))]

    def test_delay_can_flip_the_decision(self, walled_board):
        target = Point(0, 1)
        solver = FastestSpawnSolver(walled_board)
        # (0,0): 1 + 1*1 = 2 vs (4,3): 6
        assert solver.solve([target], move_speed=1.0) == Point(0, 0)
        # (0,0): 1 + 1*10 = 11 vs (4,3): 6
        assert solver.solve([target], move_speed=10.0) == Point(4, 3)

    def test_action_receives_first_target(self, walled_board):
        solver = FastestSpawnSolver(walled_board)
        act = RecordingAction()
        solver.fastest_spawn_act(None, [Point(4, 1), Point(4, 0)], 1.0, act)
        assert act.calls == [(Point(4, 3), Point(4, 1))]

    def test_unreachable_spawn_returns_sentinel(self):
        config = BoardConfig(
            board=BoardLayoutConfig(width=3, height=2, wall_rects=((1, 0, 1, 1),)),
            spawn_points=(SpawnPointConfig(x=0, y=0, delay=0.0),),
        )
        board = GridBoardGenerator(config).generate()
        act = RecordingAction()
        spawn = FastestSpawnSolver(board).fastest_spawn_act(None, [Point(2, 0)], 1.0, act)
        assert spawn == INVALID_POINT
        assert act.calls == []

    def test_no_targets_returns_sentinel(self, walled_board):
        result = FastestSpawnSolver(walled_board).solve_with_diagnostics([])
        assert result.spawn_point == INVALID_POINT
        assert result.status == SpawnStatus.NO_REACHABLE_SPAWN

    def test_parallel_scoring_matches_serial(self, walled_board):
        serial = FastestSpawnSolver(walled_board)
        parallel = FastestSpawnSolver(
            walled_board, SpawnSolverConfig(parallel_scoring=True, max_workers=2)
        )
        for target in [Point(4, 0), Point(0, 1), Point(3, 2)]:
            a = serial.solve_with_diagnostics([target])
            b = parallel.solve_with_diagnostics([target])
            assert (a.spawn_point, a.target, a.effective_time) == (
                b.spawn_point,
                b.target,
                b.effective_time,
            )

    def test_default_board_finds_a_spawn(self):
        board = GridBoardGenerator(BoardConfig()).generate()
        result = FastestSpawnSolver(board).solve_with_diagnostics([Point(10, 6)])
        assert result.status == SpawnStatus.FOUND
        assert board.is_spawnable(result.spawn_point)
        path = result.search.path_from(result.spawn_point)
        assert path[0] == result.spawn_point
        assert path[-1] == Point(10, 6)
