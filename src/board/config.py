"""
Board and solver configuration dataclasses and YAML loader.

All board parameters live here as typed, validated dataclasses.
Load from YAML with `load_config()` or construct directly for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml


@dataclass(frozen=True)
class BoardLayoutConfig:
    """Physical board dimensions and obstacles.

    Walls are given as single cells ``[x, y]`` and as inclusive rectangles
    ``[x0, y0, x1, y1]``. Every cell pair that shares an edge is connected
    with ``default_edge_cost``.
    """

    width: int = 16
    height: int = 12
    walls: tuple[tuple[int, int], ...] = ()
    wall_rects: tuple[tuple[int, int, int, int], ...] = ()
    default_edge_cost: float = 1.0


@dataclass(frozen=True)
class SpawnPointConfig:
    """A spawnable cell and the time an actor waits there before moving."""

    x: int
    y: int
    delay: float = 0.0


@dataclass(frozen=True)
class SpawnSolverConfig:
    """Spawn solver runtime parameters."""

    move_speed: float = 1.0  # multiplier applied to spawn delay
    parallel_scoring: bool = False  # score candidates in a thread pool
    max_workers: int | None = None  # thread pool size (None = executor default)


@dataclass(frozen=True)
class LoggingConfig:
    """Root logger settings applied by the command-line scripts."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


def _default_spawn_points() -> tuple[SpawnPointConfig, ...]:
    return (
        SpawnPointConfig(x=0, y=0, delay=2.0),
        SpawnPointConfig(x=15, y=0, delay=0.0),
        SpawnPointConfig(x=0, y=11, delay=4.0),
        SpawnPointConfig(x=15, y=11, delay=1.0),
    )


@dataclass(frozen=True)
class BoardConfig:
    """Top-level configuration aggregating all sub-configs."""

    board: BoardLayoutConfig = field(default_factory=BoardLayoutConfig)
    spawn_points: tuple[SpawnPointConfig, ...] = field(default_factory=_default_spawn_points)
    solver: SpawnSolverConfig = field(default_factory=SpawnSolverConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> BoardConfig:
    """Load a BoardConfig from a YAML file.

    Args:
        path: Path to a YAML config file.

    Returns:
        Fully constructed BoardConfig with all sub-configs.
        Sections missing from the file keep their dataclass defaults.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    board_raw = dict(raw.get("board", {}))
    board_raw["walls"] = tuple(tuple(w) for w in board_raw.get("walls", ()))
    board_raw["wall_rects"] = tuple(tuple(r) for r in board_raw.get("wall_rects", ()))

    extra = {}
    if "spawn_points" in raw:
        extra["spawn_points"] = tuple(SpawnPointConfig(**sp) for sp in raw["spawn_points"] or ())

    return BoardConfig(
        board=BoardLayoutConfig(**board_raw),
        solver=SpawnSolverConfig(**raw.get("solver", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        **extra,
    )
