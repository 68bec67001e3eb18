"""
Spawn-point selection on a grid board.

Quick start:
    from src.spawn import FastestSpawnSolver
    solver = FastestSpawnSolver(board)
    spawn = solver.fastest_spawn_act(board.is_spawnable, targets, 1.0, action=spawn_actor)
"""

from src.spawn.fastest import FastestSpawnSolver, SpawnResult, SpawnStatus

__all__ = ["FastestSpawnSolver", "SpawnResult", "SpawnStatus"]
