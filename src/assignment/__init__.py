"""
Generic assignment optimization: split → maximize → act.

Enumerates candidate pairings of sources to targets, scores each with a
caller-supplied objective, picks the best and applies a caller-supplied
action to every pair of the winner.

Quick start:
    from src.assignment import PairStrategy, optimize_and_act
    winner = optimize_and_act(sources, targets, PairStrategy.BIJECTIVE, score, act)
"""

from src.assignment.enumerators import (
    PairingSequence,
    PairStrategy,
    bijective_split,
    single_pair_split,
)
from src.assignment.errors import (
    AssignmentError,
    EmptyCandidateSetError,
    InsufficientTargetsError,
)
from src.assignment.optimizer import (
    bijective_max_act,
    optimize_and_act,
    optimize_and_act_with_diagnostics,
    single_pair_max_act,
)
from src.assignment.selector import (
    Selection,
    select_best,
    select_best_parallel,
    select_best_with_score,
)

__all__ = [
    "PairingSequence",
    "PairStrategy",
    "bijective_split",
    "single_pair_split",
    "AssignmentError",
    "EmptyCandidateSetError",
    "InsufficientTargetsError",
    "bijective_max_act",
    "optimize_and_act",
    "optimize_and_act_with_diagnostics",
    "single_pair_max_act",
    "Selection",
    "select_best",
    "select_best_parallel",
    "select_best_with_score",
]
