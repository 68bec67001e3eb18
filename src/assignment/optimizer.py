"""
Split → maximize → act orchestration.

    candidates = strategy.split(sources, targets)
    winner     = select_best(candidates, score)
    for s, t in winner: act(s, t)

The action runs only once the winner is fully determined. Any failure in
enumeration or selection propagates before the first action call, so a failed
optimization never leaves partial side effects behind.

Quick start:
    from src.assignment.optimizer import bijective_max_act
    winner = bijective_max_act(robots, jobs, score=total_value, act=dispatch)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from src.assignment.enumerators import PairingSequence, PairingSet, PairStrategy
from src.assignment.selector import ScoreFunction, Selection, select_best_with_score

logger = logging.getLogger(__name__)

ActionFunction = Callable[[Any, Any], None]
SplitFunction = Callable[[Iterable, Iterable], Iterable[PairingSet]]
Selector = Callable[[Iterable[PairingSet], ScoreFunction], Selection]


def optimize_and_act_with_diagnostics(
    sources: Iterable,
    targets: Iterable,
    strategy: PairStrategy | SplitFunction,
    score: ScoreFunction,
    act: ActionFunction | None = None,
    selector: Selector = select_best_with_score,
) -> Selection:
    """Run the full split / maximize / act cycle and return the Selection.

    Args:
        sources: Candidate origins.
        targets: Candidate destinations.
        strategy: A PairStrategy member, or any ``split(sources, targets)``
            callable producing pairing-sets.
        score: Pure objective; higher is better.
        act: Called as ``act(source, target)`` for each pair of the winner.
            None skips the action step.
        selector: Selection routine, serial by default.

    Raises:
        InsufficientTargetsError: From the bijective split.
        EmptyCandidateSetError: If the split produced no candidates.
    """
    split = strategy.split if isinstance(strategy, PairStrategy) else strategy
    candidates = split(sources, targets)
    if isinstance(candidates, PairingSequence):
        logger.debug("Enumerating %d candidate pairings", len(candidates))

    selection = selector(candidates, score)

    if act is not None:
        for source, target in selection.pairing:
            act(source, target)

    return selection


def optimize_and_act(
    sources: Iterable,
    targets: Iterable,
    strategy: PairStrategy | SplitFunction,
    score: ScoreFunction,
    act: ActionFunction | None = None,
) -> PairingSet:
    """Select the best pairing-set, apply ``act`` to each pair and return it."""
    return optimize_and_act_with_diagnostics(sources, targets, strategy, score, act).pairing


def single_pair_max_act(
    sources: Iterable,
    targets: Iterable,
    score: ScoreFunction,
    act: ActionFunction | None = None,
) -> PairingSet:
    """Best single (source, target) binding across the cartesian product."""
    return optimize_and_act(sources, targets, PairStrategy.SINGLE_PAIR, score, act)


def bijective_max_act(
    sources: Iterable,
    targets: Iterable,
    score: ScoreFunction,
    act: ActionFunction | None = None,
) -> PairingSet:
    """Best one-to-one assignment of every source to a distinct target."""
    return optimize_and_act(sources, targets, PairStrategy.BIJECTIVE, score, act)
