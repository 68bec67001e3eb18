"""
Best-candidate selection.

Scores every pairing-set and keeps the one with the highest score. Ties go to
the candidate enumerated first, so selection is reproducible for a given
enumeration order. The parallel variant scores in a thread pool but reduces
the results in enumeration order, giving the same winner as the serial one.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable

from src.assignment.enumerators import PairingSet
from src.assignment.errors import EmptyCandidateSetError

logger = logging.getLogger(__name__)

ScoreFunction = Callable[[PairingSet], float]


@dataclass(frozen=True)
class Selection:
    """Winning pairing-set together with its score."""

    pairing: PairingSet
    score: float
    n_evaluated: int


def _first_max(scored: Iterable[tuple[PairingSet, float]]) -> Selection:
    best_pairing: PairingSet | None = None
    best_score = 0.0
    n = 0
    for pairing, value in scored:
        # strict comparison keeps the earliest maximum
        if n == 0 or value > best_score:
            best_pairing, best_score = pairing, value
        n += 1

    if n == 0:
        raise EmptyCandidateSetError()

    logger.debug("Selected %s (score=%s) out of %d candidates", best_pairing, best_score, n)
    return Selection(pairing=best_pairing, score=best_score, n_evaluated=n)


def select_best_with_score(
    pairings: Iterable[PairingSet],
    score: ScoreFunction,
) -> Selection:
    """Evaluate ``score`` on every candidate and return the first maximal one.

    Raises:
        EmptyCandidateSetError: If ``pairings`` produces nothing.
    """
    return _first_max((p, score(p)) for p in pairings)


def select_best(pairings: Iterable[PairingSet], score: ScoreFunction) -> PairingSet:
    """Return the first pairing-set with the maximal score."""
    return select_best_with_score(pairings, score).pairing


def select_best_parallel(
    pairings: Iterable[PairingSet],
    score: ScoreFunction,
    max_workers: int | None = None,
) -> Selection:
    """Score candidates concurrently; ties still resolve in enumeration order.

    ``Executor.map`` yields results in submission order, so the reduction sees
    candidates exactly as ``select_best_with_score`` would.
    """
    candidates = list(pairings)
    if not candidates:
        raise EmptyCandidateSetError()

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        scores = list(executor.map(score, candidates))

    return _first_max(zip(candidates, scores))
