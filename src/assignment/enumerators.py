"""
Candidate enumeration for the assignment engine.

A *pairing-set* is one complete candidate solution: an ordered tuple of
``(source, target)`` pairs. The enumerators below turn a list of sources and
a list of targets into a lazy, restartable sequence of pairing-sets.

Strategy menu
─────────────
  SINGLE_PAIR   one pair per candidate, full cartesian product    |S| × |T|
  BIJECTIVE     one-to-one assignment per target permutation      |T|!

SINGLE_PAIR is the right split when only one (source, target) binding is
needed overall. BIJECTIVE pairs every source with a distinct target; it is
brute force and callers must keep |T| small.
"""

from __future__ import annotations

import itertools
import logging
import math
from enum import Enum, auto
from typing import Any, Callable, Iterable, Iterator

from src.assignment.errors import InsufficientTargetsError

logger = logging.getLogger(__name__)

Pair = tuple[Any, Any]
PairingSet = tuple[Pair, ...]

# Above this many targets the permutation space (> 40 320) gets expensive
PERMUTATION_WARN_TARGETS: int = 8


class PairingSequence:
    """Finite lazy sequence of pairing-sets that restarts on every iteration.

    ``len()`` reports the number of pairing-sets the sequence will produce,
    counting duplicates, without generating any of them.
    """

    def __init__(self, factory: Callable[[], Iterator[PairingSet]], size: int) -> None:
        self._factory = factory
        self._size = size

    def __iter__(self) -> Iterator[PairingSet]:
        return self._factory()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"PairingSequence(size={self._size})"


def single_pair_split(sources: Iterable, targets: Iterable) -> PairingSequence:
    """Every (source, target) combination as its own one-pair solution.

    Order is source-major, target-minor. Empty sources or targets give an
    empty sequence.
    """
    src = tuple(sources)
    tgt = tuple(targets)

    def _generate() -> Iterator[PairingSet]:
        for s in src:
            for t in tgt:
                yield ((s, t),)

    return PairingSequence(_generate, len(src) * len(tgt))


def bijective_split(
    sources: Iterable,
    targets: Iterable,
    unique: bool = False,
) -> PairingSequence:
    """One-to-one assignments of sources against each permutation of targets.

    Sources keep their order and are zipped against a permutation of the
    targets. When there are fewer sources than targets only the permutation
    prefix is consumed, so several permutations produce the same
    pairing-set; those duplicates are kept unless ``unique`` is set, in which
    case only the distinct arrangements are produced (first occurrences, in
    the same relative order).

    Raises:
        InsufficientTargetsError: If there are more sources than targets.
            Raised at call time, before anything is enumerated.
    """
    src = tuple(sources)
    tgt = tuple(targets)
    n, m = len(src), len(tgt)
    if n > m:
        raise InsufficientTargetsError(n, m)

    if m > PERMUTATION_WARN_TARGETS:
        logger.warning(
            "Bijective split over %d targets enumerates %d candidates",
            m,
            math.perm(m, n) if unique else math.factorial(m),
        )

    if unique:

        def _generate() -> Iterator[PairingSet]:
            for perm in itertools.permutations(tgt, n):
                yield tuple(zip(src, perm))

        return PairingSequence(_generate, math.perm(m, n))

    def _generate_all() -> Iterator[PairingSet]:
        for perm in itertools.permutations(tgt):
            yield tuple(zip(src, perm))

    return PairingSequence(_generate_all, math.factorial(m))


class PairStrategy(Enum):
    """Closed set of enumeration strategies."""

    SINGLE_PAIR = auto()
    BIJECTIVE = auto()

    def split(self, sources: Iterable, targets: Iterable) -> PairingSequence:
        """Enumerate candidate pairing-sets with this strategy."""
        if self is PairStrategy.SINGLE_PAIR:
            return single_pair_split(sources, targets)
        return bijective_split(sources, targets)
