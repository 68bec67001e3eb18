"""Failure conditions raised by the assignment engine.

Every error here is raised before any action is applied to a pairing, so a
caller that catches one can rely on no side effects having happened.
"""

from __future__ import annotations


class AssignmentError(Exception):
    """Base class for assignment-engine failures."""


class InsufficientTargetsError(AssignmentError, ValueError):
    """Bijective enumeration requested with more sources than targets."""

    def __init__(self, n_sources: int, n_targets: int) -> None:
        self.n_sources = n_sources
        self.n_targets = n_targets
        super().__init__(
            f"Cannot pair {n_sources} sources one-to-one with only {n_targets} targets"
        )


class EmptyCandidateSetError(AssignmentError, ValueError):
    """No candidate pairing-sets to select from."""

    def __init__(self, message: str = "No candidate pairings to select from") -> None:
        super().__init__(message)
