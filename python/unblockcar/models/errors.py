"""Exceptions raised by the Unblock Car engine."""

from __future__ import annotations


class UnblockCarError(Exception):
    """Base class for every error raised by this package."""


class InvalidBoard(UnblockCarError, ValueError):
    """The grid has the wrong shape, an unknown token, or a bent vehicle."""


class InvalidMove(UnblockCarError, ValueError):
    """A move cannot be played on the current board."""


class SearchAborted(UnblockCarError):
    """Exploration ran past its state-count or wall-clock budget.

    Distinct from an unsolvable board: the search simply gave up.
    """

    def __init__(self, reason: str, states: int, elapsed: float) -> None:
        super().__init__(
            f"Search aborted ({reason}) after {states} states "
            f"in {elapsed:.2f}s."
        )
        self.reason = reason
        self.states = states
        self.elapsed = elapsed
