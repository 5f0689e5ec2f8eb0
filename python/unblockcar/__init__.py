"""Shortest-path solver for the Unblock Car (Rush Hour) sliding-block puzzle."""

from unblockcar.engine.gamesolver import SearchResult, Solver
from unblockcar.models import (
    Board,
    Direction,
    InvalidBoard,
    InvalidMove,
    Move,
    SearchAborted,
    SolverConfig,
    UnblockCarError,
)

__all__ = [
    "Board",
    "Direction",
    "InvalidBoard",
    "InvalidMove",
    "Move",
    "SearchAborted",
    "SearchResult",
    "Solver",
    "SolverConfig",
    "UnblockCarError",
]
