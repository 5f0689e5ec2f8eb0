"""Search states and the state graph built for one solve."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from unblockcar.models.move import Move


@dataclass
class SearchState:
    """One reachable board, keyed by its board key.

    ``edges`` lists every (next key, move) found when this state was
    expanded.  ``predecessors`` maps each known parent key to the move that
    leads here from it.  ``distance`` and ``previous`` stay ``None`` until
    shortest-path analysis runs.
    """

    key: str
    won: bool = False
    edges: list[tuple[str, Move]] = field(default_factory=list)
    predecessors: dict[str, Move] = field(default_factory=dict)
    distance: int | None = None
    previous: str | None = None


class StateGraph:
    """Board key → :class:`SearchState`, in discovery order."""

    def __init__(self, initial: str) -> None:
        self.initial = initial
        self._states: dict[str, SearchState] = {}

    # -- mutation -------------------------------------------------------------

    def add(self, key: str, won: bool) -> tuple[SearchState, bool]:
        """Insert *key* unless present.  Returns the state and whether it is new."""
        state = self._states.get(key)
        if state is not None:
            return state, False
        state = SearchState(key=key, won=won)
        self._states[key] = state
        return state, True

    def link(self, source: str, target: str, move: Move) -> None:
        """Record *move* as an edge ``source → target`` on both ends."""
        self._states[source].edges.append((target, move))
        self._states[target].predecessors[source] = move

    # -- queries --------------------------------------------------------------

    def __getitem__(self, key: str) -> SearchState:
        return self._states[key]

    def __contains__(self, key: object) -> bool:
        return key in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[SearchState]:
        return iter(self._states.values())

    def winners(self) -> list[SearchState]:
        return [s for s in self._states.values() if s.won]
