"""Unblock Car solver: exhaustive exploration, then breadth-first shortest path.

The whole reachable state graph is built first (winning states are recorded
but never expanded), then distances are assigned breadth-first from the
initial board and the closest winning state is walked back to the start.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass, field

from unblockcar.engine.gameplay.moves import apply_move, find_moves
from unblockcar.engine.gamestate.state import SearchState, StateGraph
from unblockcar.models.board import Board, Grid
from unblockcar.models.config import SolverConfig
from unblockcar.models.errors import InvalidBoard, SearchAborted
from unblockcar.models.move import Move

logger = logging.getLogger(__name__)

_PROGRESS_EVERY = 10_000


# -- exploration ----------------------------------------------------------------


def explore(initial: str, config: SolverConfig) -> StateGraph:
    """Materialise every state reachable from *initial*.

    Raises :class:`SearchAborted` when ``config.max_states`` or
    ``config.time_limit`` is exceeded.
    """
    size = config.size
    started = time.monotonic()
    graph = StateGraph(initial)
    root, _ = graph.add(initial, config.is_won(initial))
    if root.won:
        return graph

    stack = [initial]
    next_report = _PROGRESS_EVERY
    while stack:
        if config.time_limit is not None:
            elapsed = time.monotonic() - started
            if elapsed > config.time_limit:
                raise _abort("time limit", graph, elapsed)

        current = stack.pop()
        for move in find_moves(current, size):
            nxt = apply_move(current, move, size)
            state, new = graph.add(nxt, config.is_won(nxt))
            if new:
                if config.max_states is not None and len(graph) > config.max_states:
                    raise _abort(
                        "state limit", graph, time.monotonic() - started
                    )
                if not state.won:
                    stack.append(nxt)
            graph.link(current, nxt, move)

        if len(graph) >= next_report:
            logger.debug(
                "Explored %d states, %d pending", len(graph), len(stack)
            )
            next_report += _PROGRESS_EVERY

    return graph


def _abort(reason: str, graph: StateGraph, elapsed: float) -> SearchAborted:
    logger.warning(
        "Search aborted (%s) after %d states in %.2fs",
        reason,
        len(graph),
        elapsed,
    )
    return SearchAborted(reason, len(graph), elapsed)


# -- shortest path --------------------------------------------------------------


def assign_distances(graph: StateGraph) -> None:
    """Breadth-first distances from the initial state.

    The first time a state is reached fixes both its distance and its chosen
    predecessor, which is the minimum in a unit-cost graph.
    """
    root = graph[graph.initial]
    root.distance = 0
    root.previous = None
    queue = deque([root])
    while queue:
        state = queue.popleft()
        for key, _ in state.edges:
            nxt = graph[key]
            if nxt.distance is None:
                nxt.distance = state.distance + 1
                nxt.previous = state.key
                queue.append(nxt)


def pick_winner(graph: StateGraph) -> SearchState | None:
    """Closest winning state; ties go to the one discovered first."""
    best: SearchState | None = None
    for state in graph.winners():
        if state.distance is None:
            continue
        if best is None or state.distance < best.distance:
            best = state
    return best


def extract_path(graph: StateGraph, winner: SearchState) -> list[Move]:
    """Walk chosen predecessors back from *winner*; moves in play order."""
    path: list[Move] = []
    state = winner
    while state.previous is not None:
        path.append(state.predecessors[state.previous])
        state = graph[state.previous]
    path.reverse()
    return path


# -- public facade ----------------------------------------------------------------


@dataclass
class SearchResult:
    moves: list[Move] = field(default_factory=list)
    states: int = 0
    winning_states: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        """True if a winning board is reachable (including already won)."""
        return self.winning_states > 0


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(
        board: Board | Grid, config: SolverConfig | None = None
    ) -> SearchResult:
        """Solve *board* and report how much of the state space was explored."""
        board, config = Solver._prepare(board, config)

        started = time.monotonic()
        graph = explore(board.key, config)
        assign_distances(graph)
        winner = pick_winner(graph)
        moves = extract_path(graph, winner) if winner is not None else []
        elapsed = time.monotonic() - started

        result = SearchResult(
            moves=moves,
            states=len(graph),
            winning_states=len(graph.winners()),
            elapsed=elapsed,
        )
        logger.info(
            "Explored %d states (%d winning) in %.3fs: %s",
            result.states,
            result.winning_states,
            elapsed,
            f"{len(moves)} moves" if result.solved else "no solution",
        )
        return result

    @staticmethod
    def solve(
        board: Board | Grid, config: SolverConfig | None = None
    ) -> list[Move]:
        """Return a shortest move sequence for *board*, or ``[]`` if none exists."""
        return Solver.search(board, config).moves

    @staticmethod
    def hint(
        board: Board | Grid, config: SolverConfig | None = None
    ) -> Move | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board, config)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(
        board: Board | Grid, config: SolverConfig | None = None
    ) -> bool:
        return Solver.search(board, config).solved

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _prepare(
        board: Board | Grid, config: SolverConfig | None
    ) -> tuple[Board, SolverConfig]:
        if isinstance(board, Board):
            if config is None:
                try:
                    config = SolverConfig.for_size(board.size)
                except ValueError as exc:
                    raise InvalidBoard(str(exc)) from exc
            if board.size != config.size:
                raise InvalidBoard(
                    f"Board is {board.size}×{board.size} but the solver "
                    f"expects {config.size}×{config.size}."
                )
            # Re-validate: a Board may have been built without from_grid().
            board = Board.from_key(board.key, board.size)
        else:
            config = config or SolverConfig()
            board = Board.from_grid(board, config.size)
        return board, config
