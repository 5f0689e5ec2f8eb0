"""Move-by-move play on a board, with validation and the win check."""

from __future__ import annotations

from collections.abc import Iterable

from unblockcar.engine.gameplay.moves import apply_move
from unblockcar.models.board import EMPTY, Board, Direction, Orientation, find_vehicles
from unblockcar.models.config import SolverConfig
from unblockcar.models.errors import InvalidMove
from unblockcar.models.move import Move

# Offset from the anchor to the cell the vehicle slides into.
_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class GamePlay:
    """Replays moves on a single board, one validated step at a time."""

    def __init__(self, board: Board, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig.for_size(board.size)
        self.key = board.key
        self.moves: int = 0

    @classmethod
    def from_board(
        cls, board: Board, config: SolverConfig | None = None
    ) -> "GamePlay":
        return cls(board, config)

    @classmethod
    def replay(
        cls,
        board: Board,
        moves: Iterable[Move],
        config: SolverConfig | None = None,
    ) -> "GamePlay":
        """Play *moves* in order, raising ``InvalidMove`` on the first bad one."""
        game = cls(board, config)
        for i, move in enumerate(moves):
            reason = game.check(move)
            if reason:
                raise InvalidMove(f"Move {i} ({move}) is illegal: {reason}")
            game.move(move)
        return game

    # -- movement -------------------------------------------------------------

    def check(self, move: Move) -> str | None:
        """Return why *move* is illegal on the current board, or ``None``."""
        size = self.config.size
        row, col = move.row, move.col
        if not (0 <= row < size and 0 <= col < size):
            return "anchor is off the board"
        if move.vehicle == EMPTY or self.key[row * size + col] != move.vehicle:
            return f"car {move.vehicle} is not at ({row}, {col})"

        vehicle = find_vehicles(self.key, size)[move.vehicle]
        if vehicle.orientation is None:
            return f"car {move.vehicle} cannot move"
        horizontal = vehicle.orientation is Orientation.HORIZONTAL
        if horizontal != move.direction.is_horizontal:
            return f"car {move.vehicle} cannot move {move.direction.value}"

        dr, dc = _OFFSETS[move.direction]
        tr, tc = row + dr, col + dc
        if not (0 <= tr < size and 0 <= tc < size):
            return "destination is off the board"
        if self.key[tr * size + tc] != EMPTY:
            return f"destination ({tr}, {tc}) is occupied"
        return None

    def move(self, move: Move) -> bool:
        """Apply *move* if it is legal.  Returns True if it was applied."""
        if self.check(move) is not None:
            return False
        self.key = apply_move(self.key, move, self.config.size)
        self.moves += 1
        return True

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return Board(size=self.config.size, key=self.key)

    @property
    def is_won(self) -> bool:
        return self.config.is_won(self.key)
