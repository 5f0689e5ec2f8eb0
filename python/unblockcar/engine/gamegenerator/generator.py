"""Reference puzzles, board loading, and random scrambling."""

from __future__ import annotations

import json
import random
from pathlib import Path

from unblockcar.engine.gameplay.moves import apply_move, find_moves
from unblockcar.models.board import DEFAULT_SIZE, Board, Grid
from unblockcar.models.errors import InvalidBoard
from unblockcar.models.move import Move

# Reference boards for the default 6×6 puzzle (exit: row 2, columns 4–5).
SAMPLES: dict[str, Grid] = {
    "solved": [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 1],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ],
    "two-step": [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 1, 1, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ],
    "unsolvable": [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 1, 1, 2, 2, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ],
    "easy": [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 2, 0, 0, 0],
        [1, 1, 2, 3, 0, 0],
        [0, 0, 0, 3, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ],
    "medium": [
        [2, 2, 2, 0, 0, 3],
        [0, 0, 4, 0, 0, 3],
        [1, 1, 4, 0, 0, 3],
        [5, 0, 4, 0, 6, 6],
        [5, 0, 0, 0, 7, 0],
        [8, 8, 8, 0, 7, 0],
    ],
    "hard": [
        [0, 0, 2, 3, 0, 0],
        [0, 0, 2, 3, 0, "A"],
        [1, 1, 2, 3, 8, "A"],
        [0, 5, 0, 0, 8, 9],
        [4, 5, 7, 7, 8, 9],
        [4, 6, 6, 0, 0, 0],
    ],
    "hardest": [
        [7, 7, 7, 4, 5, 6],
        [8, 9, 9, 4, 5, 6],
        [8, 0, 1, 1, 5, 6],
        ["A", "A", 3, 0, 0, 0],
        [0, 2, 3, 0, "D", "D"],
        [0, 2, "B", "B", "C", "C"],
    ],
}


class GameGenerator:
    """Provides boards: bundled samples, JSON files, and random scrambles."""

    @staticmethod
    def sample(name: str) -> Board:
        """Return the bundled board called *name*."""
        try:
            grid = SAMPLES[name]
        except KeyError:
            raise KeyError(
                f"Unknown sample {name!r}; choose from {', '.join(SAMPLES)}."
            ) from None
        return Board.from_grid(grid)

    @staticmethod
    def load(path: Path, size: int = DEFAULT_SIZE) -> Board:
        """Read a board from a JSON file holding a list of rows."""
        try:
            grid = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise InvalidBoard(f"Cannot read a board from {path}: {exc}") from exc
        if not isinstance(grid, list) or not all(isinstance(r, list) for r in grid):
            raise InvalidBoard(f"{path} must contain a list of rows.")
        return Board.from_grid(grid, size)

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random legal moves.

        The move that would undo the previous one is skipped whenever there
        is an alternative, so the walk does not just shuffle back and forth.
        """
        rng = rng or random.Random()
        key = board.key
        previous: str | None = None

        for _ in range(steps):
            options: list[tuple[str, Move]] = [
                (apply_move(key, m, board.size), m)
                for m in find_moves(key, board.size)
            ]
            if not options:
                break
            if len(options) > 1:
                options = [o for o in options if o[0] != previous] or options
            previous = key
            key, _ = rng.choice(options)

        return Board(size=board.size, key=key)
