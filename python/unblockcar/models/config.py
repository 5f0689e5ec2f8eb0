"""Solver configuration: win condition and search budget."""

from __future__ import annotations

from dataclasses import dataclass

from unblockcar.models.board import ALPHABET, DEFAULT_SIZE


@dataclass(frozen=True)
class SolverConfig:
    """Where the target vehicle must end up, and how long we may look.

    The defaults describe the classic 6×6 puzzle: vehicle ``"1"`` must cover
    row 2, columns 4 and 5.  ``max_states`` and ``time_limit`` are off by
    default; when set, exceeding either aborts the search.
    """

    size: int = DEFAULT_SIZE
    target: str = "1"
    exit_cells: tuple[tuple[int, int], ...] = ((2, 4), (2, 5))
    max_states: int | None = None
    time_limit: float | None = None

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        if len(self.target) != 1 or self.target not in ALPHABET:
            raise ValueError(f"Invalid target vehicle {self.target!r}.")
        if not self.exit_cells:
            raise ValueError("At least one exit cell is required.")
        for r, c in self.exit_cells:
            if not (0 <= r < self.size and 0 <= c < self.size):
                raise ValueError(f"Exit cell ({r}, {c}) is off the board.")
        if self.max_states is not None and self.max_states < 1:
            raise ValueError("max_states must be positive.")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError("time_limit must be positive.")

    @classmethod
    def for_exit_row(
        cls,
        row: int,
        size: int = DEFAULT_SIZE,
        target: str = "1",
        max_states: int | None = None,
        time_limit: float | None = None,
    ) -> SolverConfig:
        """Exit through the right edge of *row* (the last two columns)."""
        return cls(
            size=size,
            target=target,
            exit_cells=((row, size - 2), (row, size - 1)),
            max_states=max_states,
            time_limit=time_limit,
        )

    @classmethod
    def for_size(cls, size: int) -> SolverConfig:
        """Default win condition scaled to a *size*×*size* board.

        The exit stays on row 2 where the board is tall enough, otherwise on
        the bottom row.
        """
        return cls.for_exit_row(min(2, size - 1), size=size)

    @property
    def exit_indices(self) -> tuple[int, ...]:
        return tuple(r * self.size + c for r, c in self.exit_cells)

    def is_won(self, key: str) -> bool:
        return all(key[i] == self.target for i in self.exit_indices)
