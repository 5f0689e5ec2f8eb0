"""Board model and codec for the Unblock Car puzzle.

A board is stored as its *key*: the row-major string of single-character
cell tokens.  ``"0"`` is an empty cell; every other token identifies one
vehicle.  The key is the identity of a search state, so two boards with the
same cells are the same state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union

from unblockcar.models.errors import InvalidBoard

Cell = Union[int, str]
Grid = list[list[Cell]]

DEFAULT_SIZE = 6
EMPTY = "0"
ALPHABET = "123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Vehicle:
    """A vehicle's identifier and the cells it covers, in line order."""

    id: str
    cells: tuple[tuple[int, int], ...]

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def orientation(self) -> Orientation | None:
        """``None`` for a single-cell block, which can never move."""
        if self.length < 2:
            return None
        if self.cells[0][0] == self.cells[1][0]:
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL


# -- codec --------------------------------------------------------------------


def _token(value: Cell) -> str:
    if isinstance(value, bool):
        raise InvalidBoard(f"Unsupported cell value {value!r}.")
    if isinstance(value, int):
        if not 0 <= value <= 9:
            raise InvalidBoard(
                f"Integer cell {value} out of range; use 0-9 or A-Z."
            )
        return str(value)
    if isinstance(value, str) and len(value) == 1 and (
        value == EMPTY or value in ALPHABET
    ):
        return value
    raise InvalidBoard(f"Unsupported cell value {value!r}.")


def encode(grid: Grid, size: int = DEFAULT_SIZE) -> str:
    """Flatten *grid* row by row into a board key.

    Example::

        encode([[0, 0], [1, 1]], size=2)  # -> "0011"
    """
    if len(grid) != size or any(len(row) != size for row in grid):
        raise InvalidBoard(f"Expected a {size}×{size} grid.")
    return "".join(_token(value) for row in grid for value in row)


def decode(key: str, size: int = DEFAULT_SIZE) -> Grid:
    """Inverse of :func:`encode`: digits come back as ints, letters as str."""
    if len(key) != size * size:
        raise InvalidBoard(
            f"Expected {size * size} cells for a {size}×{size} board, "
            f"got {len(key)}."
        )
    grid: Grid = []
    for r in range(size):
        row: list[Cell] = []
        for ch in key[r * size : (r + 1) * size]:
            _token(ch)
            row.append(int(ch) if ch.isdigit() else ch)
        grid.append(row)
    return grid


def find_vehicles(key: str, size: int = DEFAULT_SIZE) -> dict[str, Vehicle]:
    """Group the key's cells by vehicle and check every vehicle is straight."""
    cells: dict[str, list[tuple[int, int]]] = {}
    for i, ch in enumerate(key):
        if ch != EMPTY:
            cells.setdefault(ch, []).append(divmod(i, size))

    vehicles: dict[str, Vehicle] = {}
    for vid, coords in cells.items():
        rows = {r for r, _ in coords}
        cols = {c for _, c in coords}
        if len(rows) == 1:
            span = max(cols) - min(cols) + 1
        elif len(cols) == 1:
            span = max(rows) - min(rows) + 1
        else:
            raise InvalidBoard(f"Vehicle {vid} is not a straight line.")
        if span != len(coords):
            raise InvalidBoard(f"Vehicle {vid} is not contiguous.")
        vehicles[vid] = Vehicle(id=vid, cells=tuple(coords))
    return vehicles


# -- board --------------------------------------------------------------------


@dataclass(frozen=True)
class Board:
    """An immutable, validated board.

    Construct through :meth:`from_grid` or :meth:`from_key`; both reject
    malformed input with :class:`InvalidBoard`.
    """

    size: int
    key: str

    @classmethod
    def from_grid(cls, grid: Grid, size: int = DEFAULT_SIZE) -> Board:
        key = encode(grid, size)
        find_vehicles(key, size)
        return cls(size=size, key=key)

    @classmethod
    def from_key(cls, key: str, size: int = DEFAULT_SIZE) -> Board:
        decode(key, size)
        find_vehicles(key, size)
        return cls(size=size, key=key)

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return decode(self.key, self.size)

    def get_cell(self, row: int, col: int) -> str:
        return self.key[row * self.size + col]

    def vehicles(self) -> dict[str, Vehicle]:
        return find_vehicles(self.key, self.size)

    def __str__(self) -> str:
        return "\n".join(
            self.key[r * self.size : (r + 1) * self.size]
            for r in range(self.size)
        )
