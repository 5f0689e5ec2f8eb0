"""Legal-move enumeration and move application on board keys."""

from __future__ import annotations

from functools import lru_cache

from unblockcar.models.board import DEFAULT_SIZE, EMPTY, Direction
from unblockcar.models.errors import InvalidMove
from unblockcar.models.move import Move

Line = tuple[int, ...]


@lru_cache(maxsize=None)
def _lines(size: int) -> tuple[tuple[Line, ...], tuple[Line, ...]]:
    """Flat indices of every row and every column for a *size* board."""
    rows = tuple(tuple(r * size + c for c in range(size)) for r in range(size))
    cols = tuple(tuple(r * size + c for r in range(size)) for c in range(size))
    return rows, cols


def _slides(key: str, line: Line, j: int) -> tuple[bool, bool]:
    """Can the run through ``line[j-1]``/``line[j]`` slide back / forward?

    Back only fires at the run's second cell, forward only at its last, so
    each vehicle yields at most one move per direction.
    """
    ch = key[line[j]]
    if ch == EMPTY or key[line[j - 1]] != ch:
        return False, False
    back = j >= 2 and key[line[j - 2]] == EMPTY
    forward = j + 1 < len(line) and key[line[j + 1]] == EMPTY
    return back, forward


def find_moves(key: str, size: int = DEFAULT_SIZE) -> list[Move]:
    """Return every legal single-step move on *key*.

    Order is fixed: line ``i`` outer, position ``j`` inner; at each position
    row ``i`` is checked before column ``i``, and Left/Up before Right/Down.
    """
    rows, cols = _lines(size)
    moves: list[Move] = []
    for i in range(size):
        row, col = rows[i], cols[i]
        for j in range(1, size):
            back, forward = _slides(key, row, j)
            if back:
                moves.append(Move(key[row[j]], Direction.LEFT, i, j - 1))
            if forward:
                moves.append(Move(key[row[j]], Direction.RIGHT, i, j))

            back, forward = _slides(key, col, j)
            if back:
                moves.append(Move(key[col[j]], Direction.UP, j - 1, i))
            if forward:
                moves.append(Move(key[col[j]], Direction.DOWN, j, i))
    return moves


def apply_move(key: str, move: Move, size: int = DEFAULT_SIZE) -> str:
    """Return the key after sliding ``move.vehicle`` one cell.

    The vehicle's tail is found by walking back from the anchor along its
    line, so vehicles of any length clear exactly one trailing cell.  The
    destination is not checked for emptiness; see ``GamePlay.move`` for a
    fully validated move.
    """
    rows, cols = _lines(size)
    if move.direction.is_horizontal:
        line, pos = rows[move.row], move.col
    else:
        line, pos = cols[move.col], move.row
    step = 1 if move.direction in (Direction.RIGHT, Direction.DOWN) else -1

    front = pos + step
    if not 0 <= front < size:
        raise InvalidMove(f"{move} at ({move.row}, {move.col}) leaves the board.")
    if key[line[pos]] != move.vehicle:
        raise InvalidMove(
            f"No car {move.vehicle} at ({move.row}, {move.col})."
        )

    tail = pos
    while 0 <= tail - step < size and key[line[tail - step]] == move.vehicle:
        tail -= step

    cells = list(key)
    cells[line[front]] = move.vehicle
    cells[line[tail]] = EMPTY
    return "".join(cells)
