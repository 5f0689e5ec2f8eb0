"""Vanilla terminal frontend — no third-party dependencies.

Uses only print and ANSI codes to draw the board and list the solution.
"""

from __future__ import annotations

import sys
import time

from unblockcar.engine.gameplay import GamePlay
from unblockcar.engine.gamesolver import SearchResult, Solver
from unblockcar.models.board import EMPTY, Board
from unblockcar.models.config import SolverConfig


# -- ANSI helpers -------------------------------------------------------------

_R_BOLD = "\033[31;1m"   # bold red (target car)
_G = "\033[32;1m"        # bold green
_Y = "\033[33;1m"        # bold yellow
_C = "\033[36;1m"        # bold cyan
_DIM = "\033[2m"         # dim
_R = "\033[0m"           # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, config: SolverConfig) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + ("---+" * board.size)
    exits = set(config.exit_cells)

    lines: list[str] = [sep]
    for r in range(board.size):
        cells: list[str] = []
        for c in range(board.size):
            val = board.get_cell(r, c)
            if val == config.target:
                cells.append(f"{_R_BOLD} {val} {_R}")
            elif val == EMPTY:
                mark = ">" if (r, c) in exits else "·"
                cells.append(f"{_DIM} {mark} {_R}")
            else:
                cells.append(f" {val} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _animate(board: Board, result: SearchResult, config: SolverConfig) -> None:
    game = GamePlay.from_board(board, config)
    for i, move in enumerate(result.moves):
        game.move(move)
        _clear()
        print(f"  {_C}=== Solving… ==={_R}")
        print()
        print(_render_board(game.board, config))
        print()
        print(f"  Move {i + 1}/{len(result.moves)}  ({move})")
        sys.stdout.flush()
        time.sleep(0.1)


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    config: SolverConfig,
    title: str = "Unblock Car",
    animate: bool = False,
) -> SearchResult:
    """Solve *board* and print the board, the moves, and a summary."""
    print(f"  {_C}=== {title} ==={_R}")
    print()
    print(_render_board(board, config))
    print()

    result = Solver.search(board, config)

    if animate and result.moves:
        _animate(board, result, config)
        print()

    if not result.solved:
        print("  Board is unsolvable.")
    elif not result.moves:
        print(f"  {_G}Already solved!{_R}")
    else:
        for i, move in enumerate(result.moves):
            print(f"  {_Y}[{i}]{_R} {move}")
        print(f"  {_G}Solved in {len(result.moves)} moves!{_R}")

    print(
        f"  {_DIM}{result.states} states explored in "
        f"{result.elapsed:.2f}s{_R}"
    )
    return result
