"""Rich terminal frontend: coloured board table and a solution panel.

Uses the ``rich`` library for styled output while sharing the same backend
as the vanilla CLI.  Each vehicle gets its own colour; the target car is
always red.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from unblockcar.engine.gameplay import GamePlay
from unblockcar.engine.gamesolver import SearchResult, Solver
from unblockcar.models.board import ALPHABET, EMPTY, Board
from unblockcar.models.config import SolverConfig

console = Console()

_PALETTE = (
    "cyan",
    "green",
    "yellow",
    "magenta",
    "blue",
    "bright_cyan",
    "bright_green",
    "bright_yellow",
    "bright_magenta",
    "bright_blue",
)


def _style(vehicle: str, config: SolverConfig) -> str:
    if vehicle == config.target:
        return "bold white on red"
    return f"bold {_PALETTE[ALPHABET.index(vehicle) % len(_PALETTE)]}"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, config: SolverConfig) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    exits = set(config.exit_cells)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=1, justify="center")

    for r in range(board.size):
        cells: list[Text] = []
        for c in range(board.size):
            val = board.get_cell(r, c)
            if val == EMPTY:
                mark = "▸" if (r, c) in exits else "·"
                cells.append(Text(mark, style="dim"))
            else:
                cells.append(Text(val, style=_style(val, config)))
        table.add_row(*cells)

    return table


def _render_moves(result: SearchResult, config: SolverConfig) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Car", justify="center")
    table.add_column("Direction")
    table.add_column("Anchor", justify="right", style="dim")

    for i, move in enumerate(result.moves, 1):
        table.add_row(
            str(i),
            Text(move.vehicle, style=_style(move.vehicle, config)),
            move.direction.value,
            f"({move.row}, {move.col})",
        )
    return table


def _summary(result: SearchResult) -> Text:
    text = Text()
    if not result.solved:
        text.append("Board is unsolvable.", style="bold red")
    elif not result.moves:
        text.append("Already solved!", style="bold green")
    else:
        text.append(f"Solved in {len(result.moves)} moves!", style="bold green")
    text.append(
        f"   {result.states} states explored in {result.elapsed:.2f}s",
        style="dim",
    )
    return text


# -- animation ----------------------------------------------------------------


def _animate(board: Board, result: SearchResult, config: SolverConfig) -> None:
    game = GamePlay.from_board(board, config)
    for i, move in enumerate(result.moves):
        game.move(move)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(result.moves)} ", style="bold cyan")
        progress.append(f"({move})", style="dim")

        panel = Panel(
            Align.center(_render_board(game.board, config)),
            title="[bold cyan]Auto-Solve[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        time.sleep(0.1)


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    config: SolverConfig,
    title: str = "Unblock Car",
    animate: bool = False,
) -> SearchResult:
    """Solve *board* and show it, the solution, and a summary."""
    with console.status("Exploring the state space…"):
        result = Solver.search(board, config)

    if animate and result.moves:
        _animate(board, result, config)

    parts = [Align.center(_render_board(board, config)), Text("")]
    if result.moves:
        parts.append(Align.center(_render_moves(result, config)))
    parts.append(Align.center(_summary(result)))

    panel = Panel(
        Group(*parts),
        title=f"[bold]{title}[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    return result
