#!/usr/bin/env python3
"""Unblock Car solver.

Usage::

    python main.py --sample medium             # Rich terminal output
    python main.py -f vanilla --sample easy    # plain ANSI output
    python main.py --board-file board.json     # solve a board from JSON
    python main.py --list-samples              # show bundled boards
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from unblockcar.engine.gamegenerator import SAMPLES, GameGenerator  # noqa: E402
from unblockcar.logging_utils import setup_script_logger  # noqa: E402
from unblockcar.models.board import DEFAULT_SIZE  # noqa: E402
from unblockcar.models.config import SolverConfig  # noqa: E402
from unblockcar.models.errors import InvalidBoard, SearchAborted  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "unblockcar.frontend.cli.vanilla.app",
    Frontend.rich: "unblockcar.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _print_samples() -> None:
    print("\n  === SAMPLE BOARDS ===")
    for name in SAMPLES:
        board = GameGenerator.sample(name)
        print(f"\n  --- {name} ---")
        for line in str(board).splitlines():
            print(f"  {line}")
    print()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to display the board and solution.",
    ),
    sample: str = typer.Option(
        "medium", "--sample",
        help=f"Bundled board to solve ({', '.join(SAMPLES)}).",
    ),
    board_file: Optional[Path] = typer.Option(
        None, "--board-file",
        exists=True, dir_okay=False,
        help="JSON file with a 6×6 grid (list of rows). Overrides --sample.",
    ),
    list_samples: bool = typer.Option(
        False, "--list-samples",
        help="Show the bundled boards and exit.",
    ),
    animate: bool = typer.Option(
        False, "--animate",
        help="Replay the solution move by move.",
    ),
    target: str = typer.Option(
        "1", "--target", envvar="UNBLOCKCAR_TARGET",
        help="Identifier of the car that must reach the exit.",
    ),
    exit_row: int = typer.Option(
        2, "--exit-row", envvar="UNBLOCKCAR_EXIT_ROW",
        min=0, max=DEFAULT_SIZE - 1,
        help="Row whose right edge is the exit.",
    ),
    max_states: Optional[int] = typer.Option(
        None, "--max-states", envvar="UNBLOCKCAR_MAX_STATES",
        min=1,
        help="Give up after discovering this many states.",
    ),
    time_limit: Optional[float] = typer.Option(
        None, "--time-limit", envvar="UNBLOCKCAR_TIME_LIMIT",
        min=0.001,
        help="Give up after this many seconds.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level",
        help="Logging level (defaults to $LOGLEVEL or WARNING).",
    ),
) -> None:
    """Unblock Car solver."""
    setup_script_logger("unblockcar", log_level)

    if list_samples:
        _print_samples()
        return

    try:
        config = SolverConfig.for_exit_row(
            exit_row,
            target=target,
            max_states=max_states,
            time_limit=time_limit,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        if board_file is not None:
            board = GameGenerator.load(board_file)
            title = board_file.name
        else:
            board = GameGenerator.sample(sample)
            title = sample
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0], param_hint="--sample") from exc
    except InvalidBoard as exc:
        typer.echo(f"Invalid board: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.run(board, config, title=title, animate=animate)
    except InvalidBoard as exc:
        typer.echo(f"Invalid board: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    except SearchAborted as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=3) from exc


if __name__ == "__main__":
    app()
