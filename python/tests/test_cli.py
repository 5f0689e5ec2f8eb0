"""Command-line entry point, driven through typer's test runner."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_vanilla_frontend_lists_moves() -> None:
    result = runner.invoke(app, ["-f", "vanilla", "--sample", "two-step"])

    assert result.exit_code == 0
    assert "Car 1 right" in result.stdout
    assert "Solved in 2 moves!" in result.stdout


def test_rich_frontend_shows_summary() -> None:
    result = runner.invoke(app, ["--sample", "easy"])

    assert result.exit_code == 0
    assert "Solved in 6 moves!" in result.stdout


def test_unsolvable_board_exits_cleanly() -> None:
    result = runner.invoke(app, ["-f", "vanilla", "--sample", "unsolvable"])

    assert result.exit_code == 0
    assert "unsolvable" in result.stdout


def test_list_samples() -> None:
    result = runner.invoke(app, ["--list-samples"])

    assert result.exit_code == 0
    assert "hardest" in result.stdout


def test_board_file(tmp_path: Path) -> None:
    path = tmp_path / "lane.json"
    grid = [[0] * 6 for _ in range(6)]
    grid[2][1] = grid[2][2] = 1
    path.write_text(json.dumps(grid))

    result = runner.invoke(app, ["-f", "vanilla", "--board-file", str(path)])

    assert result.exit_code == 0
    assert "Solved in 3 moves!" in result.stdout


def test_invalid_board_file_exits_with_2(tmp_path: Path) -> None:
    path = tmp_path / "bent.json"
    grid = [[0] * 6 for _ in range(6)]
    grid[2][0] = grid[2][1] = grid[3][1] = 1
    path.write_text(json.dumps(grid))

    result = runner.invoke(app, ["--board-file", str(path)])

    assert result.exit_code == 2


def test_unknown_sample_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--sample", "nope"])

    assert result.exit_code == 2


def test_state_budget_exits_with_3() -> None:
    result = runner.invoke(
        app, ["-f", "vanilla", "--sample", "medium", "--max-states", "10"]
    )

    assert result.exit_code == 3


def test_budget_from_environment() -> None:
    result = runner.invoke(
        app,
        ["-f", "vanilla", "--sample", "medium"],
        env={"UNBLOCKCAR_MAX_STATES": "10"},
    )

    assert result.exit_code == 3
