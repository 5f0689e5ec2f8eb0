"""Sample boards, JSON loading, and scrambling."""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from unblockcar.engine.gamegenerator import SAMPLES, GameGenerator
from unblockcar.engine.gamesolver import Solver
from unblockcar.models.board import Board
from unblockcar.models.errors import InvalidBoard


@pytest.mark.parametrize("name", list(SAMPLES))
def test_every_sample_is_a_valid_board(name: str) -> None:
    board = GameGenerator.sample(name)

    assert board.size == 6
    assert "1" in board.vehicles()


def test_unknown_sample_lists_choices() -> None:
    with pytest.raises(KeyError, match="medium"):
        GameGenerator.sample("nope")


# -- loading ------------------------------------------------------------------


def test_load_reads_json_grid(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text(json.dumps(SAMPLES["hard"]))

    assert GameGenerator.load(path) == GameGenerator.sample("hard")


def test_load_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text("[[0, 0,")

    with pytest.raises(InvalidBoard, match="Cannot read a board"):
        GameGenerator.load(path)


def test_load_rejects_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(InvalidBoard):
        GameGenerator.load(path)


def test_load_rejects_unreadable_path(tmp_path: Path) -> None:
    # A directory cannot be read as a file.
    with pytest.raises(InvalidBoard):
        GameGenerator.load(tmp_path)


def test_load_rejects_non_grid(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text(json.dumps({"tiles": []}))

    with pytest.raises(InvalidBoard):
        GameGenerator.load(path)


def test_load_rejects_wrong_size(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text(json.dumps([[0] * 6 for _ in range(5)]))

    with pytest.raises(InvalidBoard):
        GameGenerator.load(path)


# -- scrambling ---------------------------------------------------------------


def test_scramble_is_reproducible_with_seed() -> None:
    board = GameGenerator.sample("medium")

    a = GameGenerator.scramble(board, 40, random.Random(7))
    b = GameGenerator.scramble(board, 40, random.Random(7))

    assert a == b


def test_scramble_keeps_board_valid() -> None:
    board = GameGenerator.sample("hard")

    scrambled = GameGenerator.scramble(board, 50, random.Random(3))
    rebuilt = Board.from_key(scrambled.key)

    before = {vid: v.length for vid, v in board.vehicles().items()}
    after = {vid: v.length for vid, v in rebuilt.vehicles().items()}
    assert before == after


def test_scramble_of_solved_board_stays_within_reach() -> None:
    board = GameGenerator.sample("solved")

    scrambled = GameGenerator.scramble(board, 3, random.Random(0))

    assert len(Solver.solve(scrambled)) <= 3


def test_scramble_without_moves_returns_same_board() -> None:
    board = Board.from_key("0" * 36)

    assert GameGenerator.scramble(board, 10, random.Random(0)) == board
