"""Board codec and model tests."""

from __future__ import annotations

import pytest

from unblockcar.engine.gamegenerator import SAMPLES
from unblockcar.models.board import Board, Orientation, decode, encode
from unblockcar.models.config import SolverConfig
from unblockcar.models.errors import InvalidBoard


def _empty(size: int = 6) -> list[list]:
    return [[0] * size for _ in range(size)]


# -- codec --------------------------------------------------------------------


def test_encode_flattens_row_major() -> None:
    grid = SAMPLES["medium"]

    assert encode(grid) == "222003004003114003504066500070888070"


def test_encode_accepts_letters_and_string_digits() -> None:
    grid = _empty()
    grid[0][0] = grid[0][1] = "A"
    grid[5][4] = grid[5][5] = "7"

    key = encode(grid)

    assert key[:2] == "AA"
    assert key[-2:] == "77"


@pytest.mark.parametrize("name", list(SAMPLES))
def test_decode_inverts_encode(name: str) -> None:
    grid = SAMPLES[name]

    assert decode(encode(grid)) == grid


@pytest.mark.parametrize(
    "value",
    [10, -1, "a", "AB", "", None, 1.5, True],
    ids=["ten", "negative", "lowercase", "two-chars", "blank", "none", "float", "bool"],
)
def test_encode_rejects_unknown_tokens(value) -> None:
    grid = _empty()
    grid[0][0] = value

    with pytest.raises(InvalidBoard):
        encode(grid)


def test_encode_rejects_wrong_dimensions() -> None:
    with pytest.raises(InvalidBoard):
        encode(_empty(5))
    with pytest.raises(InvalidBoard):
        encode([[0] * 5 for _ in range(6)])


def test_decode_rejects_wrong_length() -> None:
    with pytest.raises(InvalidBoard):
        decode("0" * 35)


def test_invalid_board_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        encode(_empty(3))


# -- vehicle shapes -----------------------------------------------------------


def test_vehicles_have_orientation_and_length() -> None:
    vehicles = Board.from_grid(SAMPLES["medium"]).vehicles()

    assert vehicles["1"].orientation is Orientation.HORIZONTAL
    assert vehicles["1"].cells == ((2, 0), (2, 1))
    assert vehicles["4"].orientation is Orientation.VERTICAL
    assert vehicles["4"].length == 3
    assert vehicles["8"].length == 3


def test_single_cell_block_has_no_orientation() -> None:
    grid = _empty()
    grid[0][0] = 9

    vehicle = Board.from_grid(grid).vehicles()["9"]

    assert vehicle.orientation is None


def test_bent_vehicle_is_rejected() -> None:
    grid = _empty()
    grid[2][0] = grid[2][1] = grid[3][1] = 1

    with pytest.raises(InvalidBoard, match="straight"):
        Board.from_grid(grid)


def test_split_vehicle_is_rejected() -> None:
    grid = _empty()
    grid[2][0] = grid[2][1] = grid[2][3] = grid[2][4] = 1

    with pytest.raises(InvalidBoard, match="contiguous"):
        Board.from_grid(grid)


def test_from_key_validates() -> None:
    with pytest.raises(InvalidBoard):
        Board.from_key("1" + "0" * 6 + "1" + "0" * 28)


# -- board queries ------------------------------------------------------------


def test_get_cell_and_str() -> None:
    board = Board.from_grid(SAMPLES["hard"])

    assert board.get_cell(1, 5) == "A"
    assert board.get_cell(2, 0) == "1"
    assert str(board).splitlines()[2] == "11238A"


def test_boards_with_same_cells_are_equal() -> None:
    a = Board.from_grid(SAMPLES["easy"])
    b = Board.from_key(encode(SAMPLES["easy"]))

    assert a == b
    assert hash(a) == hash(b)


# -- configuration ------------------------------------------------------------


def test_default_exit_is_row_two_right_edge() -> None:
    config = SolverConfig()

    assert config.exit_indices == (16, 17)
    assert config.is_won(encode(SAMPLES["solved"]))
    assert not config.is_won(encode(SAMPLES["two-step"]))


def test_for_exit_row() -> None:
    config = SolverConfig.for_exit_row(3, size=7, target="A")

    assert config.exit_cells == ((3, 5), (3, 6))
    assert config.target == "A"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"target": "a"},
        {"target": "0"},
        {"exit_cells": ()},
        {"exit_cells": ((6, 0),)},
        {"max_states": 0},
        {"time_limit": 0},
        {"size": 1},
    ],
    ids=["lowercase-target", "empty-target", "no-exit", "exit-off-board",
         "zero-states", "zero-time", "tiny-board"],
)
def test_config_validation(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)
