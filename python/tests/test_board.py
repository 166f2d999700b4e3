"""Board model and rule configuration."""

from __future__ import annotations

import pytest

from backend.config import GameConfig
from backend.models.board import Board


def test_empty_board() -> None:
    board = Board.empty()
    assert board.snapshot() == ((0,) * 4,) * 4
    assert len(board.empty_cells()) == 16
    assert not board.is_full()


def test_from_flat_is_row_major() -> None:
    board = Board.from_flat([2] + [0] * 14 + [4])
    assert board.get_tile(0, 0) == 2
    assert board.get_tile(3, 3) == 4
    assert board.tile_count() == 2
    assert board.max_tile == 4


@pytest.mark.parametrize(
    "rows",
    [
        [[0] * 4] * 3,
        [[0] * 4, [0] * 4, [0] * 4, [0] * 3],
        [[0] * 5] * 4,
    ],
    ids=["three-rows", "short-row", "wide-rows"],
)
def test_from_rows_rejects_bad_shape(rows: list[list[int]]) -> None:
    with pytest.raises(ValueError, match="4×4"):
        Board.from_rows(rows)


@pytest.mark.parametrize("value", [1, 3, 6, -2], ids=str)
def test_from_rows_rejects_bad_tiles(value: int) -> None:
    rows = [[0] * 4 for _ in range(4)]
    rows[1][2] = value
    with pytest.raises(ValueError, match=r"\(1, 2\)"):
        Board.from_rows(rows)


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(ValueError, match="Expected 16 tiles"):
        Board.from_flat([0] * 15)


def test_snapshot_is_detached() -> None:
    board = Board.from_flat([2] + [0] * 15)
    snap = board.snapshot()
    board.tiles[0][0] = 4
    assert snap[0][0] == 2


def test_copy_is_deep() -> None:
    board = Board.from_flat([2] + [0] * 15)
    clone = board.copy()
    clone.tiles[0][0] = 8
    assert board.get_tile(0, 0) == 2


# -- config -------------------------------------------------------------------------


def test_default_config() -> None:
    config = GameConfig()
    assert config.win_tile == 2048
    assert config.rearm_win is False
    assert config.four_probability == pytest.approx(0.1)
    assert config.start_tiles == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"win_tile": 2},
        {"win_tile": 100},
        {"four_probability": 1.5},
        {"start_tiles": 17},
        {"size": 5},
    ],
    ids=["tiny-target", "non-power", "odds", "start-tiles", "size"],
)
def test_config_validation(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)
