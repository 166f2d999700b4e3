"""Tile spawning."""

from __future__ import annotations

import random

import pytest

from backend.engine.tilespawner import TileSpawner
from backend.models.board import Board


class _ScriptedRng:
    """Picks the cell at *index* and always rolls *roll*."""

    def __init__(self, index: int = 0, roll: float = 0.5) -> None:
        self.index = index
        self.roll = roll

    def choice(self, seq):
        return seq[self.index]

    def random(self) -> float:
        return self.roll


@pytest.mark.parametrize(
    "roll, expected",
    [(0.0, 4), (0.09, 4), (0.1, 2), (0.95, 2)],
    ids=["0.0", "0.09", "0.1", "0.95"],
)
def test_spawn_value_follows_roll(roll: float, expected: int) -> None:
    spawner = TileSpawner(_ScriptedRng(roll=roll))
    board = Board.empty()
    assert spawner.spawn(board) == (0, 0, expected)
    assert board.get_tile(0, 0) == expected


def test_spawn_only_targets_empty_cells() -> None:
    board = Board.from_flat([2] * 15 + [0])
    spawned = TileSpawner(random.Random(3)).spawn(board)
    assert spawned is not None
    assert spawned[:2] == (3, 3)
    assert board.is_full()


def test_spawn_on_full_board_is_a_no_op() -> None:
    board = Board.from_flat([2, 4] * 8)
    before = board.snapshot()
    assert TileSpawner(random.Random(0)).spawn(board) is None
    assert board.snapshot() == before


def test_same_seed_same_tiles() -> None:
    a = TileSpawner(random.Random(42)).generate()
    b = TileSpawner(random.Random(42)).generate()
    assert a.snapshot() == b.snapshot()
    assert a.tile_count() == 2


def test_four_is_rare() -> None:
    spawner = TileSpawner(random.Random(2024))
    values = [spawner.spawn(Board.empty())[2] for _ in range(5000)]
    assert set(values) == {2, 4}
    assert 0.07 < values.count(4) / len(values) < 0.13


def test_custom_four_probability() -> None:
    spawner = TileSpawner(_ScriptedRng(roll=0.3), four_probability=0.5)
    assert spawner.spawn(Board.empty())[2] == 4
