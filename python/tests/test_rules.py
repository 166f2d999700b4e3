"""Slide/merge rules — line merging, board slides, and stuck detection."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamerules import (
    can_move,
    compact,
    has_adjacent_pair,
    is_stuck,
    merge_line,
    slide,
)
from backend.models.board import Board, Direction


def _board(*rows: list[int]) -> Board:
    return Board.from_rows([list(r) for r in rows])


def _row_board(row: list[int]) -> Board:
    return _board(row, [0] * 4, [0] * 4, [0] * 4)


def _col_board(col: list[int]) -> Board:
    return _board(*([v, 0, 0, 0] for v in col))


# -- merge_line -----------------------------------------------------------------

_MERGE_CASES = [
    # (line, expected, score, merges)
    ([0, 0, 0, 0], [0, 0, 0, 0], 0, 0),
    ([2, 0, 0, 0], [2, 0, 0, 0], 0, 0),
    ([0, 0, 0, 2], [2, 0, 0, 0], 0, 0),
    ([2, 2, 0, 0], [4, 0, 0, 0], 4, 1),
    ([2, 0, 0, 2], [4, 0, 0, 0], 4, 1),
    ([2, 2, 2, 0], [4, 2, 0, 0], 4, 1),
    ([2, 2, 2, 2], [4, 4, 0, 0], 8, 2),
    ([2, 2, 4, 4], [4, 8, 0, 0], 12, 2),
    ([4, 4, 8, 0], [8, 8, 0, 0], 8, 1),
    ([4, 2, 2, 0], [4, 4, 0, 0], 4, 1),
    ([2, 4, 2, 4], [2, 4, 2, 4], 0, 0),
    ([8, 0, 8, 8], [16, 8, 0, 0], 16, 1),
]


@pytest.mark.parametrize(
    "line, expected, score, merges",
    _MERGE_CASES,
    ids=[str(case[0]) for case in _MERGE_CASES],
)
def test_merge_line(line: list[int], expected: list[int], score: int, merges: int) -> None:
    assert merge_line(line) == (expected, score, merges)


def test_merge_line_does_not_mutate_input() -> None:
    line = [2, 2, 0, 4]
    merge_line(line)
    assert line == [2, 2, 0, 4]


def test_compact_keeps_order() -> None:
    assert compact([0, 4, 0, 2]) == [4, 2]


# -- slide ------------------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.LEFT, [4, 2, 0, 0]),
        (Direction.RIGHT, [0, 0, 2, 4]),
    ],
    ids=["left", "right"],
)
def test_slide_row_triple(direction: Direction, expected: list[int]) -> None:
    outcome = slide(_row_board([2, 2, 2, 0]), direction)
    assert outcome.tiles[0] == expected
    assert outcome.score_delta == 4
    assert outcome.changed


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, [4, 2, 0, 0]),
        (Direction.DOWN, [0, 0, 2, 4]),
    ],
    ids=["up", "down"],
)
def test_slide_column_triple(direction: Direction, expected: list[int]) -> None:
    outcome = slide(_col_board([2, 2, 2, 0]), direction)
    assert [row[0] for row in outcome.tiles] == expected
    assert outcome.score_delta == 4


def test_slide_right_merges_toward_the_wall() -> None:
    outcome = slide(_row_board([2, 0, 2, 4]), Direction.RIGHT)
    assert outcome.tiles[0] == [0, 0, 4, 4]
    assert outcome.score_delta == 4
    assert outcome.merges == 1


def test_slide_processes_every_line() -> None:
    board = _board(
        [2, 2, 0, 0],
        [0, 4, 0, 4],
        [8, 0, 8, 8],
        [2, 4, 8, 16],
    )
    outcome = slide(board, Direction.LEFT)
    assert outcome.tiles == [
        [4, 0, 0, 0],
        [8, 0, 0, 0],
        [16, 8, 0, 0],
        [2, 4, 8, 16],
    ]
    assert outcome.score_delta == 4 + 8 + 16
    assert outcome.merges == 3


def test_slide_leaves_board_untouched() -> None:
    board = _row_board([2, 2, 0, 0])
    slide(board, Direction.LEFT)
    assert board.tiles[0] == [2, 2, 0, 0]


def test_slide_accepts_direction_strings() -> None:
    assert slide(_row_board([0, 0, 0, 2]), "left").tiles[0] == [2, 0, 0, 0]


def test_slide_rejects_unknown_direction() -> None:
    with pytest.raises(ValueError):
        slide(_row_board([2, 0, 0, 0]), "sideways")


def test_second_slide_in_same_direction_is_a_no_op() -> None:
    board = _board(
        [2, 2, 2, 2],
        [0, 4, 4, 0],
        [8, 0, 0, 8],
        [2, 0, 4, 0],
    )
    for direction in Direction:
        first = slide(board, direction)
        again = slide(Board(tiles=first.tiles), direction)
        assert not again.changed, direction


def test_tile_count_drops_by_merge_count() -> None:
    rng = random.Random(1234)
    for _ in range(200):
        flat = [rng.choice([0, 0, 2, 2, 4, 8]) for _ in range(16)]
        board = Board.from_flat(flat)
        for direction in Direction:
            outcome = slide(board, direction)
            after = Board(tiles=outcome.tiles)
            assert after.tile_count() == board.tile_count() - outcome.merges
            assert sum(map(sum, outcome.tiles)) == sum(flat)


# -- stuck detection ------------------------------------------------------------

_CHECKERBOARD = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


def test_checkerboard_is_stuck() -> None:
    board = _board(*_CHECKERBOARD)
    assert not has_adjacent_pair(board)
    assert is_stuck(board)
    assert not any(can_move(board, d) for d in Direction)


def test_full_board_with_vertical_pair_is_not_stuck() -> None:
    board = _board(
        [2, 4, 8, 16],
        [4, 8, 16, 32],
        [8, 16, 32, 64],
        [8, 32, 64, 128],
    )
    assert has_adjacent_pair(board)
    assert not is_stuck(board)
    assert can_move(board, Direction.UP)
    assert not can_move(board, Direction.LEFT)


def test_board_with_gap_is_not_stuck() -> None:
    rows = [row[:] for row in _CHECKERBOARD]
    rows[0][0] = 0
    assert not is_stuck(_board(*rows))
