"""Pure slide/merge rules — no randomness, no session state."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board, Direction


@dataclass(frozen=True)
class SlideOutcome:
    """Result of sliding a whole board in one direction (before spawning)."""

    tiles: list[list[int]]
    score_delta: int
    merges: int
    changed: bool


# -- lines --------------------------------------------------------------------


def compact(line: list[int]) -> list[int]:
    """Drop empty cells, keeping the order of the remaining tiles."""
    return [v for v in line if v != 0]


def merge_line(line: list[int]) -> tuple[list[int], int, int]:
    """Slide *line* toward index 0, merging equal neighbours once.

    The line is given in the direction of travel: index 0 is the wall the
    tiles move toward.  Returns ``(new_line, score_delta, merges)`` where
    *new_line* has the same length as *line*.

    A freshly merged tile is never merged again in the same pass, so
    ``[2, 2, 2, 2]`` becomes ``[4, 4, 0, 0]``.
    """
    dense = compact(line)
    result: list[int] = []
    score = 0
    merges = 0

    i = 0
    while i < len(dense):
        if i + 1 < len(dense) and dense[i] == dense[i + 1]:
            value = dense[i] * 2
            result.append(value)
            score += value
            merges += 1
            i += 2  # both tiles are consumed
        else:
            result.append(dense[i])
            i += 1

    result += [0] * (len(line) - len(result))
    return result, score, merges


# -- board ----------------------------------------------------------------------


def line_coords(direction: Direction, index: int, size: int) -> list[tuple[int, int]]:
    """Cells of line *index*, ordered from the leading edge to the trailing one.

    LEFT  → row *index*, columns 0..n-1
    RIGHT → row *index*, columns n-1..0
    UP    → column *index*, rows 0..n-1
    DOWN  → column *index*, rows n-1..0
    """
    forward = range(size)
    backward = range(size - 1, -1, -1)
    if direction == Direction.LEFT:
        return [(index, c) for c in forward]
    if direction == Direction.RIGHT:
        return [(index, c) for c in backward]
    if direction == Direction.UP:
        return [(r, index) for r in forward]
    if direction == Direction.DOWN:
        return [(r, index) for r in backward]
    raise ValueError(f"Unknown direction: {direction!r}")


def slide(board: Board, direction: Direction) -> SlideOutcome:
    """Apply a move to a copy of *board*'s tiles.

    *board* itself is left untouched; the caller decides whether to commit
    the returned tiles.
    """
    direction = Direction(direction)
    tiles = [row[:] for row in board.tiles]
    score = 0
    merges = 0

    for index in range(board.size):
        coords = line_coords(direction, index, board.size)
        line = [tiles[r][c] for r, c in coords]
        new_line, line_score, line_merges = merge_line(line)
        for (r, c), value in zip(coords, new_line):
            tiles[r][c] = value
        score += line_score
        merges += line_merges

    return SlideOutcome(
        tiles=tiles,
        score_delta=score,
        merges=merges,
        changed=tiles != board.tiles,
    )


def can_move(board: Board, direction: Direction) -> bool:
    return slide(board, direction).changed


def has_adjacent_pair(board: Board) -> bool:
    """True if any cell equals its right or bottom neighbour."""
    n = board.size
    for r in range(n):
        for c in range(n):
            current = board.tiles[r][c]
            if c + 1 < n and board.tiles[r][c + 1] == current:
                return True
            if r + 1 < n and board.tiles[r + 1][c] == current:
                return True
    return False


def is_stuck(board: Board) -> bool:
    """A full board with no equal neighbours has no moves left."""
    return board.is_full() and not has_adjacent_pair(board)
