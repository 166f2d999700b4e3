"""Board model for the tile merge game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

BOARD_SIZE = 4


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def _is_tile_value(value: int) -> bool:
    return value == 0 or (value >= 2 and value & (value - 1) == 0)


@dataclass
class Board:
    """Represents the 4×4 merge grid.

    Tiles are stored as a 2D list of ints. 0 represents an empty cell.
    """

    tiles: list[list[int]] = field(
        default_factory=lambda: [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    )
    size: int = BOARD_SIZE

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows, validating shape and values.

        Example::

            Board.from_rows([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(
                f"Expected a {BOARD_SIZE}×{BOARD_SIZE} grid, got "
                f"{[len(row) for row in rows]}."
            )
        tiles = [list(row) for row in rows]
        for r, row in enumerate(tiles):
            for c, v in enumerate(row):
                if not isinstance(v, int) or not _is_tile_value(v):
                    raise ValueError(
                        f"Invalid tile {v!r} at ({r}, {c}): tiles must be 0 "
                        f"or a power of two."
                    )
        return cls(tiles=tiles)

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list."""
        if len(flat) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"Expected {BOARD_SIZE * BOARD_SIZE} tiles for a "
                f"{BOARD_SIZE}×{BOARD_SIZE} board, got {len(flat)}."
            )
        return cls.from_rows(
            [flat[r * BOARD_SIZE : (r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]
        )

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return ``(row, col)`` of every empty cell in row-major order."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] == 0
        ]

    def is_full(self) -> bool:
        return all(v != 0 for row in self.tiles for v in row)

    def contains(self, value: int) -> bool:
        return any(value in row for row in self.tiles)

    def tile_count(self) -> int:
        return sum(1 for row in self.tiles for v in row if v != 0)

    @property
    def max_tile(self) -> int:
        return max(max(row) for row in self.tiles)

    def snapshot(self) -> tuple[tuple[int, ...], ...]:
        """Return a read-only copy of the grid."""
        return tuple(tuple(row) for row in self.tiles)

    def copy(self) -> Board:
        return Board(tiles=[row[:] for row in self.tiles], size=self.size)
