"""Places new tiles on the board."""

from __future__ import annotations

import logging
import random

from backend.models.board import Board

log = logging.getLogger(__name__)


class TileSpawner:
    """Drops a 2 (or, less often, a 4) into a random empty cell.

    All randomness goes through *rng* so a seeded ``random.Random`` gives
    reproducible games.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        four_probability: float = 0.1,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.four_probability = four_probability

    def spawn(self, board: Board) -> tuple[int, int, int] | None:
        """Place one tile on *board* in-place.

        Returns ``(row, col, value)``, or ``None`` when the board is full.
        """
        cells = board.empty_cells()
        if not cells:
            log.debug("spawn skipped: board is full")
            return None

        row, col = self.rng.choice(cells)
        value = 4 if self.rng.random() < self.four_probability else 2
        board.tiles[row][col] = value
        log.debug("spawned %d at (%d, %d)", value, row, col)
        return row, col, value

    def generate(self, count: int = 2) -> Board:
        """Return a fresh board holding *count* spawned tiles."""
        board = Board.empty()
        for _ in range(count):
            self.spawn(board)
        return board
