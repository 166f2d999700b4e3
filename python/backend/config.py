"""Game rule configuration."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import BOARD_SIZE

DEFAULT_WIN_TILE = 2048


@dataclass(frozen=True)
class GameConfig:
    """Tunable rules for a session.

    ``rearm_win`` controls what happens after the player chooses to keep
    playing past a win: ``False`` never shows the win again in this session,
    ``True`` lets it fire again on the next status check that still finds
    ``win_tile`` on the grid.
    """

    win_tile: int = DEFAULT_WIN_TILE
    rearm_win: bool = False
    four_probability: float = 0.1
    start_tiles: int = 2
    size: int = BOARD_SIZE

    def __post_init__(self) -> None:
        if self.size != BOARD_SIZE:
            raise ValueError(f"Only {BOARD_SIZE}×{BOARD_SIZE} boards are supported.")
        if self.win_tile < 4 or self.win_tile & (self.win_tile - 1):
            raise ValueError(
                f"win_tile must be a power of two >= 4, got {self.win_tile}."
            )
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(
                f"four_probability must be within [0, 1], got {self.four_probability}."
            )
        if not 0 <= self.start_tiles <= BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"start_tiles out of range: {self.start_tiles}.")
