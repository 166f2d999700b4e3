"""Value objects handed back to callers of the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class GameStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single ``GamePlay.move`` call.

    ``spawned`` is the ``(row, col, value)`` of the tile placed after an
    effective move, or ``None`` when nothing moved or the grid was full.
    """

    moved: bool
    score_delta: int = 0
    merges: int = 0
    spawned: tuple[int, int, int] | None = None


@dataclass(frozen=True)
class GameSnapshot:
    grid: tuple[tuple[int, ...], ...]
    score: int
    moves: int
    status: GameStatus
    won: bool
    continuing: bool
