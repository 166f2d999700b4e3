"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging

from backend.config import GameConfig
from backend.engine.gamerules import is_stuck
from backend.models.board import Board
from backend.models.outcome import GameSnapshot, GameStatus

log = logging.getLogger(__name__)


class GameState:
    """Holds the current board, score, move counter, and terminal flags.

    ``won`` is the one-shot win latch.  ``continuing`` records that the
    player dismissed the win and kept playing, so the win notification is
    not raised again.
    """

    def __init__(self, board: Board, config: GameConfig | None = None) -> None:
        self.board = board
        self.config = config or GameConfig()
        self.score: int = 0
        self.moves: int = 0
        self.won: bool = False
        self.lost: bool = False
        self.continuing: bool = False

    # -- score / moves ----------------------------------------------------------

    def add_score(self, points: int) -> None:
        self.score += points

    def increment_moves(self) -> None:
        self.moves += 1

    # -- status -----------------------------------------------------------------

    def check_status(self) -> GameStatus:
        """Re-evaluate the win and loss flags against the current board.

        The win check runs first and skips the loss check when it fires.
        """
        if not self.won and self.board.contains(self.config.win_tile):
            self.won = True
            self.continuing = False
            log.debug("win tile %d reached", self.config.win_tile)
            return self.status

        self._check_loss()
        return self.status

    def _check_loss(self) -> None:
        if not self.lost and is_stuck(self.board):
            self.lost = True
            log.debug("no moves left, score %d", self.score)

    def keep_playing(self) -> None:
        """Acknowledge a pending win and resume play.

        The loss check skipped when the win fired is run now, so a board
        that was won and stuck at once ends up lost.
        """
        if self.status is not GameStatus.WON:
            return
        self.continuing = True
        if self.config.rearm_win:
            self.won = False
        log.debug("continuing after win (rearm=%s)", self.config.rearm_win)
        self._check_loss()

    @property
    def status(self) -> GameStatus:
        if self.lost:
            return GameStatus.LOST
        if self.won and not self.continuing:
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    @property
    def accepts_moves(self) -> bool:
        return self.status is GameStatus.IN_PROGRESS

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.board.snapshot(),
            score=self.score,
            moves=self.moves,
            status=self.status,
            won=self.won,
            continuing=self.continuing,
        )
