"""Core gameplay logic — processes moves, spawns tiles, and tracks status."""

from __future__ import annotations

import logging
import random

from backend.config import GameConfig
from backend.engine.gamerules import slide
from backend.engine.gamestate import GameState
from backend.engine.tilespawner import TileSpawner
from backend.models.board import Board, Direction
from backend.models.outcome import GameSnapshot, GameStatus, MoveResult

log = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    Pass a seeded ``random.Random`` (or just *seed*) to make tile spawns
    reproducible.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config or GameConfig()
        if rng is None:
            rng = random.Random(seed)
        self.spawner = TileSpawner(rng, self.config.four_probability)
        self.state = GameState(Board.empty(), self.config)
        self.reset()

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        score: int = 0,
    ) -> "GamePlay":
        """Create a game session from an existing board; no tiles are spawned."""
        obj = object.__new__(cls)
        obj.config = config or GameConfig()
        if rng is None:
            rng = random.Random(seed)
        obj.spawner = TileSpawner(rng, obj.config.four_probability)
        obj.state = GameState(board, obj.config)
        obj.state.score = score
        obj.state.check_status()
        return obj

    # -- lifecycle --------------------------------------------------------------

    def reset(self) -> None:
        """Start a new game: empty board, zero score, two fresh tiles."""
        self.state = GameState(Board.empty(), self.config)
        for _ in range(self.config.start_tiles):
            self.spawn()
        log.debug("new game: %s", self.state.board.snapshot())

    def spawn(self) -> tuple[int, int, int] | None:
        """Place one random tile; a no-op returning ``None`` on a full board."""
        return self.spawner.spawn(self.state.board)

    def keep_playing(self) -> None:
        """Dismiss a pending win and continue the same game."""
        self.state.keep_playing()

    # -- movement ---------------------------------------------------------------

    def move(self, direction: Direction) -> MoveResult:
        """Slide every tile toward *direction*, merging equal neighbours.

        An effective move commits the new grid, adds the merged values to
        the score, spawns one tile and re-checks the status.  Anything else
        (nothing would change, the game is lost, or a win is waiting to be
        acknowledged) leaves the game untouched and returns ``moved=False``.
        """
        direction = Direction(direction)
        if not self.state.accepts_moves:
            log.debug("move %s rejected: game is %s", direction, self.state.status)
            return MoveResult(moved=False)

        outcome = slide(self.state.board, direction)
        if not outcome.changed:
            return MoveResult(moved=False)

        self.state.board.tiles = outcome.tiles
        self.state.add_score(outcome.score_delta)
        self.state.increment_moves()
        spawned = self.spawn()
        self.check_status()
        log.debug(
            "move %s: +%d from %d merge(s)",
            direction,
            outcome.score_delta,
            outcome.merges,
        )
        return MoveResult(
            moved=True,
            score_delta=outcome.score_delta,
            merges=outcome.merges,
            spawned=spawned,
        )

    def check_status(self) -> GameStatus:
        return self.state.check_status()

    def can_move(self, direction: Direction) -> bool:
        """Return True if *direction* would change the board right now."""
        if not self.state.accepts_moves:
            return False
        return slide(self.state.board, Direction(direction)).changed

    def available_moves(self) -> list[Direction]:
        return [d for d in Direction if self.can_move(d)]

    # -- queries ----------------------------------------------------------------

    def get_grid(self) -> tuple[tuple[int, ...], ...]:
        return self.state.board.snapshot()

    def get_score(self) -> int:
        return self.state.score

    def get_status(self) -> GameStatus:
        return self.state.status

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    @property
    def grid(self) -> tuple[tuple[int, ...], ...]:
        return self.get_grid()

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def continuing(self) -> bool:
        return self.state.continuing

    @property
    def is_won(self) -> bool:
        return self.state.status is GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self.state.status is GameStatus.LOST

    @property
    def max_tile(self) -> int:
        return self.state.board.max_tile
