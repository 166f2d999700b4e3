"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
The best score is a high-water mark kept for the lifetime of the process.
"""

from __future__ import annotations

import random
import sys

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.outcome import GameStatus
from frontend.cli.input_handler import MOVES, get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

# 256-colour foregrounds, warming up as tiles grow
_TILE_FG: dict[int, str] = {
    2: "\033[38;5;250m",
    4: "\033[38;5;223m",
    8: "\033[38;5;215m",
    16: "\033[38;5;209m",
    32: "\033[38;5;203m",
    64: "\033[38;5;196m",
    128: "\033[38;5;228m",
    256: "\033[38;5;227m",
    512: "\033[38;5;226m",
    1024: "\033[38;5;220m",
    2048: "\033[38;5;214m",
}
_BIG_FG = "\033[38;5;201m"

_CELL_W = 6


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + (("-" * _CELL_W + "+") * board.size)

    lines: list[str] = [sep]
    for row in board.tiles:
        cells: list[str] = []
        for val in row:
            if val == 0:
                cells.append(f"{_DIM}{'·':^{_CELL_W}}{_R}")
            else:
                fg = _TILE_FG.get(val, _BIG_FG)
                cells.append(f"{_BOLD}{fg}{val:^{_CELL_W}}{_R}")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens --------------------------------------------------------------------


def _show_game(game: GamePlay, best: int, status: str = "") -> None:
    _clear()
    print(f"  {_C}=== 2048 (goal {game.config.win_tile}) ==={_R}")
    print()
    print(
        f"  Score: {_Y}{game.score}{_R}  |  "
        f"Best: {_Y}{best}{_R}  |  "
        f"Moves: {_Y}{game.state.moves}{_R}"
    )
    print()
    print(_render_board(game.state.board))
    print()
    if status:
        print(f"  {status}")
        print()

    if game.status is GameStatus.WON:
        print(f"  {_G}★ You reached {game.config.win_tile}! ★{_R}")
        print(f"  {_C}C{_R}: keep playing  |  {_C}R{_R}: new game  |  {_C}Q{_R}: quit")
    elif game.status is GameStatus.LOST:
        print(f"  {_RED}Game over, no moves left.{_R}")
        print(f"  {_C}R{_R}: new game  |  {_C}Q{_R}: quit")
    else:
        print(
            f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
            f"{_C}R{_R}: new game  |  "
            f"{_C}Q{_R}: quit"
        )


# -- game loop --------------------------------------------------------------------


def _play(game: GamePlay) -> int:
    """Run the input loop until the player quits; return the best score."""
    best = game.score
    status = ""

    while True:
        best = max(best, game.score)
        _show_game(game, best, status)
        status = ""
        key = get_key()

        if key in MOVES:
            result = game.move(MOVES[key])
            if result.moved and result.score_delta:
                status = f"{_G}+{result.score_delta}{_R}"
            elif not result.moved and game.status is GameStatus.IN_PROGRESS:
                status = f"{_DIM}Nothing moves that way.{_R}"
        elif key == "continue":
            game.keep_playing()
        elif key == "restart":
            game.reset()
        elif key == "quit":
            return max(best, game.score)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Launch the vanilla CLI."""
    game = GamePlay(config, rng=random.Random(seed))
    best = _play(game)
    _clear()
    print(f"  Best score this session: {best}")
    print("  Goodbye!\n")
