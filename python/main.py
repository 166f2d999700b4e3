#!/usr/bin/env python3
"""2048 tile merge game.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich            # Rich terminal
    python main.py -f vanilla -t 64   # plain terminal, quick win at 64
    python main.py --seed 7 -v        # reproducible spawns, debug log
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_WIN_TILE, GameConfig  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        logging.getLogger("backend").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )


def _check_target(value: int) -> int:
    if value < 4 or value & (value - 1):
        raise typer.BadParameter("must be a power of two >= 4")
    return value


def _menu_loop(config: GameConfig, seed: Optional[int]) -> None:
    while True:
        print()
        print("  ====================================")
        print("            2 0 4 8   M E R G E       ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            frontend = {"1": Frontend.vanilla, "2": Frontend.rich}[choice]
            mod = importlib.import_module(_RUNNERS[frontend])
            mod.run(config=config, seed=seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    target: int = typer.Option(
        DEFAULT_WIN_TILE, "-t", "--target",
        callback=_check_target,
        help="Tile value that wins the game (power of two).",
    ),
    rearm_win: bool = typer.Option(
        False, "--rearm-win",
        help="Announce the win again after choosing to keep playing.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for tile spawns, for reproducible games.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine events to the terminal.",
    ),
) -> None:
    """2048 tile merge game."""
    _setup_logging(verbose)
    config = GameConfig(win_tile=target, rearm_win=rearm_win)

    if frontend is None:
        _menu_loop(config, seed)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config=config, seed=seed)


if __name__ == "__main__":
    app()
