"""Rich terminal frontend — styled tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.outcome import GameStatus
from frontend.cli.input_handler import MOVES, get_key

console = Console()

# Classic palette: (background, foreground)
_TILE_STYLE: dict[int, tuple[str, str]] = {
    0: ("#cdc1b4", "#cdc1b4"),
    2: ("#eee4da", "#776e65"),
    4: ("#ede0c8", "#776e65"),
    8: ("#f2b179", "#f9f6f2"),
    16: ("#f59563", "#f9f6f2"),
    32: ("#f67c5f", "#f9f6f2"),
    64: ("#f65e3b", "#f9f6f2"),
    128: ("#edcf72", "#f9f6f2"),
    256: ("#edcc61", "#f9f6f2"),
    512: ("#edc850", "#f9f6f2"),
    1024: ("#edc53f", "#f9f6f2"),
    2048: ("#edc22e", "#f9f6f2"),
}
_BIG_STYLE = ("#3c3a32", "#f9f6f2")

_CELL_W = 6


# -- board rendering ----------------------------------------------------------


def _tile(val: int) -> Text:
    bg, fg = _TILE_STYLE.get(val, _BIG_STYLE)
    label = str(val) if val else "·"
    return Text(f"{label:^{_CELL_W}}", style=f"bold {fg} on {bg}")


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=False,
        box=rich.box.HEAVY,
        border_style="#bbada0",
        padding=(0, 0),
    )
    for _ in range(board.size):
        table.add_column(width=_CELL_W, justify="center")

    for row in board.tiles:
        table.add_row(*(_tile(val) for val in row))

    return table


def _score_line(game: GamePlay, best: int) -> Text:
    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(game.score), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(best), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    return stats


def _controls(game: GamePlay) -> Text:
    controls = Text()
    if game.status is GameStatus.WON:
        controls.append("  C", style="bold cyan")
        controls.append("  keep playing   ", style="dim")
    elif game.status is GameStatus.IN_PROGRESS:
        controls.append("  ↑↓←→", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("WASD", style="bold cyan")
        controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new game   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


# -- screens --------------------------------------------------------------------


def _draw_game(game: GamePlay, best: int, status: str = "") -> None:
    console.clear()

    parts = [
        Align.center(_score_line(game, best)),
        Text(""),
        Align.center(_render_board(game.state.board)),
    ]

    if game.status is GameStatus.WON:
        banner = Text()
        banner.append("\n  ★ ", style="bold yellow")
        banner.append(f"You reached {game.config.win_tile}!", style="bold green")
        banner.append(" ★", style="bold yellow")
        parts.append(Align.center(banner))
        title, border = "[bold green]2048  You win![/bold green]", "bold green"
    elif game.status is GameStatus.LOST:
        parts.append(
            Align.center(Text("\n  Game over, no moves left.", style="bold red"))
        )
        title, border = "[bold red]2048  Game over[/bold red]", "red"
    else:
        title, border = f"[bold cyan]2048  goal {game.config.win_tile}[/bold cyan]", "bright_blue"

    panel = Panel(
        Group(*parts),
        title=title,
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls(game)))


# -- game loop --------------------------------------------------------------------


def _play(game: GamePlay) -> int:
    """Run the input loop until the player quits; return the best score."""
    best = game.score
    status = ""

    while True:
        best = max(best, game.score)
        _draw_game(game, best, status)
        status = ""
        key = get_key()

        if key in MOVES:
            result = game.move(MOVES[key])
            if result.moved and result.score_delta:
                status = f"[green]+{result.score_delta}[/green]"
            elif not result.moved and game.status is GameStatus.IN_PROGRESS:
                status = "[dim]Nothing moves that way.[/dim]"
        elif key == "continue":
            game.keep_playing()
        elif key == "restart":
            game.reset()
            status = "[yellow]New game![/yellow]"
        elif key == "quit":
            return max(best, game.score)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Launch the Rich CLI."""
    game = GamePlay(config, rng=random.Random(seed))
    best = _play(game)
    console.clear()
    console.print(
        Align.center(Text(f"\nBest score this session: {best}", style="bold yellow"))
    )
    console.print(Align.center(Text("Goodbye!\n", style="bold cyan")))
