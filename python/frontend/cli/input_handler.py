"""Single-keypress reader shared by the terminal frontends.

Arrow keys and WASD map to moves; a handful of letters map to game
commands.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.board import Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    # Windows arrow keys arrive as a prefix byte followed by a scan code.
    if ch in ("\x00", "\xe0"):
        return _WIN_ARROWS.get(msvcrt.getwch(), "")
    return ch


_WIN_ARROWS: dict[str, str] = {"H": "\x10", "P": "\x11", "M": "\x12", "K": "\x13"}

_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping -----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "n": "restart",
    "c": "continue",
    "\r": "enter",
    "\n": "enter",
    # synthetic codes produced by _getch_windows
    "\x10": "up",
    "\x11": "down",
    "\x12": "right",
    "\x13": "left",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

MOVES: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (case-insensitive)."""
    return _KEY_MAP.get(ch.lower(), ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r / n (new game)
        "continue"                     — c (keep playing after a win)
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve(ch)
