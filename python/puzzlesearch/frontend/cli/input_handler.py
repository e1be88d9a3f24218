"""Cross-platform single-keypress reader for the path viewers.

Handles arrow keys, WASD-style stepping, and quit keys without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


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

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "d": "next",
    "D": "next",
    "n": "next",
    "N": "next",
    " ": "next",
    "\r": "next",
    "\n": "next",
    "a": "prev",
    "A": "prev",
    "p": "prev",
    "P": "prev",
    "g": "first",
    "G": "last",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROW_MAP: dict[str, str] = {
    "A": "first",  # up
    "B": "last",  # down
    "C": "next",  # right
    "D": "prev",  # left
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "next", "prev"   — step forward / back (→ ← / D A / N P / Space)
        "first", "last"  — jump to either end (↑ ↓ / g G)
        "quit"           — q / Ctrl-C / Escape
        ""               — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve(ch)


def step_index(action: str, index: int, last: int) -> int | None:
    """Apply a viewer *action* to *index*; ``None`` means leave the viewer."""
    if action == "quit":
        return None
    if action == "next":
        return min(index + 1, last)
    if action == "prev":
        return max(index - 1, 0)
    if action == "first":
        return 0
    if action == "last":
        return last
    return index
