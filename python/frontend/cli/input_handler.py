"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, WASD, Space and Enter without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

from backend.models.events import InputEvent

# Seconds to wait for the rest of an escape sequence before treating ESC
# as a key of its own.
ESCAPE_TIMEOUT = 0.1


# -- low-level key readers -----------------------------------------------------


def _read_sequence(read: Callable[[], str], ready: Callable[[float], bool]) -> str:
    """Read one key, keeping an arrow's ``ESC [ X`` bytes together.

    *ready* reports whether another byte arrives within the timeout, so a
    bare Escape returns at once instead of consuming the next key.
    """
    ch = read()
    if ch != "\x1b" or not ready(ESCAPE_TIMEOUT):
        return ch
    ch2 = read()
    if ch2 != "[" or not ready(ESCAPE_TIMEOUT):
        return ch + ch2
    return ch + ch2 + read()


def _getch_unix() -> str:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        # Use os.read (unbuffered) so select() sees the remaining bytes of
        # multi-byte sequences.
        return _read_sequence(
            lambda: os.read(fd, 1).decode("utf-8", errors="ignore"),
            lambda timeout: bool(select.select([fd], [], [], timeout)[0]),
        )
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    # Arrow keys arrive as a prefix followed by a scan code.
    if ch in ("\x00", "\xe0"):
        return "\x00" + msvcrt.getwch()
    return ch


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, InputEvent] = {
    "w": InputEvent.UP,
    "W": InputEvent.UP,
    "s": InputEvent.DOWN,
    "S": InputEvent.DOWN,
    "a": InputEvent.LEFT,
    "A": InputEvent.LEFT,
    "d": InputEvent.RIGHT,
    "D": InputEvent.RIGHT,
    " ": InputEvent.CONFIRM,
    "\r": InputEvent.CONFIRM,
    "\n": InputEvent.CONFIRM,
    # Unix escape sequences
    "\x1b[A": InputEvent.UP,
    "\x1b[B": InputEvent.DOWN,
    "\x1b[C": InputEvent.RIGHT,
    "\x1b[D": InputEvent.LEFT,
    # Windows scan codes
    "\x00H": InputEvent.UP,
    "\x00P": InputEvent.DOWN,
    "\x00M": InputEvent.RIGHT,
    "\x00K": InputEvent.LEFT,
}


def _resolve(key: str) -> InputEvent:
    """Map a raw key to its input event."""
    if key == "\x03":  # Ctrl-C is swallowed by raw mode
        raise KeyboardInterrupt
    return _KEY_MAP.get(key, InputEvent.OTHER)


# -- public API ----------------------------------------------------------------


def get_key() -> InputEvent:
    """Read a single keypress and return the matching ``InputEvent``.

    Blocks until a key is pressed.

    Possible return values:
        UP, DOWN, LEFT, RIGHT  — arrow keys / WASD
        CONFIRM                — Space / Enter
        OTHER                  — anything else, including bare Escape

    Ctrl-C raises ``KeyboardInterrupt``.
    """
    return _resolve(_getch())
