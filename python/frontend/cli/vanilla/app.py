"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from backend.engine.gameplay import Frame, GamePlay, play
from backend.engine.gamerender import TITLE
from backend.models.outcome import Outcome
from frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)


# -- ANSI helpers -------------------------------------------------------------

_C = "\033[36;1m"    # bold cyan
_R = "\033[0m"       # reset
_ALT_ON = "\033[?1049h"
_ALT_OFF = "\033[?1049l"
_CURSOR_OFF = "\033[?25l"
_CURSOR_ON = "\033[?25h"


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


@contextmanager
def _screen() -> Iterator[None]:
    """Switch to the alternate screen, restoring the terminal on exit."""
    sys.stdout.write(_ALT_ON + _CURSOR_OFF)
    sys.stdout.flush()
    try:
        yield
    finally:
        sys.stdout.write(_CURSOR_ON + _ALT_OFF)
        sys.stdout.flush()


# -- rendering ----------------------------------------------------------------


def _render_panel(frame: Frame) -> str:
    """Return the frame text inside a box with the title in the top edge."""
    lines = frame.text.split("\n")
    width = max(len(line) for line in lines) + 1
    top = f"┌{TITLE}" + "─" * (width - len(TITLE)) + "┐"
    body = [f"│{line:<{width}}│" for line in lines]
    bottom = "└" + "─" * width + "┘"
    return "\n".join([top, *body, bottom])


def _draw(frame: Frame) -> None:
    _clear()
    print(_C + _render_panel(frame) + _R)


# -- public entry point -------------------------------------------------------


def run() -> Outcome:
    """Play one game on the alternate screen and return its outcome."""
    logger.debug("Starting vanilla frontend")
    with _screen():
        return play(GamePlay(), _draw, get_key)
