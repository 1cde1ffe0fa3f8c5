"""Rich terminal frontend: the board inside a titled panel.

Uses the ``rich`` library for the alternate screen and the bordered panel,
sharing the input handler and backend with the vanilla CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from backend.engine.gameplay import Frame, GamePlay, play
from backend.engine.gamerender import TITLE
from backend.models.outcome import Outcome
from frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)

console = Console()


# -- rendering ----------------------------------------------------------------


def _render_panel(frame: Frame) -> Panel:
    """Return the bordered panel for one frame."""
    return Panel(
        Text(frame.text, no_wrap=True),
        title=TITLE,
        title_align="left",
        border_style="bright_blue",
        expand=False,
    )


def _draw(frame: Frame) -> None:
    console.clear()
    console.print(_render_panel(frame))


# -- public entry point -------------------------------------------------------


def run() -> Outcome:
    """Play one game on the alternate screen and return its outcome."""
    logger.debug("Starting rich frontend")
    with console.screen(hide_cursor=True):
        return play(GamePlay(), _draw, get_key)
