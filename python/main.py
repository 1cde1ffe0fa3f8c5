#!/usr/bin/env python3
"""Tic Tac Toe for two players at one terminal.

Usage::

    python main.py                # Rich terminal
    python main.py -f vanilla     # plain ANSI terminal
    python main.py --debug        # also write a debug log under logs/
"""

import importlib
import logging
import sys
from datetime import datetime
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
LOGS_DIR = PROJECT_ROOT / "logs"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger("tictactoe")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def setup_logging(debug: bool = False, logs_dir: Path = LOGS_DIR) -> Optional[Path]:
    """Send errors to stderr and, with *debug*, everything to a log file.

    The game owns the terminal, so the console handler stays at ERROR.
    Returns the log file path, if one was created.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if not debug:
        return None

    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = logs_dir / f"tictactoe_{timestamp}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)
    return log_file


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Write a debug log under logs/.",
    ),
) -> None:
    """Tic Tac Toe."""
    log_file = setup_logging(debug=debug)
    if log_file is not None:
        logger.info("Log file: %s", log_file)

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        outcome = mod.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        raise typer.Exit(code=130)
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        raise

    if outcome.winner is not None:
        typer.echo(f"{outcome.winner} won!")
    else:
        typer.echo("Tie!")


if __name__ == "__main__":
    app()
