#!/usr/bin/env python3
"""Timed Sliding Puzzle.

Usage::

    python main.py                    # Rich terminal, 3×3, 10 seconds
    python main.py -s 4 -t 60         # 4×4 with a minute on the clock
    python main.py -f pygame          # Pygame GUI
    python main.py --seed 7 -v        # reproducible shuffle, debug logging
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

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_BOARD_SIZE, DEFAULT_DURATION, SessionConfig  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_BOARD_SIZE, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    duration: float = typer.Option(
        DEFAULT_DURATION, "-t", "--time",
        min=0.1,
        help="Seconds on the clock.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug output.",
    ),
) -> None:
    """Timed Sliding Puzzle."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    config = SessionConfig(board_size=size, duration=duration, seed=seed)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config)


if __name__ == "__main__":
    app()
