#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich            # Rich terminal, 4×4
    python main.py -f pygame -s 3     # Pygame GUI, 3×3
    python main.py -f pyqt --seed 7   # PyQt GUI, reproducible scramble
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

from slidecore.config import (  # noqa: E402
    DEFAULT_ANIMATION_DURATION_MS,
    DEFAULT_SCRAMBLE_MOVES,
    DEFAULT_SIZE,
    DEFAULT_SWIPE_THRESHOLD,
    PuzzleConfig,
)

logger = logging.getLogger("slidecore")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_RUNNERS = {
    Frontend.rich: "slideui.cli.rich.app",
    Frontend.pygame: "slideui.gui.pygame.app",
    Frontend.pyqt: "slideui.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _launch(frontend: Frontend, config: PuzzleConfig) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config)


def _menu_loop(config: PuzzleConfig) -> None:
    choices = {"1": Frontend.rich, "2": Frontend.pygame, "3": Frontend.pyqt}
    while True:
        print()
        print("  ====================================")
        print("       S L I D I N G   P U Z Z L E    ")
        print("  ====================================")
        print()
        print(f"  Grid: {config.size}×{config.size}")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], config)
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
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    duration: float = typer.Option(
        DEFAULT_ANIMATION_DURATION_MS, "--duration",
        min=0,
        help="Tile slide duration in milliseconds.",
    ),
    swipe_threshold: float = typer.Option(
        DEFAULT_SWIPE_THRESHOLD, "--swipe-threshold",
        min=0,
        help="Minimum swipe distance in pixels.",
    ),
    scramble_moves: int = typer.Option(
        DEFAULT_SCRAMBLE_MOVES, "--scramble-moves",
        min=0,
        help="Random moves applied by a scramble.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible scrambles.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(log_level)
    config = PuzzleConfig(
        size=size,
        animation_duration_ms=duration,
        swipe_threshold=swipe_threshold,
        scramble_moves=scramble_moves,
        seed=seed,
    )
    logger.debug("Configuration: %s", config)

    if frontend is None:
        _menu_loop(config)
        return

    _launch(frontend, config)


if __name__ == "__main__":
    app()
