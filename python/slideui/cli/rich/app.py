"""Rich terminal frontend.

Renders each ``Snapshot`` as a Rich table inside a ``Live`` display and
polls the keyboard with a short timeout so the slide animation and the
clock keep advancing between keypresses.
"""

from __future__ import annotations

import logging
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidecore.config import PuzzleConfig
from slidecore.engine.gameplay import PuzzleGame, Snapshot
from slidecore.engine.gamesolver import Solver
from slidecore.engine.gesture import GestureTranslator
from slideui.cli.input_handler import poll_key

logger = logging.getLogger(__name__)

console = Console()

FRAME_SECONDS = 1 / 60
HINT_MAX_STATES = 50_000


# -- helpers ------------------------------------------------------------------


def _format_time(ms: float) -> str:
    m, s = divmod(int(ms // 1000), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def _render_board(snap: Snapshot) -> Table:
    """Return a Rich Table for the snapshot.

    A tile in transit is drawn in whichever cell it is closer to.
    """
    width = len(str(snap.size * snap.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(snap.size):
        table.add_column(width=width + 1, justify="center")

    moving_cell = None
    if snap.animation is not None:
        anim = snap.animation
        moving_cell = anim.source if anim.progress < 0.5 else anim.dest

    for r, row in enumerate(snap.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if snap.animation is not None and (r, c) == moving_cell:
                cells.append(
                    f"[bold magenta]{snap.animation.tile_value:>{width}}[/bold magenta]"
                )
            elif val == 0 or snap.is_suppressed(r, c):
                cells.append("[dim]·[/dim]")
            elif val == r * snap.size + c + 1:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render(snap: Snapshot, status: str) -> Panel:
    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(snap.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(snap.elapsed_ms), style="bold yellow")

    controls = Text()
    controls.append("↑↓←→ W A D", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("S", style="bold yellow")
    controls.append("  scramble   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts = [Align.center(_render_board(snap)), Text(""), Align.center(stats)]
    if status:
        parts.append(Align.center(Text.from_markup(status)))
    parts.append(Align.center(controls))

    solved = snap.solved and snap.moves > 0
    return Panel(
        Group(*parts),
        title=(
            f"[bold green]★ Solved  {snap.size}×{snap.size} ★[/bold green]"
            if solved
            else f"[bold cyan]Sliding Puzzle  {snap.size}×{snap.size}[/bold cyan]"
        ),
        border_style="bold green" if solved else "bright_blue",
        padding=(1, 2),
    )


# -- actions ------------------------------------------------------------------


def _apply_hint(game: PuzzleGame) -> str:
    if game.is_animating:
        return "[dim]Wait for the tile to settle.[/dim]"
    if game.grid.is_solved():
        return "[green]Already solved![/green]"
    hint = Solver.hint(game.grid, HINT_MAX_STATES)
    if hint is None:
        return "[yellow]No hint within the search budget.[/yellow]"
    if not game.handle_direction(hint):
        return "[yellow]Hint could not be applied.[/yellow]"
    return f"[cyan]Hint:[/cyan] [bold]{hint.value}[/bold]"


# -- game loop ----------------------------------------------------------------


def _play(game: PuzzleGame) -> None:
    status = "[dim]Press S to scramble.[/dim]"
    last = time.monotonic()
    snap = game.snapshot()

    with Live(_render(snap, status), console=console, auto_refresh=False) as live:
        while True:
            key = poll_key(FRAME_SECONDS)

            if key == "quit":
                return
            if key == "scramble":
                status = "[yellow]Scrambled![/yellow]" if game.handle_scramble() else status
            elif key == "hint":
                status = _apply_hint(game)
            elif key:
                direction = GestureTranslator.from_key(key)
                if direction is not None and game.handle_direction(direction):
                    status = ""

            now = time.monotonic()
            snap = game.tick((now - last) * 1000)
            last = now

            if snap.just_solved:
                status = (
                    f"[bold green]Solved in {snap.moves} moves, "
                    f"{_format_time(snap.elapsed_ms)}![/bold green]"
                )
            live.update(_render(snap, status), refresh=True)


# -- public entry point -------------------------------------------------------


def run(config: PuzzleConfig) -> None:
    """Launch the Rich terminal frontend."""
    logger.debug("Starting rich frontend with %s", config)
    _play(PuzzleGame(config))
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
