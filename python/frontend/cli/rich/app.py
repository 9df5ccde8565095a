"""Rich terminal frontend for the timed sliding puzzle.

Draws the board with ``rich`` and feeds the session from a polling loop:
each pass measures wall-clock time since the previous one and hands it,
together with the cell at most one keypress pulls into the gap, to
``Session.update``.  The consumed outcome picks the closing panel.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import SessionConfig
from backend.engine.gameplay import Session
from backend.engine.gamerules import CompletionChecker, MoveValidator
from backend.engine.gamestate import SessionState
from backend.models.grid import EMPTY, Direction, Grid
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_POLL_SECONDS = 0.1

# Keys name the way the *tile* slides; the gap travels the opposite way.
_KEY_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.DOWN,
    "down": Direction.UP,
    "left": Direction.RIGHT,
    "right": Direction.LEFT,
}


# -- board rendering ----------------------------------------------------------


def _render_grid(grid: Grid) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.size * grid.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.rows()):
        cells: list[str] = []
        for c, tile in enumerate(row):
            label = tile + 1
            if tile == EMPTY:
                cells.append("[dim]·[/dim]")
            elif CompletionChecker.is_tile_correct(grid, r * grid.size + c):
                cells.append(f"[bold green]{label:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{label:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def key_to_cell(session: Session, key: str | None) -> int | None:
    """Return the cell a movement *key* pulls into the gap, or ``None``."""
    direction = _KEY_DIRECTIONS.get(key or "")
    if direction is None:
        return None
    return MoveValidator.target_of(session.grid, direction)


def _status_line(session: Session) -> Text:
    stats = Text()
    stats.append("Time: ", style="dim")
    style = "bold red" if session.remaining_time < 3 else "bold yellow"
    stats.append(f"{session.remaining_time:.1f}", style=style)
    stats.append("    Moves: ", style="dim")
    stats.append(str(session.moves), style="bold yellow")
    stats.append("    Out of place: ", style="dim")
    stats.append(str(len(CompletionChecker.misplaced(session.grid))), style="bold yellow")
    return stats


def _header(size: int, outcome: SessionState | None) -> tuple[str, str, Text]:
    """Return (title, border style, footer) for the panel."""
    if outcome is SessionState.WON:
        return (
            f"[bold green]Solved!  {size}×{size}[/bold green]",
            "bold green",
            Text("R  play again    Q  quit", style="dim"),
        )
    if outcome is SessionState.LOST:
        return (
            f"[bold red]Time's up!  {size}×{size}[/bold red]",
            "bold red",
            Text("R  play again    Q  quit", style="dim"),
        )
    return (
        f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        "bright_blue",
        Text("↑↓←→ / WASD  move    R  restart    Q  quit", style="dim"),
    )


def _draw(session: Session, outcome: SessionState | None = None) -> None:
    console.clear()
    title, border, footer = _header(session.size, outcome)

    body = Group(
        Align.center(_render_grid(session.grid)),
        Text(""),
        Align.center(_status_line(session)),
    )
    console.print()
    console.print(Align.center(Panel(body, title=title, border_style=border, padding=(1, 2))))
    console.print(Align.center(footer))


# -- game loop ----------------------------------------------------------------


def _play(config: SessionConfig) -> bool:
    """Play one session.  Returns True if the player asked for another."""
    session = Session(config)
    last = time.monotonic()
    shown_time = ""
    outcome: SessionState | None = None

    while outcome is None:
        key = get_key_timeout(_POLL_SECONDS)
        if key == "quit":
            return False
        if key == "restart":
            return True

        now = time.monotonic()
        session.update(now - last, key_to_cell(session, key))
        last = now
        outcome = session.consume_outcome()

        # Redraw on input, or when the one-decimal clock changes.
        current = f"{session.remaining_time:.1f}"
        if outcome is None and (key is not None or current != shown_time):
            _draw(session)
            shown_time = current

    _draw(session, outcome)
    while True:
        key = get_key()
        if key in ("restart", "enter"):
            return True
        if key == "quit":
            return False


# -- public entry point -------------------------------------------------------


def run(config: SessionConfig) -> None:
    """Launch the Rich terminal frontend."""
    while _play(config):
        pass
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
