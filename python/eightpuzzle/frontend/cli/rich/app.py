"""Rich terminal output: board grids and solution playback."""

from __future__ import annotations

import time
from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.backend.models.board import BLANK, Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(render_board(board)),
        title=title,
        border_style=style,
        padding=(1, 2),
    )


# -- screens ------------------------------------------------------------------


def show_board(board: Board, title: str = "Board") -> None:
    console.print(Align.center(_board_panel(board, f"[bold cyan]{title}[/bold cyan]")))
    console.print(Align.center(Text(f"tiles: {list(board)}", style="dim")))


def show_solvability(board: Board, solvable: bool) -> None:
    show_board(board, "Check")
    if solvable:
        console.print(Align.center(Text.from_markup("[green]Solvable.[/green]")))
    else:
        console.print(Align.center(Text.from_markup("[red]Board is unsolvable.[/red]")))


def show_error(message: str) -> None:
    console.print(Text.from_markup(f"[red]{escape(message)}[/red]"))


def play_path(
    path: Sequence[Board],
    directions: Sequence[Direction],
    delay: float = 0.0,
) -> None:
    """Print every board of *path*.

    With a positive *delay* the screen is redrawn in place, one board at a
    time, otherwise all steps are listed one after another.
    """
    total = len(path) - 1
    for i, board in enumerate(path):
        progress = Text()
        if i == 0:
            progress.append("  Start", style="bold cyan")
        else:
            progress.append(f"  Move {i}/{total} ", style="bold cyan")
            progress.append(f"(blank {directions[i - 1].value})", style="dim")

        if delay > 0:
            console.clear()
        console.print(
            Align.center(
                Group(
                    _board_panel(board, "[bold cyan]Solve[/bold cyan]", "cyan"),
                    Align.center(progress),
                )
            )
        )
        if delay > 0 and i < total:
            time.sleep(delay)

    noun = "move" if total == 1 else "moves"
    console.print(
        Align.center(Text.from_markup(f"[bold green]Solved in {total} {noun}![/bold green]"))
    )
