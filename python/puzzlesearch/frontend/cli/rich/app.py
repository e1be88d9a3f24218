"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and engine as the vanilla CLI.  A spinner tracks the
number of explored states while the search runs.
"""

from __future__ import annotations

from datetime import datetime

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from puzzlesearch.engine.heuristic import manhattan
from puzzlesearch.engine.search import SearchEngine
from puzzlesearch.frontend.cli.input_handler import get_key, step_index
from puzzlesearch.models.board import SIZE, Board, Tile
from puzzlesearch.models.result import SearchResult, Strategy
from puzzlesearch.models.runlog import RunLog, RunRecord

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(seconds, 60)
    return f"{int(m):02d}:{s:05.2f}"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, tile in enumerate(row):
            if tile is Tile.EMPTY:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * SIZE + c):
                cells.append(f"[bold green]{tile}[/bold green]")
            else:
                cells.append(f"[bold white]{tile}[/bold white]")
        table.add_row(*cells)

    return table


# -- result screens -----------------------------------------------------------


def _draw_result(root: Board, result: SearchResult) -> None:
    stats = Table.grid(padding=(0, 2))
    stats.add_column(style="dim")
    stats.add_column(style="bold yellow", justify="right")
    stats.add_row("States explored", str(result.states_explored))
    if result.solved:
        stats.add_row("Path length", str(len(result.path) - 1))
    stats.add_row("Time", _format_time(result.elapsed))

    boards = Table.grid(padding=(0, 4))
    boards.add_column(justify="center")
    boards.add_column(justify="center")
    boards.add_row(Text("Root", style="dim"), Text("Solution", style="dim"))
    boards.add_row(
        _render_board(root),
        _render_board(result.solution) if result.solution else Text("—", style="dim"),
    )

    parts: list = [Align.center(boards), Text(""), Align.center(stats)]
    moves = result.moves()
    if moves:
        parts.append(Text(""))
        parts.append(
            Align.center(
                Text(" ".join(m.value for m in moves), style="cyan", overflow="fold")
            )
        )

    if result.solved:
        title = "[bold green]There is solution[/bold green]"
        border = "bold green"
    else:
        title = "[bold red]There is no solution[/bold red]"
        border = "red"

    panel = Panel(
        Group(*parts),
        title=title,
        subtitle=f"[dim]{result.strategy.value}[/dim]",
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_step(result: SearchResult, index: int) -> None:
    console.clear()
    board = result.path[index]
    last = len(result.path) - 1

    info = Text()
    info.append("  Manhattan: ", style="dim")
    info.append(str(manhattan(board)), style="bold yellow")
    if index:
        info.append("    Blank moved: ", style="dim")
        info.append(result.moves()[index - 1].value, style="bold cyan")

    controls = Text()
    controls.append("  ←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("AD", style="bold cyan")
    controls.append("  step   ", style="dim")
    controls.append("↑↓", style="bold cyan")
    controls.append("  first/last   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(_render_board(board)),
        title=f"[bold yellow]Solution path  {index}/{last}[/bold yellow]",
        border_style="yellow",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(info))
    console.print(Align.center(controls))


def _step_through(result: SearchResult) -> None:
    index = 0
    last = len(result.path) - 1
    while index is not None:
        _draw_step(result, index)
        index = step_index(get_key(), index, last)
    console.clear()


def show_history(runlog: RunLog) -> None:
    strategies = runlog.get_all_strategies()
    parts: list = []

    if not strategies:
        parts.append(Align.center(Text("  No runs recorded yet.", style="dim")))
    else:
        for strategy in strategies:
            table = Table(
                title=strategy,
                title_style="bold cyan",
                box=rich.box.ROUNDED,
                border_style="dim",
            )
            table.add_column("#", justify="right", style="dim", width=3)
            table.add_column("Board", no_wrap=True)
            table.add_column("Outcome")
            table.add_column("States", justify="right", style="yellow")
            table.add_column("Moves", justify="right", style="yellow")
            table.add_column("Time", justify="right", style="yellow")
            table.add_column("Date", style="dim")

            for i, e in enumerate(runlog.get_runs(strategy), 1):
                table.add_row(
                    str(i),
                    e.board,
                    e.outcome,
                    str(e.states),
                    str(e.path_length),
                    f"{e.time:.3f}s",
                    e.date,
                )
            parts.append(Align.center(table))

    panel = Panel(
        Group(*parts),
        title="[bold]RECORDED  RUNS[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- public entry point -------------------------------------------------------


def run(
    root: Board,
    strategy: Strategy,
    *,
    reject_unsolvable: bool = False,
    runlog: RunLog | None = None,
    step: bool = False,
) -> SearchResult:
    """Search from *root* under a live spinner, then draw the outcome."""
    with console.status(
        f"[bold cyan]{strategy.value}[/bold cyan] search…", spinner="dots"
    ) as status:

        def _progress(explored: int) -> None:
            status.update(
                f"[bold cyan]{strategy.value}[/bold cyan] search… "
                f"[yellow]{explored}[/yellow] states explored"
            )

        engine = SearchEngine(
            strategy,
            reject_unsolvable=reject_unsolvable,
            progress=_progress,
            progress_every=1000,
        )
        result = engine.run(root)

    _draw_result(root, result)

    if runlog is not None:
        date = datetime.now().strftime("%Y-%m-%d %H:%M")
        runlog.add_run(RunRecord.from_result(str(root), result, date))
        console.print(Align.center(Text("Run recorded.", style="dim")))

    if step and result.solved:
        _step_through(result)

    return result
