"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Runs one search, reports progress while it explores, and prints the
result and solution path.
"""

from __future__ import annotations

import sys
from datetime import datetime

from puzzlesearch.engine.heuristic import manhattan
from puzzlesearch.engine.search import SearchEngine
from puzzlesearch.frontend.cli.input_handler import get_key, step_index
from puzzlesearch.models.board import SIZE, Board, Tile
from puzzlesearch.models.result import SearchResult, Strategy
from puzzlesearch.models.runlog import RunLog, RunRecord


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(seconds, 60)
    return f"{int(m)}:{s:05.2f}" if m >= 1 else f"{s:.2f}s"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + ("---+" * SIZE)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, tile in enumerate(row):
            if tile is Tile.EMPTY:
                cells.append(f"{_DIM} · {_R}")
            elif board.is_tile_correct(r * SIZE + c):
                cells.append(f"{_G} {tile} {_R}")
            else:
                cells.append(f" {tile} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- progress -----------------------------------------------------------------


def _progress(explored: int) -> None:
    sys.stdout.write(f"\r\033[K  {_DIM}States explored:{_R} {_Y}{explored}{_R}")
    sys.stdout.flush()


# -- result screens -----------------------------------------------------------


def _show_result(result: SearchResult) -> None:
    sys.stdout.write("\r\033[K")
    if result.solved:
        print(f"  {_G}There is solution{_R}")
    else:
        print(f"  {_RED}There is no solution{_R}")
    print()
    print(f"  States explored: {_Y}{result.states_explored}{_R}")
    if result.solved:
        moves = result.moves()
        print(f"  Path length:     {_Y}{len(moves)}{_R}")
        print(f"  Time:            {_Y}{_format_time(result.elapsed)}{_R}")
        print()
        print(_render_board(result.solution))
        if moves:
            print()
            print(f"  {_C}Blank moves:{_R} " + " ".join(m.value for m in moves))
    else:
        print(f"  Time:            {_Y}{_format_time(result.elapsed)}{_R}")


def _show_step(result: SearchResult, index: int) -> None:
    _clear()
    board = result.path[index]
    last = len(result.path) - 1
    print(f"  {_C}=== Solution path  step {index}/{last} ==={_R}")
    print()
    print(_render_board(board))
    print()
    print(f"  Manhattan distance: {_Y}{manhattan(board)}{_R}")
    if index:
        print(f"  Blank moved: {_BOLD}{result.moves()[index - 1].value}{_R}")
    print()
    print(
        f"  {_C}←→{_R}/{_C}AD{_R}: step  |  "
        f"{_C}↑↓{_R}: first/last  |  "
        f"{_C}Q{_R}: quit"
    )


def _step_through(result: SearchResult) -> None:
    index = 0
    last = len(result.path) - 1
    while index is not None:
        _show_step(result, index)
        index = step_index(get_key(), index, last)
    _clear()


def show_history(runlog: RunLog) -> None:
    print()
    print(f"  {_BOLD}=== RECORDED RUNS ==={_R}")
    strategies = runlog.get_all_strategies()
    if not strategies:
        print(f"\n  {_DIM}No runs recorded yet.{_R}\n")
        return
    for strategy in strategies:
        print(f"\n  {_C}--- {strategy} ---{_R}")
        for i, e in enumerate(runlog.get_runs(strategy), 1):
            print(
                f"  {i:>2}. {e.board}  {_Y}{e.states:>7}{_R} states  "
                f"{_Y}{e.path_length:>5}{_R} moves  "
                f"{_Y}{e.time:>8.3f}s{_R}  "
                f"{_DIM}({e.outcome}, {e.date}){_R}"
            )
    print()


# -- public entry point -------------------------------------------------------


def run(
    root: Board,
    strategy: Strategy,
    *,
    reject_unsolvable: bool = False,
    runlog: RunLog | None = None,
    step: bool = False,
) -> SearchResult:
    """Search from *root*, print the outcome, and optionally record it."""
    print(f"  {_C}=== {strategy.value} search ==={_R}")
    print()
    print(_render_board(root))
    print()

    engine = SearchEngine(
        strategy,
        reject_unsolvable=reject_unsolvable,
        progress=_progress,
        progress_every=1000,
    )
    result = engine.run(root)
    _show_result(result)

    if runlog is not None:
        date = datetime.now().strftime("%Y-%m-%d %H:%M")
        runlog.add_run(RunRecord.from_result(str(root), result, date))
        print(f"\n  {_DIM}Run recorded.{_R}")

    if step and result.solved:
        _step_through(result)

    return result
