"""8-puzzle search.

Usage::

    puzzlesearch                              # heuristic DFS on the sample board
    puzzlesearch "8,1,2,0,4,3,7,6,5" -s blind # blind DFS on a given board
    puzzlesearch --scramble 30 --seed 7 -f vanilla
    puzzlesearch --random --reject-unsolvable
    puzzlesearch --history                    # view recorded runs
"""

import importlib
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from puzzlesearch.engine.boardgen import BoardGenerator
from puzzlesearch.models.board import Board, InvalidBoardError
from puzzlesearch.models.result import Strategy
from puzzlesearch.models.runlog import RunLog

SAMPLE_BOARD = "3,1,2,6,4,5,7,8,0"
RUNS_FILE = "runs.json"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "puzzlesearch.frontend.cli.vanilla.app",
    Frontend.rich: "puzzlesearch.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_board(value: Optional[str]) -> Optional[Board]:
    if value is None:
        return None
    try:
        return Board.parse(value)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint="BOARD") from exc


def _pick_root(
    board: Optional[Board], scramble: Optional[int], shuffle: bool, seed: Optional[int]
) -> Board:
    if sum((board is not None, scramble is not None, shuffle)) > 1:
        raise typer.BadParameter("Give at most one of BOARD, --scramble, --random.")
    rng = random.Random(seed)
    if board is not None:
        return board
    if scramble is not None:
        return BoardGenerator.scramble(scramble, rng)
    if shuffle:
        return BoardGenerator.random_board(rng)
    return Board.parse(SAMPLE_BOARD)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board: Optional[str] = typer.Argument(
        None,
        help='Root board, row-major, 0 or _ for the blank (e.g. "8,1,2,0,4,3,7,6,5").',
        show_default=False,
    ),
    strategy: Strategy = typer.Option(
        Strategy.HEURISTIC, "-s", "--strategy",
        help="blind DFS, heuristic-ordered DFS, or true A*.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output style.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Start from GOAL walked this many random moves away (always solvable).",
    ),
    shuffle: bool = typer.Option(
        False, "--random",
        help="Start from a uniformly shuffled board (may be unsolvable).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="PUZZLESEARCH_SEED",
        help="Seed for --scramble / --random.",
    ),
    reject_unsolvable: bool = typer.Option(
        False, "--reject-unsolvable",
        help="Check inversion parity first instead of exhausting the state space.",
    ),
    step: bool = typer.Option(
        False, "--step",
        help="Step through the solution path afterwards.",
    ),
    record: bool = typer.Option(
        False, "--record",
        help="Append this run to the run history.",
    ),
    history: bool = typer.Option(
        False, "--history",
        help="Show recorded runs and exit.",
    ),
    data_dir: Path = typer.Option(
        Path("data"), "--data-dir",
        envvar="PUZZLESEARCH_DATA_DIR",
        help="Directory holding the run history.",
    ),
) -> None:
    """Search the 8-puzzle state space from a root board."""
    mod = importlib.import_module(_RUNNERS[frontend])
    runlog = RunLog(data_dir / RUNS_FILE) if (record or history) else None

    if history:
        mod.show_history(runlog)
        return

    root = _pick_root(_parse_board(board), scramble, shuffle, seed)
    result = mod.run(
        root,
        strategy,
        reject_unsolvable=reject_unsolvable,
        runlog=runlog if record else None,
        step=step,
    )
    if not result.solved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
