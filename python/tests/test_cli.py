"""Command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from puzzlesearch.frontend.cli.input_handler import resolve, step_index
from puzzlesearch.main import app

runner = CliRunner()


@pytest.mark.parametrize("frontend", ["vanilla", "rich"])
def test_sample_board_is_solved(frontend: str) -> None:
    result = runner.invoke(app, ["-f", frontend])
    assert result.exit_code == 0, result.output
    assert "There is solution" in result.output


@pytest.mark.parametrize("strategy", ["blind", "heuristic", "astar"])
def test_explicit_board_and_strategy(strategy: str) -> None:
    result = runner.invoke(app, ["1,8,2,0,4,3,7,6,5", "-s", strategy, "-f", "vanilla"])
    assert result.exit_code == 0, result.output
    assert "States explored" in result.output


def test_unsolvable_board_rejected_by_parity() -> None:
    result = runner.invoke(
        app, ["8,1,2,0,4,3,7,6,5", "--reject-unsolvable", "-f", "vanilla"]
    )
    assert result.exit_code == 1
    assert "There is no solution" in result.output


def test_invalid_board_is_a_usage_error() -> None:
    result = runner.invoke(app, ["1,1,2,3,4,5,6,7,8", "-f", "vanilla"])
    assert result.exit_code == 2


def test_generators_are_mutually_exclusive() -> None:
    result = runner.invoke(app, ["--scramble", "5", "--random", "-f", "vanilla"])
    assert result.exit_code == 2


def test_scramble_with_seed() -> None:
    result = runner.invoke(app, ["--scramble", "12", "--seed", "4", "-f", "vanilla"])
    assert result.exit_code == 0, result.output


@pytest.mark.parametrize("frontend", ["vanilla", "rich"])
def test_record_then_history(tmp_path: Path, frontend: str) -> None:
    recorded = runner.invoke(
        app, ["-f", frontend, "--record", "--data-dir", str(tmp_path)]
    )
    assert recorded.exit_code == 0, recorded.output
    assert (tmp_path / "runs.json").exists()

    history = runner.invoke(app, ["-f", frontend, "--history", "--data-dir", str(tmp_path)])
    assert history.exit_code == 0, history.output
    assert "312 645 78_" in history.output


def test_empty_history(tmp_path: Path) -> None:
    result = runner.invoke(app, ["-f", "vanilla", "--history", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert "No runs recorded yet." in result.output


# -- path viewer keys ---------------------------------------------------------


def test_viewer_key_mapping() -> None:
    assert resolve("d") == "next"
    assert resolve("a") == "prev"
    assert resolve("q") == "quit"
    assert resolve("z") == ""


@pytest.mark.parametrize(
    ("action", "index", "expected"),
    [
        ("next", 2, 3),
        ("next", 5, 5),
        ("prev", 0, 0),
        ("prev", 3, 2),
        ("first", 4, 0),
        ("last", 1, 5),
        ("", 2, 2),
        ("quit", 2, None),
    ],
)
def test_step_index(action: str, index: int, expected: int | None) -> None:
    assert step_index(action, index, 5) == expected
