"""Board generation and solvability."""

from __future__ import annotations

import random

import pytest

from puzzlesearch.engine.boardgen import BoardGenerator, is_solvable, random_board, scramble
from puzzlesearch.models.board import GOAL, Board, Tile


def test_random_board_is_a_permutation() -> None:
    board = random_board(random.Random(0))
    assert sorted(board.tiles) == sorted(Tile)


def test_random_board_is_reproducible_with_a_seed() -> None:
    assert random_board(random.Random(99)) == random_board(random.Random(99))


def test_random_boards_cover_both_parity_classes() -> None:
    rng = random.Random(5)
    classes = {is_solvable(random_board(rng)) for _ in range(64)}
    assert classes == {True, False}


@pytest.mark.parametrize("steps", [1, 5, 20, 100], ids=lambda s: f"steps_{s}")
def test_scramble_stays_solvable(steps: int) -> None:
    rng = random.Random(steps)
    assert is_solvable(scramble(steps, rng))


def test_scramble_zero_is_goal() -> None:
    assert scramble(0, random.Random(1)) == GOAL
    assert BoardGenerator.solved() == GOAL


def test_scramble_single_step_is_a_neighbor_of_goal() -> None:
    board = scramble(1, random.Random(3))
    assert board != GOAL
    assert board.blank_index in (5, 7)


def test_scramble_rejects_negative_steps() -> None:
    with pytest.raises(ValueError):
        scramble(-1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1,2,3,4,5,6,7,8,0", True),
        ("3,1,2,6,4,5,7,8,0", True),
        ("1,8,2,0,4,3,7,6,5", True),
        ("0,8,7,4,3,6,2,1,5", True),
        ("8,1,2,0,4,3,7,6,5", False),
        ("2,1,3,4,5,6,7,8,0", False),
    ],
    ids=["goal", "sample", "doc_2", "doc_4", "unsolvable", "swapped_pair"],
)
def test_is_solvable(text: str, expected: bool) -> None:
    assert is_solvable(Board.parse(text)) is expected
