"""Manhattan distance heuristic and successor ordering."""

from __future__ import annotations

import random

import pytest

from puzzlesearch.engine.boardgen import random_board
from puzzlesearch.engine.heuristic import DISTANCE, heuristic_value, manhattan, order_by_heuristic
from puzzlesearch.engine.movegen import generate_neighbors, unfold
from puzzlesearch.models.board import GOAL, Board, Tile


def test_goal_has_zero_distance() -> None:
    assert manhattan(GOAL) == 0


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3,1,2,6,4,5,7,8,0", 8),
        ("8,1,2,0,4,3,7,6,5", 11),
        ("1,2,3,4,5,6,7,0,8", 1),
        ("0,8,7,6,5,4,3,2,1", 20),
    ],
    ids=["sample", "unsolvable", "one_move", "reversed"],
)
def test_known_values(text: str, expected: int) -> None:
    assert manhattan(Board.parse(text)) == expected


def test_distance_table_rows() -> None:
    assert DISTANCE[Tile.ONE] == (0, 1, 2, 1, 2, 3, 2, 3, 4)
    assert DISTANCE[Tile.FIVE] == (2, 1, 2, 1, 0, 1, 2, 1, 2)
    assert DISTANCE[Tile.EIGHT] == (3, 2, 3, 2, 1, 2, 1, 0, 1)
    assert DISTANCE[Tile.EMPTY] == (0,) * 9


def test_heuristic_value_is_manhattan() -> None:
    board = Board.parse("5,2,8,4,1,7,0,3,6")
    assert heuristic_value(board) == manhattan(board)


def test_one_move_changes_distance_by_exactly_one() -> None:
    rng = random.Random(1234)
    for _ in range(200):
        board = random_board(rng)
        h = manhattan(board)
        assert h >= 0
        for child in generate_neighbors(board):
            assert abs(manhattan(child) - h) == 1


# -- ordering -----------------------------------------------------------------


def test_order_is_ascending() -> None:
    board = Board.parse("1,8,2,0,4,3,7,6,5")
    ordered = order_by_heuristic(unfold(board))
    values = [manhattan(b) for b in ordered]
    assert values == sorted(values)
    assert ordered[0] == board.swap(3, 4)


def test_ties_keep_generation_order() -> None:
    children = unfold(Board.parse("3,1,2,6,4,5,7,8,0"))
    assert manhattan(children[0]) == manhattan(children[1])
    assert order_by_heuristic(children) == children
