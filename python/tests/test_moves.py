"""Move generation — legal successors of a board."""

from __future__ import annotations

import pytest

from puzzlesearch.engine.movegen import apply_move, generate_neighbors, move_between, unfold
from puzzlesearch.models.board import GOAL, SIZE, Board, Direction, Tile


# -- helpers ------------------------------------------------------------------


def _blank_at(index: int) -> Board:
    """Tiles 1..8 in order with the blank inserted at *index*."""
    tiles = list(range(1, 9))
    tiles.insert(index, 0)
    return Board.from_flat(tiles)


def _differing_cells(a: Board, b: Board) -> list[int]:
    return [i for i in range(SIZE * SIZE) if a.tiles[i] != b.tiles[i]]


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize(
    ("index", "expected"),
    list(enumerate([2, 3, 2, 3, 4, 3, 2, 3, 2])),
    ids=[f"blank_{i}" for i in range(9)],
)
def test_neighbor_count_depends_on_blank_cell(index: int, expected: int) -> None:
    assert len(unfold(_blank_at(index))) == expected


@pytest.mark.parametrize("index", range(9), ids=[f"blank_{i}" for i in range(9)])
def test_each_neighbor_is_one_adjacent_blank_swap(index: int) -> None:
    board = _blank_at(index)
    for child in unfold(board):
        assert sorted(child.tiles) == sorted(board.tiles)
        cells = _differing_cells(board, child)
        assert len(cells) == 2
        assert board.blank_index in cells
        (r1, c1), (r2, c2) = (divmod(i, SIZE) for i in cells)
        assert abs(r1 - r2) + abs(c1 - c2) == 1
        assert child.tiles[cells[0]] == board.tiles[cells[1]]


def test_emission_order_is_up_down_left_right() -> None:
    centre = _blank_at(4)
    assert unfold(centre) == [
        centre.swap(4, 1),
        centre.swap(4, 7),
        centre.swap(4, 3),
        centre.swap(4, 5),
    ]


def test_goal_neighbors() -> None:
    assert [b.to_flat() for b in unfold(GOAL)] == [
        [1, 2, 3, 4, 5, 0, 7, 8, 6],
        [1, 2, 3, 4, 5, 6, 7, 0, 8],
    ]


def test_generate_neighbors_is_unfold() -> None:
    board = Board.parse("8,1,2,0,4,3,7,6,5")
    assert generate_neighbors(board) == unfold(board)


def test_input_board_untouched() -> None:
    board = _blank_at(4)
    before = board.to_flat()
    unfold(board)
    assert board.to_flat() == before


# -- single moves -------------------------------------------------------------


def test_apply_move_and_move_between_agree() -> None:
    board = _blank_at(4)
    for direction in Direction:
        after = apply_move(board, direction)
        assert after.tiles[board.blank_index] is not Tile.EMPTY
        assert move_between(board, after) is direction


def test_apply_move_off_grid_raises() -> None:
    with pytest.raises(ValueError):
        apply_move(GOAL, Direction.DOWN)


def test_move_between_unrelated_boards_raises() -> None:
    with pytest.raises(ValueError):
        move_between(GOAL, Board.parse("8,1,2,0,4,3,7,6,5"))
