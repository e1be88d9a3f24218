"""Goal test."""

from __future__ import annotations

from puzzlesearch.models.board import Board, Tile

_ORDER = tuple(t for t in Tile if t is not Tile.EMPTY)


def is_goal(board: Board) -> bool:
    """True if the numbered tiles read 1..8 in row-major order.

    The blank is skipped, so its cell does not matter.
    """
    return tuple(t for t in board.tiles if t is not Tile.EMPTY) == _ORDER

