"""Manhattan distance heuristic."""

from __future__ import annotations

from puzzlesearch.models.board import CELLS, GOAL, SIZE, Board, Tile


def _build_table() -> dict[Tile, tuple[int, ...]]:
    """Precompute, for every tile, its distance from home at each cell."""
    table: dict[Tile, tuple[int, ...]] = {}
    for home, tile in enumerate(GOAL.tiles):
        hr, hc = divmod(home, SIZE)
        if tile is Tile.EMPTY:
            table[tile] = (0,) * CELLS
            continue
        table[tile] = tuple(
            abs(r - hr) + abs(c - hc)
            for r, c in (divmod(i, SIZE) for i in range(CELLS))
        )
    return table


DISTANCE = _build_table()


def manhattan(board: Board) -> int:
    """Sum of each numbered tile's grid distance to its goal cell (blank ignored)."""
    return sum(DISTANCE[tile][i] for i, tile in enumerate(board.tiles))


heuristic_value = manhattan


def order_by_heuristic(boards: list[Board]) -> list[Board]:
    """Sort *boards* by ascending heuristic value.

    The sort is stable: boards with equal values keep their relative order.
    """
    return sorted(boards, key=manhattan)
