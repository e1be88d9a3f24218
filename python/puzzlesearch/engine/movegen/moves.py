"""Legal moves of the blank on the 3×3 grid."""

from __future__ import annotations

from puzzlesearch.models.board import OFFSETS, Board, Direction


def legal_directions(board: Board) -> list[Direction]:
    return board.blank_directions()


def unfold(board: Board) -> list[Board]:
    """Return every board one blank move away from *board*.

    Between 2 and 4 boards, emitted in up, down, left, right order.  The
    order is what makes depth-first traversals reproducible.
    """
    i = board.blank_index
    return [board.swap(i, i + OFFSETS[d]) for d in board.blank_directions()]


generate_neighbors = unfold


def apply_move(board: Board, direction: Direction) -> Board:
    """Slide the blank one cell in *direction*.

    Raises ``ValueError`` if the blank would leave the grid.
    """
    if direction not in board.blank_directions():
        raise ValueError(f"Blank cannot move {direction.value} on {board}.")
    i = board.blank_index
    return board.swap(i, i + OFFSETS[direction])


def move_between(before: Board, after: Board) -> Direction:
    """Name the single blank move that turns *before* into *after*."""
    return before.direction_to(after)
