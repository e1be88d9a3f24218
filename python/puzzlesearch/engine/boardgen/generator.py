"""Generates starting boards for searches."""

from __future__ import annotations

import random

from puzzlesearch.engine.movegen import apply_move, legal_directions
from puzzlesearch.models.board import GOAL, Board, Direction, Tile

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class BoardGenerator:
    """Stateless board factory — every random draw goes through *rng*."""

    @staticmethod
    def solved() -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def random_board(rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled board.

        Half of all shuffles land in the unsolvable parity class.
        """
        rng = rng or random.Random()
        tiles = list(Tile)
        rng.shuffle(tiles)
        return Board(tuple(tiles))

    @staticmethod
    def scramble(steps: int, rng: random.Random | None = None) -> Board:
        """Walk the blank *steps* random moves away from the goal.

        The walk never undoes its previous move, and the result is always
        solvable.
        """
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}.")
        rng = rng or random.Random()
        board = GOAL
        prev: Direction | None = None

        for _ in range(steps):
            options = legal_directions(board)
            if prev is not None and _OPPOSITE[prev] in options:
                options.remove(_OPPOSITE[prev])
            prev = rng.choice(options)
            board = apply_move(board, prev)
        return board

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* lies in the goal's parity class.

        On an odd-width grid this holds exactly when the numbered tiles
        contain an even number of inversions.
        """
        flat = [t for t in board.tiles if t is not Tile.EMPTY]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions % 2 == 0
