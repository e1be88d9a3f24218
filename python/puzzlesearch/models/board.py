"""Board model for the 8-puzzle search engine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum, StrEnum

SIZE = 3
CELLS = SIZE * SIZE


class InvalidBoardError(ValueError):
    """Raised when a tile arrangement is not a permutation of the 9 symbols."""


class Tile(IntEnum):
    EMPTY = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8

    def __str__(self) -> str:
        return "_" if self is Tile.EMPTY else str(self.value)


class Direction(StrEnum):
    """Direction the *blank* travels during a move."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_ALL_TILES = frozenset(Tile)

# Blank offsets in emission order: up, down, left, right.
OFFSETS: dict[Direction, int] = {
    Direction.UP: -SIZE,
    Direction.DOWN: SIZE,
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
}


@dataclass(frozen=True)
class Board:
    """An immutable 3×3 arrangement of tiles, stored row-major.

    Every symbol in ``Tile`` occurs exactly once.  Boards are hashable and
    compare by their full arrangement, so they can sit in sets and dicts.
    """

    tiles: tuple[Tile, ...]

    def __post_init__(self) -> None:
        try:
            raw = tuple(self.tiles)
        except TypeError as exc:
            raise InvalidBoardError(f"Tiles must be a sequence, got {self.tiles!r}.") from exc
        if len(raw) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, got {len(raw)}."
            )
        try:
            object.__setattr__(self, "tiles", tuple(Tile(v) for v in raw))
        except ValueError as exc:
            raise InvalidBoardError(f"Unknown tile in {list(raw)}: {exc}") from exc
        if set(self.tiles) != _ALL_TILES:
            raise InvalidBoardError(
                f"Board must hold each of 0-8 exactly once, got {list(self.tiles)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major list of ints (0 is Empty).

        Example::

            Board.from_flat([3, 1, 2, 6, 4, 5, 7, 8, 0])
        """
        return cls(tuple(flat))

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse ``"8,1,2,0,4,3,7,6,5"``, ``"812 043 765"`` or ``"812_43765"``.

        Either ``0`` or ``_`` stands for the blank.  With commas or
        semicolons every field must be a single symbol; otherwise each
        digit is one cell.
        """
        leftover = re.sub(r"[0-9_\s,;|/\[\]()]", "", text)
        if leftover:
            raise InvalidBoardError(f"Unexpected characters {leftover!r} in {text!r}.")
        if re.search(r"[,;]", text):
            symbols = re.findall(r"\d+|_", text)
            wide = [s for s in symbols if len(s) > 1]
            if wide:
                raise InvalidBoardError(f"Tiles are single digits, got {wide} in {text!r}.")
        else:
            symbols = re.findall(r"[0-9_]", text)
        return cls.from_flat([0 if s == "_" else int(s) for s in symbols])

    @classmethod
    def _trusted(cls, tiles: tuple[Tile, ...]) -> Board:
        """Build a board from tiles already known to be a valid permutation."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(Tile.EMPTY)

    @property
    def rows(self) -> list[tuple[Tile, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def blank_directions(self) -> list[Direction]:
        """Return the directions the blank can travel, in up/down/left/right order."""
        row, col = divmod(self.blank_index, SIZE)
        directions: list[Direction] = []
        if row > 0:
            directions.append(Direction.UP)
        if row < SIZE - 1:
            directions.append(Direction.DOWN)
        if col > 0:
            directions.append(Direction.LEFT)
        if col < SIZE - 1:
            directions.append(Direction.RIGHT)
        return directions

    def direction_to(self, other: Board) -> Direction:
        """Name the single blank move that turns this board into *other*.

        Raises ``ValueError`` if the two boards are not one move apart.
        """
        i = self.blank_index
        delta = other.blank_index - i
        for direction in self.blank_directions():
            if OFFSETS[direction] == delta and self.swap(i, i + delta) == other:
                return direction
        raise ValueError(f"{other} is not one move away from {self}.")

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* sits where the goal board has it."""
        return self.tiles[index] == GOAL.tiles[index]

    def swap(self, i: int, j: int) -> Board:
        """Return a new board with cells *i* and *j* exchanged."""
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board._trusted(tuple(tiles))

    def to_flat(self) -> list[int]:
        return [int(t) for t in self.tiles]

    def __str__(self) -> str:
        return " ".join("".join(str(t) for t in row) for row in self.rows)


GOAL = Board(
    (
        Tile.ONE, Tile.TWO, Tile.THREE,
        Tile.FOUR, Tile.FIVE, Tile.SIX,
        Tile.SEVEN, Tile.EIGHT, Tile.EMPTY,
    )
)
