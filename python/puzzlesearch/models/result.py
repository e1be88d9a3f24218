"""Outcome of a single search call."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from puzzlesearch.models.board import Board, Direction


class Strategy(StrEnum):
    BLIND = "blind"
    HEURISTIC = "heuristic"
    ASTAR = "astar"


class Outcome(StrEnum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"


@dataclass
class SearchResult:
    """What a search hands back to its caller.

    ``trace`` lists every expanded board in expansion order and, when the
    search succeeded, ends with the solution board.  ``path`` is the chain
    of boards from the root to the solution (empty when unsolved).
    """

    strategy: Strategy
    outcome: Outcome
    solution: Board | None
    trace: list[Board]
    path: list[Board] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.outcome is Outcome.SOLVED

    @property
    def states_explored(self) -> int:
        return len(self.trace)

    def moves(self) -> list[Direction]:
        """Return the blank's direction for each step along ``path``."""
        return [a.direction_to(b) for a, b in zip(self.path, self.path[1:])]
