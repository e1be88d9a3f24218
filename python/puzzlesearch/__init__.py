"""Blind and heuristic-ordered depth-first search over the 8-puzzle."""

from puzzlesearch.engine import (
    generate_neighbors,
    heuristic_value,
    is_goal,
    random_board,
    search,
)
from puzzlesearch.models import GOAL, Board, Outcome, SearchResult, Strategy, Tile

__all__ = [
    "GOAL",
    "Board",
    "Outcome",
    "SearchResult",
    "Strategy",
    "Tile",
    "generate_neighbors",
    "heuristic_value",
    "is_goal",
    "random_board",
    "search",
]
