from puzzlesearch.engine.boardgen import BoardGenerator, is_solvable, random_board
from puzzlesearch.engine.goaltest import is_goal
from puzzlesearch.engine.heuristic import heuristic_value, manhattan
from puzzlesearch.engine.movegen import generate_neighbors, unfold
from puzzlesearch.engine.search import SearchEngine, search

__all__ = [
    "BoardGenerator",
    "SearchEngine",
    "generate_neighbors",
    "heuristic_value",
    "is_goal",
    "is_solvable",
    "manhattan",
    "random_board",
    "search",
    "unfold",
]
