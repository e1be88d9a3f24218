from puzzlesearch.engine.search.search import (
    SearchEngine,
    a_star,
    depth_first,
    heuristic_search,
    search,
)

__all__ = ["SearchEngine", "a_star", "depth_first", "heuristic_search", "search"]
