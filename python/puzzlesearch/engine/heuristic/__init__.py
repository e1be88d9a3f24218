from puzzlesearch.engine.heuristic.manhattan import (
    DISTANCE,
    heuristic_value,
    manhattan,
    order_by_heuristic,
)

__all__ = ["DISTANCE", "heuristic_value", "manhattan", "order_by_heuristic"]
