from puzzlesearch.models.board import GOAL, Board, Direction, InvalidBoardError, Tile
from puzzlesearch.models.result import Outcome, SearchResult, Strategy
from puzzlesearch.models.runlog import RunLog, RunRecord

__all__ = [
    "GOAL",
    "Board",
    "Direction",
    "InvalidBoardError",
    "Outcome",
    "RunLog",
    "RunRecord",
    "SearchResult",
    "Strategy",
    "Tile",
]
