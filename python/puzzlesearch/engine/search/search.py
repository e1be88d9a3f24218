"""Search engine — blind DFS, heuristic-ordered DFS, and an opt-in A*.

Both depth-first strategies share one loop: pop the first unvisited board
from the frontier, test it, then push its successors ahead of everything
queued earlier.  The heuristic strategy only differs in sorting each
expanded node's successor set by Manhattan distance before pushing it
(the root's own set is queued unsorted), so it is a greedy depth-first
search, not A*.  Real A* (global priority on g + h) is a separate
strategy that callers must ask for.

The frontier is a list used as a stack whose *end* is the front; entries
are ``(board, parent)`` where ``parent`` indexes into the trace.  Stale
entries (boards expanded after they were queued) are dropped lazily when
they reach the front.
"""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Callable
from time import perf_counter

from puzzlesearch.engine.boardgen import is_solvable
from puzzlesearch.engine.goaltest import is_goal
from puzzlesearch.engine.heuristic import manhattan, order_by_heuristic
from puzzlesearch.engine.movegen import unfold
from puzzlesearch.models.board import Board
from puzzlesearch.models.result import Outcome, SearchResult, Strategy

ProgressFn = Callable[[int], None]


class SearchEngine:
    """Runs one strategy over as many roots as asked.

    Frontier and visited set are created inside each ``run`` call and
    never shared between calls.
    """

    def __init__(
        self,
        strategy: Strategy | str = Strategy.HEURISTIC,
        *,
        reject_unsolvable: bool = False,
        progress: ProgressFn | None = None,
        progress_every: int = 1000,
    ) -> None:
        self.strategy = Strategy(strategy)
        if progress_every < 1:
            raise ValueError(f"progress_every must be >= 1, got {progress_every}.")
        self.reject_unsolvable = reject_unsolvable
        self.progress = progress
        self.progress_every = progress_every

    # -- public API -----------------------------------------------------------

    def run(self, root: Board) -> SearchResult:
        t0 = perf_counter()

        if is_goal(root):
            return self._result(Outcome.SOLVED, [root], [-1], t0)

        if self.reject_unsolvable and not is_solvable(root):
            return self._result(Outcome.NO_SOLUTION, [root], [-1], t0)

        if self.strategy is Strategy.ASTAR:
            outcome, trace, parents = self._a_star(root)
        elif self.strategy is Strategy.HEURISTIC:
            outcome, trace, parents = self._depth_first(root, order_by_heuristic)
        else:
            outcome, trace, parents = self._depth_first(root, list)

        return self._result(outcome, trace, parents, t0)

    # -- strategies -----------------------------------------------------------

    def _depth_first(
        self, root: Board, order: Callable[[list[Board]], list[Board]]
    ) -> tuple[Outcome, list[Board], list[int]]:
        trace: list[Board] = [root]
        parents: list[int] = [-1]
        visited: set[Board] = {root}
        # the root's successors are queued in generation order, unsorted
        frontier: list[tuple[Board, int]] = [
            (child, 0) for child in reversed(unfold(root))
        ]

        while True:
            while frontier and frontier[-1][0] in visited:
                frontier.pop()
            if not frontier:
                return Outcome.NO_SOLUTION, trace, parents

            board, parent = frontier.pop()
            trace.append(board)
            parents.append(parent)
            if is_goal(board):
                return Outcome.SOLVED, trace, parents

            visited.add(board)
            index = len(trace) - 1
            self._report(len(trace))
            # reversed so the first successor ends up at the front
            frontier.extend((child, index) for child in reversed(order(unfold(board))))

    def _a_star(self, root: Board) -> tuple[Outcome, list[Board], list[int]]:
        trace: list[Board] = []
        parents: list[int] = []
        counter = itertools.count()
        closed: set[Board] = set()
        best_g: dict[Board, int] = {root: 0}

        h0 = manhattan(root)
        # (f, h, insertion order, g, board, parent)
        open_heap: list[tuple[int, int, int, int, Board, int]] = [
            (h0, h0, next(counter), 0, root, -1)
        ]

        while open_heap:
            _, _, _, g, board, parent = heapq.heappop(open_heap)
            if board in closed:
                continue

            trace.append(board)
            parents.append(parent)
            if is_goal(board):
                return Outcome.SOLVED, trace, parents

            closed.add(board)
            index = len(trace) - 1
            self._report(len(trace))

            for child in unfold(board):
                g2 = g + 1
                if child in closed or g2 >= best_g.get(child, math.inf):
                    continue
                best_g[child] = g2
                h2 = manhattan(child)
                heapq.heappush(open_heap, (g2 + h2, h2, next(counter), g2, child, index))

        return Outcome.NO_SOLUTION, trace, parents

    # -- helpers --------------------------------------------------------------

    def _report(self, explored: int) -> None:
        if self.progress is not None and explored % self.progress_every == 0:
            self.progress(explored)

    def _result(
        self, outcome: Outcome, trace: list[Board], parents: list[int], t0: float
    ) -> SearchResult:
        solved = outcome is Outcome.SOLVED
        return SearchResult(
            strategy=self.strategy,
            outcome=outcome,
            solution=trace[-1] if solved else None,
            trace=trace,
            path=_rebuild_path(trace, parents) if solved else [],
            elapsed=perf_counter() - t0,
        )


def _rebuild_path(trace: list[Board], parents: list[int]) -> list[Board]:
    path: list[Board] = []
    index = len(trace) - 1
    while index != -1:
        path.append(trace[index])
        index = parents[index]
    path.reverse()
    return path


# -- functional API -----------------------------------------------------------


def search(strategy: Strategy | str, root: Board, **options) -> SearchResult:
    """Search from *root* with *strategy*; *options* go to ``SearchEngine``."""
    return SearchEngine(strategy, **options).run(root)


def depth_first(root: Board) -> SearchResult:
    return search(Strategy.BLIND, root)


def heuristic_search(root: Board) -> SearchResult:
    return search(Strategy.HEURISTIC, root)


def a_star(root: Board) -> SearchResult:
    return search(Strategy.ASTAR, root)
