"""Iterative-deepening A*: optimal like :class:`Solver`, memory linear in depth."""

from __future__ import annotations

import logging
import math
import time

from slider.engine.gamesolver.solver import (
    CancelToken,
    SearchConfig,
    Solution,
    Solver,
)
from slider.engine.moves import adjacency
from slider.models.board import Board, Position
from slider.models.errors import (
    IterationLimitExceeded,
    SearchCancelled,
    Unsolvable,
)

logger = logging.getLogger(__name__)

_FOUND = -1


class IDAStarSolver:
    """Depth-first search under a growing f-bound.

    Each round raises the bound to the smallest f that exceeded it.  The
    iteration budget counts visited nodes across all rounds.  A slide that
    would undo the previous one is never tried.
    """

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config or SearchConfig()

    def solve(self, board: Board, cancel: CancelToken | None = None) -> Solution:
        config = self.config
        started = time.perf_counter()
        if board.is_solved():
            return Solution((), config.heuristic)
        if config.check_parity and not Solver.is_solvable(board):
            raise Unsolvable("wrong permutation parity")

        estimate = config.heuristic.estimate
        adj = adjacency(board.size)
        n = board.size
        path: list[Position] = []
        visited = 0

        def search(node: Board, blank: int, g: int, bound: int, previous: int) -> float:
            nonlocal visited
            if visited >= config.max_iterations:
                raise IterationLimitExceeded(config.max_iterations)
            if (
                cancel is not None
                and visited % config.cancel_check_interval == 0
                and cancel.is_set()
            ):
                raise SearchCancelled(visited)
            visited += 1

            f = g + estimate(node)
            if f > bound:
                return f
            if node.is_solved():
                return _FOUND
            smallest = math.inf
            for index in adj[blank]:
                if index == previous:
                    continue
                path.append(divmod(index, n))
                result = search(node.slide(index), index, g + 1, bound, blank)
                if result == _FOUND:
                    return _FOUND
                smallest = min(smallest, result)
                path.pop()
            return smallest

        bound: float = estimate(board)
        while True:
            logger.debug("IDA* round: bound=%s, visited=%d", bound, visited)
            result = search(board, board.blank, 0, int(bound), -1)
            if result == _FOUND:
                elapsed = time.perf_counter() - started
                logger.debug(
                    "IDA* solved in %d moves: %d visited, %.3fs",
                    len(path), visited, elapsed,
                )
                return Solution(tuple(path), config.heuristic, visited, visited, elapsed)
            if result == math.inf:
                raise Unsolvable()
            bound = result
