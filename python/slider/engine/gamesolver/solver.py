"""Optimal sliding puzzle solver (A*)."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Protocol

from slider.engine.gamesolver.arena import NodeArena
from slider.engine.gamesolver.hashing import state_key
from slider.engine.heuristics import Heuristic
from slider.engine.moves import directions_for, successors
from slider.models.board import BLANK, Board, Direction, Position
from slider.models.errors import (
    IterationLimitExceeded,
    SearchCancelled,
    Unsolvable,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 1_000_000
DEFAULT_CANCEL_CHECK_INTERVAL = 1000


class CancelToken(Protocol):
    """Anything with ``is_set()``; ``threading.Event`` is the usual choice."""

    def is_set(self) -> bool: ...


@dataclass(frozen=True)
class SearchConfig:
    heuristic: Heuristic = Heuristic.SHORTEST_PATH
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    cancel_check_interval: int = DEFAULT_CANCEL_CHECK_INTERVAL
    check_parity: bool = True

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if self.cancel_check_interval < 1:
            raise ValueError("cancel_check_interval must be at least 1")


@dataclass(frozen=True)
class Solution:
    """An optimal slide sequence plus the statistics of the search that found it."""

    moves: tuple[Position, ...]
    heuristic: Heuristic
    expanded: int = 0
    generated: int = 0
    elapsed: float = field(default=0.0, compare=False)

    @property
    def length(self) -> int:
        return len(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def directions(self, board: Board) -> list[Direction]:
        """The moves as tile directions, starting from *board*."""
        return directions_for(board, self.moves)


class Solver:
    """A* over the slide graph.

    Holds only its configuration, so one instance may serve concurrent
    ``solve`` calls from several threads.
    """

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config or SearchConfig()

    def solve(self, board: Board, cancel: CancelToken | None = None) -> Solution:
        """Return a minimum-length slide sequence that solves *board*.

        Raises :class:`Unsolvable`, :class:`IterationLimitExceeded` or
        :class:`SearchCancelled`.
        """
        config = self.config
        started = time.perf_counter()
        if board.is_solved():
            return Solution((), config.heuristic)

        if config.check_parity and not Solver.is_solvable(board):
            raise Unsolvable("wrong permutation parity")

        estimate = config.heuristic.estimate
        goal = Board.solved(board.size).cells
        arena = NodeArena()
        root_key = state_key(board)
        h0 = estimate(board)
        root = arena.add(board, root_key, 0, h0)

        best_g: dict[int, int] = {root_key: 0}
        counter = itertools.count()
        # (f, h, insertion order, arena index): ties go to the node nearer the goal.
        open_heap: list[tuple[int, int, int, int]] = [(h0, h0, next(counter), root)]
        expanded = 0
        interval = config.cancel_check_interval

        logger.debug(
            "A* start: %dx%d, heuristic=%s, h0=%d",
            board.size, board.size, config.heuristic, h0,
        )

        while open_heap:
            _, _, _, index = heapq.heappop(open_heap)
            node = arena[index]
            if node.g > best_g[node.key]:
                continue  # superseded by a cheaper route

            if node.board.cells == goal:
                moves = tuple(arena.path_to(index))
                elapsed = time.perf_counter() - started
                logger.debug(
                    "A* solved in %d moves: %d expanded, %d nodes, %.3fs",
                    len(moves), expanded, len(arena), elapsed,
                )
                return Solution(
                    moves, config.heuristic, expanded, len(arena) - 1, elapsed
                )

            if expanded >= config.max_iterations:
                logger.info("A* gave up after %d expansions", expanded)
                raise IterationLimitExceeded(config.max_iterations)
            if cancel is not None and expanded % interval == 0 and cancel.is_set():
                logger.info("A* cancelled after %d expansions", expanded)
                raise SearchCancelled(expanded)
            expanded += 1

            g = node.g + 1
            for move, child in successors(node.board):
                key = state_key(child)
                seen = best_g.get(key)
                if seen is not None and seen <= g:
                    continue
                best_g[key] = g
                h = estimate(child)
                child_index = arena.add(child, key, g, h, index, move)
                heapq.heappush(open_heap, (g + h, h, next(counter), child_index))

        raise Unsolvable()

    def hint(self, board: Board) -> Position | None:
        """Return the first move of an optimal solution, or ``None`` if solved."""
        solution = self.solve(board)
        return solution.moves[0] if solution.moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd widths need an even inversion count.  Even widths need the
        inversion count plus the blank's row (counted from the bottom) to be
        even.
        """
        n = board.size
        flat = [v for v in board.cells if v != BLANK]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - board.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 0


def solve(
    board: Board,
    heuristic: Heuristic = Heuristic.SHORTEST_PATH,
    cancel: CancelToken | None = None,
    **options: int | bool,
) -> Solution:
    """Solve *board* with a one-off :class:`Solver`."""
    return Solver(SearchConfig(heuristic=heuristic, **options)).solve(board, cancel)
