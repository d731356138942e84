"""Distance estimators for the sliding puzzle.

Three estimators of increasing informedness:

``manhattan``
    Sum of row and column displacement of every tile.  One slide moves one
    tile one step, so the sum changes by exactly one per slide.
``shortest_path``
    Manhattan distance plus two moves for every tile that has to leave its
    home line because it is reversed against other tiles homed on that
    line.  A line contributes ``k - LIS`` such tiles, where ``k`` counts the
    tiles homed on it and LIS is the longest run already in home order.
``enhanced``
    ``shortest_path`` plus corner and edge penalties.  Tuned by hand and not
    proven admissible; see :mod:`slider.engine.heuristics.audit`.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from enum import StrEnum

from slider.models.board import BLANK, Board

CORNER_PENALTY = 3
EDGE_PENALTY = 2


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    SHORTEST_PATH = "shortest-path"
    ENHANCED = "enhanced"

    def estimate(self, board: Board) -> int:
        return _ESTIMATORS[self](board)


# -- manhattan ------------------------------------------------------------------


def manhattan(board: Board) -> int:
    n = board.size
    total = 0
    for index, label in enumerate(board.cells):
        if label == BLANK:
            continue
        r, c = divmod(index, n)
        hr, hc = divmod(label - 1, n)
        total += abs(r - hr) + abs(c - hc)
    return total


# -- linear conflicts -----------------------------------------------------------


def _longest_increasing(values: Sequence[int]) -> int:
    tails: list[int] = []
    for v in values:
        i = bisect_left(tails, v)
        if i == len(tails):
            tails.append(v)
        else:
            tails[i] = v
    return len(tails)


def linear_conflicts(board: Board) -> int:
    """Number of tiles forced out of their home row or column."""
    n = board.size
    cells = board.cells
    count = 0
    for r in range(n):
        homes = [
            (label - 1) % n
            for label in cells[r * n : (r + 1) * n]
            if label != BLANK and (label - 1) // n == r
        ]
        count += len(homes) - _longest_increasing(homes)
    for c in range(n):
        homes = [
            (label - 1) // n
            for label in cells[c::n]
            if label != BLANK and (label - 1) % n == c
        ]
        count += len(homes) - _longest_increasing(homes)
    return count


def shortest_path(board: Board) -> int:
    return manhattan(board) + 2 * linear_conflicts(board)


# -- enhanced -------------------------------------------------------------------


def corner_penalty(board: Board) -> int:
    """+3 per corner tile displaced together with both of its solved neighbours.

    Only the three corners that hold a tile in the solved board count.
    """
    n = board.size
    cells = board.cells
    last = n - 1
    penalty = 0
    for r, c in ((0, 0), (0, last), (last, 0)):
        home = r * n + c
        if cells[home] == home + 1:
            continue
        neighbours = (
            (r + (1 if r == 0 else -1)) * n + c,
            r * n + c + (1 if c == 0 else -1),
        )
        if all(cells[i] != i + 1 for i in neighbours):
            penalty += CORNER_PENALTY
    return penalty


def edge_penalty(board: Board) -> int:
    """+2 per stray tile in the last row or column, once a line has two or more."""
    n = board.size
    cells = board.cells
    last = n - 1
    row_wrong = sum(
        1
        for label in cells[last * n :]
        if label != BLANK and (label - 1) // n != last
    )
    col_wrong = sum(
        1
        for label in cells[last::n]
        if label != BLANK and (label - 1) % n != last
    )
    penalty = 0
    if row_wrong > 1:
        penalty += row_wrong * EDGE_PENALTY
    if col_wrong > 1:
        penalty += col_wrong * EDGE_PENALTY
    return penalty


def enhanced(board: Board) -> int:
    return shortest_path(board) + corner_penalty(board) + edge_penalty(board)


_ESTIMATORS = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.SHORTEST_PATH: shortest_path,
    Heuristic.ENHANCED: enhanced,
}


def score(board: Board) -> dict[Heuristic, int]:
    """Every estimator's value for *board*, in order of informedness."""
    return {h: h.estimate(board) for h in Heuristic}
