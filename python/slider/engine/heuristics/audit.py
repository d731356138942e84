"""Cross-check estimators against exact distances on small grids.

``ground_truth`` runs a breadth-first search backwards from the solved
board; every slide is reversible, so the BFS depth of a board is its
optimal solution length.  ``audit`` then compares an estimator against
that table.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from slider.engine.heuristics.estimators import Heuristic
from slider.engine.moves import successors
from slider.models.board import Board

logger = logging.getLogger(__name__)


def ground_truth(size: int, depth: int) -> dict[Board, int]:
    """Optimal distance of every board within *depth* slides of the goal."""
    goal = Board.solved(size)
    table: dict[Board, int] = {goal: 0}
    frontier: deque[Board] = deque([goal])
    while frontier:
        board = frontier.popleft()
        d = table[board]
        if d == depth:
            continue
        for _, nxt in successors(board):
            if nxt not in table:
                table[nxt] = d + 1
                frontier.append(nxt)
    logger.debug("ground truth %dx%d depth %d: %d boards", size, size, depth, len(table))
    return table


@dataclass(frozen=True)
class Overestimate:
    board: Board
    estimate: int
    optimal: int


@dataclass
class AuditReport:
    heuristic: Heuristic
    checked: int = 0
    overestimates: list[Overestimate] = field(default_factory=list)
    inconsistencies: int = 0

    @property
    def admissible(self) -> bool:
        return not self.overestimates

    @property
    def consistent(self) -> bool:
        return self.inconsistencies == 0

    @property
    def worst_excess(self) -> int:
        return max((o.estimate - o.optimal for o in self.overestimates), default=0)


def audit(heuristic: Heuristic, table: dict[Board, int]) -> AuditReport:
    """Check *heuristic* for admissibility and consistency over *table*."""
    report = AuditReport(heuristic)
    cache: dict[Board, int] = {}

    def h(board: Board) -> int:
        if board not in cache:
            cache[board] = heuristic.estimate(board)
        return cache[board]

    for board, optimal in table.items():
        report.checked += 1
        value = h(board)
        if value > optimal:
            report.overestimates.append(Overestimate(board, value, optimal))
        for _, nxt in successors(board):
            if nxt in table and abs(value - h(nxt)) > 1:
                report.inconsistencies += 1
    logger.debug(
        "audit %s: %d boards, %d overestimates, %d inconsistent edges",
        heuristic,
        report.checked,
        len(report.overestimates),
        report.inconsistencies,
    )
    return report
