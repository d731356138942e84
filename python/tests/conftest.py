"""Shared fixtures: reference boards and exact distance tables."""

from __future__ import annotations

import pytest

from slider.engine import moves
from slider.engine.heuristics import ground_truth
from slider.models.board import Board

# Scenario boards built by sliding away from the goal.
TWO_SLIDES_3x3 = [(2, 1), (1, 1)]
FIVE_SLIDES_3x3 = [(2, 1), (1, 1), (0, 1), (0, 2), (1, 2)]
TEN_SLIDES_4x4 = [
    (3, 2), (2, 2), (2, 1), (1, 1), (1, 2),
    (0, 2), (0, 1), (0, 0), (1, 0), (2, 0),
]


def walk(size: int, slides: list[tuple[int, int]]) -> Board:
    return moves.apply_all(Board.solved(size), slides)


@pytest.fixture(scope="session")
def table_3x3() -> dict[Board, int]:
    """Exact distances for every 3×3 board within 16 slides of the goal."""
    return ground_truth(3, 16)


@pytest.fixture(scope="session")
def table_4x4() -> dict[Board, int]:
    """Exact distances for every 4×4 board within 10 slides of the goal."""
    return ground_truth(4, 10)
