"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from slider.engine.moves import adjacency
from slider.models.board import Board, Position


class GameGenerator:
    """Creates solvable puzzles by random-walking away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def walk(
        board: Board, num_moves: int, rng: random.Random | None = None
    ) -> tuple[Board, list[Position]]:
        """Apply *num_moves* random slides, never undoing the previous one.

        Returns the final board and the slides taken.
        """
        rng = rng or random.Random()
        n = board.size
        adj = adjacency(n)
        blank = board.blank
        prev: int | None = None
        taken: list[Position] = []

        for _ in range(num_moves):
            neighbors = [i for i in adj[blank] if i != prev]
            target = rng.choice(neighbors)
            board = board.slide(target)
            taken.append(divmod(target, n))
            prev, blank = blank, target

        return board, taken

    @staticmethod
    def scramble(
        board: Board, num_moves: int | None = None, seed: int | None = None
    ) -> Board:
        """Scramble *board* with random valid moves (``size² × 100`` by default)."""
        if num_moves is None:
            num_moves = board.size * board.size * 100
        scrambled, _ = GameGenerator.walk(board, num_moves, random.Random(seed))
        return scrambled

    @staticmethod
    def generate(
        size: int, num_moves: int | None = None, seed: int | None = None
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size."""
        if num_moves is not None and num_moves < 1:
            raise ValueError("num_moves must be at least 1")
        rng = random.Random(seed)
        while True:
            board = GameGenerator.solved(size)
            board = GameGenerator.scramble(board, num_moves, rng.randrange(2**32))
            if not board.is_solved():
                return board
