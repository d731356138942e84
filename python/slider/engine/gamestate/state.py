"""Tracks the state of a game in progress."""

from __future__ import annotations

from slider.models.board import Board


class GameState:
    """Holds the current board, move counter, and state-version token.

    The version increases on every board change, so anything derived from
    a board (cached solutions, metrics) can be keyed by it.
    """

    def __init__(self, board: Board) -> None:
        self._board = board
        self.moves: int = 0
        self.version: int = 0

    @property
    def board(self) -> Board:
        return self._board

    def advance(self, board: Board, moves: int = 1) -> None:
        """Replace the board after *moves* elementary slides."""
        self._board = board
        self.moves += moves
        self.version += 1

    def reset(self, board: Board) -> None:
        self._board = board
        self.moves = 0
        self.version += 1

    @property
    def is_solved(self) -> bool:
        return self._board.is_solved()
