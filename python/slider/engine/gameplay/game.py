"""Core gameplay logic: processes moves and checks the win condition."""

from __future__ import annotations

from slider.engine import moves
from slider.engine.gamegenerator import GameGenerator
from slider.engine.gamestate import GameState
from slider.models.board import Board, Direction, Position
from slider.models.errors import MoveError


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int, num_moves: int | None = None, seed: int | None = None) -> None:
        self.size = size
        board = GameGenerator.generate(size, num_moves, seed)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a game session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameState(board)
        return obj

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.state.board
        try:
            target = moves.target_of(board, direction)
        except MoveError:
            return False
        self.state.advance(moves.apply(board, target))
        return True

    def slide(self, pos: Position) -> None:
        """Apply one elementary slide; raises :class:`IllegalMove`."""
        self.state.advance(moves.apply(self.state.board, pos))

    def move_tile(self, row: int, col: int) -> bool:
        """Click the tile at (row, col).

        Any tile in line with the blank moves, pushing the tiles between it
        and the blank along.  Returns True if the click was legal.
        """
        board = self.state.board
        try:
            slides = moves.resolve_chain(board, (row, col))
        except MoveError:
            return False
        self.state.advance(moves.apply_all(board, slides), len(slides))
        return True

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def version(self) -> int:
        return self.state.version

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
