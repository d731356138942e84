"""Board model for the sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum

from slider.models.errors import ConfigurationError

MIN_SIZE = 3
MAX_SIZE = 15

BLANK = 0

Position = tuple[int, int]


class Direction(StrEnum):
    """Where the *tile* travels during an elementary slide."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Tile:
    """A labelled tile; its home is the label's slot in the solved ordering."""

    label: int
    size: int

    @property
    def home(self) -> Position:
        return divmod(self.label - 1, self.size)


@dataclass(frozen=True)
class Board:
    """An immutable N×N grid stored as a flat row-major tuple.

    ``0`` marks the blank cell.  Every other value is a distinct label in
    ``1..N²-1``.  Boards are validated on construction; the engine derives
    successors through :meth:`slide`, which skips validation because a
    slide cannot break the invariants.
    """

    size: int
    cells: tuple[int, ...]

    def __post_init__(self) -> None:
        check_size(self.size)
        expected = self.size * self.size
        if len(self.cells) != expected:
            raise ConfigurationError(
                f"Expected {expected} tiles for a {self.size}×{self.size} board, "
                f"got {len(self.cells)}.",
                size=self.size,
            )
        if sorted(self.cells) != list(range(expected)):
            raise ConfigurationError(
                f"Cells must be a permutation of 0..{expected - 1} "
                "with exactly one blank (0).",
                size=self.size,
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(size=size, cells=tuple(flat))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        return cls(size=len(rows), cells=tuple(v for row in rows for v in row))

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        check_size(size)
        return cls._trusted(size, tuple(range(1, size * size)) + (BLANK,))

    @classmethod
    def _trusted(cls, size: int, cells: tuple[int, ...]) -> Board:
        obj = object.__new__(cls)
        object.__setattr__(obj, "size", size)
        object.__setattr__(obj, "cells", cells)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        """Flat index of the blank cell."""
        return self.cells.index(BLANK)

    @property
    def blank_pos(self) -> Position:
        return divmod(self.blank, self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    def position_of(self, label: int) -> Position:
        return divmod(self.cells.index(label), self.size)

    def contains(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.size and 0 <= col < self.size

    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.cells[r * n : (r + 1) * n]) for r in range(n)]

    def tiles(self) -> Iterator[tuple[Position, Tile]]:
        """Yield every non-blank tile with its current position."""
        for index, label in enumerate(self.cells):
            if label != BLANK:
                yield divmod(index, self.size), Tile(label, self.size)

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.cells) - 1
        if self.cells[last] != BLANK:
            return False
        return all(v == i + 1 for i, v in enumerate(self.cells[:last]))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == BLANK:
            return row == self.size - 1 and col == self.size - 1
        return (row, col) == divmod(val - 1, self.size)

    # -- transitions ----------------------------------------------------------

    def slide(self, index: int) -> Board:
        """Return the board after moving the tile at flat *index* into the blank.

        Adjacency is not checked here; see :func:`slider.engine.moves.apply`.
        """
        cells = list(self.cells)
        blank = self.blank
        cells[blank], cells[index] = cells[index], BLANK
        return Board._trusted(self.size, tuple(cells))

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" if v else " " * (width - 1) + "." for v in row)
            for row in self.rows()
        )


def check_size(size: int) -> None:
    """Raise :class:`ConfigurationError` unless MIN_SIZE <= size <= MAX_SIZE."""
    if size < MIN_SIZE:
        raise ConfigurationError.too_small(size, MIN_SIZE)
    if size > MAX_SIZE:
        raise ConfigurationError.too_large(size, MAX_SIZE)
