"""Error taxonomy shared by the model and the engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle core."""


# -- construction ---------------------------------------------------------------


class ConfigurationError(PuzzleError, ValueError):
    """A board could not be built from the given size or cell contents."""

    def __init__(
        self,
        message: str,
        *,
        size: int | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        super().__init__(message)
        self.size = size
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def too_small(cls, size: int, minimum: int) -> ConfigurationError:
        return cls(
            f"Puzzle size {size} is too small (minimum: {minimum})",
            size=size,
            minimum=minimum,
        )

    @classmethod
    def too_large(cls, size: int, maximum: int) -> ConfigurationError:
        return cls(
            f"Puzzle size {size} is too large (maximum: {maximum})",
            size=size,
            maximum=maximum,
        )


# -- moves ----------------------------------------------------------------------


class MoveError(PuzzleError):
    """A move could not be applied to a board."""


class IllegalMove(MoveError):
    """The tile at *position* cannot slide into the blank at *blank*."""

    def __init__(self, position: tuple[int, int], blank: tuple[int, int]) -> None:
        super().__init__(
            f"Invalid move to position ({position[0]}, {position[1]}); "
            f"blank is at ({blank[0]}, {blank[1]})"
        )
        self.position = position
        self.blank = blank


# -- solving --------------------------------------------------------------------


class SolverError(PuzzleError):
    """The search finished without producing a solution."""


class IterationLimitExceeded(SolverError):
    def __init__(self, max_iterations: int) -> None:
        super().__init__(f"Solver timeout: exceeded {max_iterations} iterations")
        self.max_iterations = max_iterations


class Unsolvable(SolverError):
    def __init__(self, reason: str = "open set exhausted") -> None:
        super().__init__(f"Puzzle is unsolvable ({reason})")
        self.reason = reason


class SearchCancelled(SolverError):
    """The caller raised the cancellation signal while the search was running."""

    def __init__(self, expanded: int) -> None:
        super().__init__(f"Search cancelled after {expanded} expansions")
        self.expanded = expanded
