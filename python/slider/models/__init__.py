from slider.models.board import (
    BLANK,
    MAX_SIZE,
    MIN_SIZE,
    Board,
    Direction,
    Position,
    Tile,
)
from slider.models.errors import (
    ConfigurationError,
    IllegalMove,
    IterationLimitExceeded,
    MoveError,
    PuzzleError,
    SearchCancelled,
    SolverError,
    Unsolvable,
)

__all__ = [
    "BLANK",
    "MAX_SIZE",
    "MIN_SIZE",
    "Board",
    "ConfigurationError",
    "Direction",
    "IllegalMove",
    "IterationLimitExceeded",
    "MoveError",
    "Position",
    "PuzzleError",
    "SearchCancelled",
    "SolverError",
    "Tile",
    "Unsolvable",
]
