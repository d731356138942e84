from slider.engine.gamesolver.arena import NodeArena, SearchNode
from slider.engine.gamesolver.hashing import state_key
from slider.engine.gamesolver.ida import IDAStarSolver
from slider.engine.gamesolver.solver import (
    CancelToken,
    SearchConfig,
    Solution,
    Solver,
    solve,
)

__all__ = [
    "CancelToken",
    "IDAStarSolver",
    "NodeArena",
    "SearchConfig",
    "SearchNode",
    "Solution",
    "Solver",
    "solve",
    "state_key",
]
