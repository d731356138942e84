"""Solver test suite.

Every returned move list is replayed through the real game engine to
verify that it reaches the goal.  Optimality is cross-checked against
exact distances from a reverse breadth-first search.
"""

from __future__ import annotations

import threading

import pytest

from conftest import FIVE_SLIDES_3x3, TEN_SLIDES_4x4, TWO_SLIDES_3x3, walk
from slider.engine.gamegenerator import GameGenerator
from slider.engine.gameplay import GamePlay
from slider.engine.gamesolver import (
    IDAStarSolver,
    NodeArena,
    SearchConfig,
    Solution,
    Solver,
    solve,
    state_key,
)
from slider.engine.gamesolver import solver as solver_module
from slider.engine.heuristics import Heuristic
from slider.models.board import Board
from slider.models.errors import (
    IterationLimitExceeded,
    SearchCancelled,
    SolverError,
    Unsolvable,
)

_SEEDS_3x3 = list(range(12))
_SEEDS_4x4 = list(range(6))


# -- helpers ------------------------------------------------------------------


def _assert_solves(board: Board, solution: Solution) -> None:
    """Replay the solution through ``GamePlay`` and check the win."""
    assert solution.length == len(solution.moves)

    game = GamePlay.from_board(board)
    for i, direction in enumerate(solution.directions(board)):
        ok = game.move(direction)
        assert ok, f"Move {i} ({direction.value}) was invalid at blank {game.board.blank_pos}"

    assert game.is_won, f"Board not solved after {solution.length} moves"


class _FlipAfter:
    """Cancel token that reports set from its *n*-th poll onwards."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.polls = 0

    def is_set(self) -> bool:
        self.polls += 1
        return self.polls >= self.n


# -- scenarios ----------------------------------------------------------------


def test_solved_board_needs_no_moves() -> None:
    solution = Solver().solve(Board.solved(4))
    assert solution.moves == ()
    assert len(solution) == 0


def test_two_slides_3x3() -> None:
    board = walk(3, TWO_SLIDES_3x3)
    solution = Solver().solve(board)
    assert solution.length == 2
    _assert_solves(board, solution)


def test_ten_slides_4x4_is_optimal(table_4x4: dict[Board, int]) -> None:
    board = walk(4, TEN_SLIDES_4x4)
    solution = Solver().solve(board)
    assert solution.length <= 10
    assert solution.length == table_4x4[board]
    _assert_solves(board, solution)


def test_size_two_cannot_be_built() -> None:
    from slider.models.errors import ConfigurationError

    with pytest.raises(ConfigurationError):
        Board.solved(2)


def test_iteration_budget_of_one() -> None:
    board = walk(3, FIVE_SLIDES_3x3)
    assert Solver().solve(board).length == 5

    with pytest.raises(IterationLimitExceeded) as info:
        Solver(SearchConfig(max_iterations=1)).solve(board)
    assert info.value.max_iterations == 1
    assert "exceeded 1 iterations" in str(info.value)


# -- solvability closure ------------------------------------------------------


@pytest.mark.parametrize("seed", _SEEDS_3x3, ids=lambda s: f"3x3-seed{s}")
def test_solve_3x3(seed: int, table_3x3: dict[Board, int]) -> None:
    board = GameGenerator.generate(3, 40, seed)
    solution = Solver().solve(board)
    _assert_solves(board, solution)
    if board in table_3x3:
        assert solution.length == table_3x3[board]


@pytest.mark.parametrize("seed", _SEEDS_4x4, ids=lambda s: f"4x4-seed{s}")
def test_solve_4x4(seed: int) -> None:
    board = GameGenerator.generate(4, 24, seed)
    solution = Solver().solve(board)
    assert solution.length <= 24
    _assert_solves(board, solution)


@pytest.mark.parametrize("heuristic", list(Heuristic), ids=str)
def test_every_heuristic_solves(heuristic: Heuristic) -> None:
    board = GameGenerator.generate(3, 30, seed=99)
    solution = solve(board, heuristic)
    assert solution.heuristic is heuristic
    _assert_solves(board, solution)


def test_admissible_heuristics_agree_on_length(table_3x3: dict[Board, int]) -> None:
    for seed in range(8):
        board = GameGenerator.generate(3, 16, seed)
        manhattan = solve(board, Heuristic.MANHATTAN).length
        shortest = solve(board, Heuristic.SHORTEST_PATH).length
        assert manhattan == shortest == table_3x3[board]


def test_enhanced_is_never_shorter_than_optimal(table_3x3: dict[Board, int]) -> None:
    for seed in range(8):
        board = GameGenerator.generate(3, 16, seed)
        assert solve(board, Heuristic.ENHANCED).length >= table_3x3[board]


# -- determinism --------------------------------------------------------------


def test_repeated_solves_agree() -> None:
    board = GameGenerator.generate(4, 20, seed=3)
    solver = Solver()
    first = solver.solve(board)
    second = solver.solve(board)
    assert first.length == second.length
    assert first.moves == second.moves


def test_hint_is_first_move() -> None:
    board = walk(3, FIVE_SLIDES_3x3)
    solver = Solver()
    assert solver.hint(board) == solver.solve(board).moves[0]
    assert solver.hint(Board.solved(3)) is None


# -- state hashing ------------------------------------------------------------


def test_hash_is_stable() -> None:
    a = walk(4, TEN_SLIDES_4x4)
    b = Board.from_flat(4, list(a.cells))
    assert a is not b
    assert state_key(a) == state_key(b)
    assert 0 <= state_key(a) < 2**64


def test_hash_separates_distinct_boards(table_3x3: dict[Board, int]) -> None:
    keys = {state_key(board) for board in table_3x3}
    assert len(keys) == len(table_3x3)


# -- failures -----------------------------------------------------------------


def test_wrong_parity_is_unsolvable() -> None:
    board = Board.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert not Solver.is_solvable(board)
    with pytest.raises(Unsolvable):
        Solver().solve(board)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_scrambled_boards_pass_parity(size: int) -> None:
    for seed in range(10):
        assert Solver.is_solvable(GameGenerator.generate(size, seed=seed))


def test_exhausted_open_set_is_unsolvable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(solver_module, "successors", lambda board: iter(()))
    with pytest.raises(Unsolvable):
        Solver().solve(walk(3, TWO_SLIDES_3x3))


def test_failures_share_a_base() -> None:
    for error in (IterationLimitExceeded(5), Unsolvable(), SearchCancelled(0)):
        assert isinstance(error, SolverError)


@pytest.mark.parametrize(
    "options",
    [{"max_iterations": 0}, {"cancel_check_interval": 0}],
    ids=["no-budget", "no-interval"],
)
def test_config_validation(options: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        SearchConfig(**options)


# -- cancellation -------------------------------------------------------------


def test_cancel_before_start() -> None:
    cancel = threading.Event()
    cancel.set()
    config = SearchConfig(cancel_check_interval=1)
    with pytest.raises(SearchCancelled) as info:
        Solver(config).solve(walk(3, FIVE_SLIDES_3x3), cancel)
    assert info.value.expanded == 0


def test_cancel_mid_search() -> None:
    token = _FlipAfter(3)
    config = SearchConfig(cancel_check_interval=1)
    with pytest.raises(SearchCancelled) as info:
        Solver(config).solve(walk(3, FIVE_SLIDES_3x3), token)
    assert info.value.expanded == 2


def test_cancel_checked_at_interval() -> None:
    token = _FlipAfter(2)
    config = SearchConfig(cancel_check_interval=1000)
    board = walk(3, FIVE_SLIDES_3x3)
    assert Solver(config).solve(board, token).length == 5
    assert token.polls == 1


def test_unset_token_does_not_interfere() -> None:
    board = walk(3, FIVE_SLIDES_3x3)
    assert Solver(SearchConfig(cancel_check_interval=1)).solve(board, threading.Event()).length == 5


# -- arena --------------------------------------------------------------------


def test_arena_path_extraction() -> None:
    arena = NodeArena()
    start = Board.solved(3)
    root = arena.add(start, state_key(start), 0, 0)
    a = arena.add(start, 1, 1, 0, root, (2, 1))
    b = arena.add(start, 2, 2, 0, a, (1, 1))
    arena.add(start, 3, 1, 0, root, (1, 2))
    assert len(arena) == 4
    assert arena.path_to(b) == [(2, 1), (1, 1)]
    assert arena.path_to(root) == []
    assert arena[b].f == 2


# -- IDA* ---------------------------------------------------------------------


@pytest.mark.parametrize("seed", range(6), ids=lambda s: f"seed{s}")
def test_ida_matches_astar(seed: int) -> None:
    board = GameGenerator.generate(3, 30, seed)
    expected = Solver().solve(board).length
    solution = IDAStarSolver().solve(board)
    assert solution.length == expected
    _assert_solves(board, solution)


def test_ida_on_4x4(table_4x4: dict[Board, int]) -> None:
    board = walk(4, TEN_SLIDES_4x4)
    solution = IDAStarSolver().solve(board)
    assert solution.length == table_4x4[board]
    _assert_solves(board, solution)


def test_ida_failures() -> None:
    board = walk(3, FIVE_SLIDES_3x3)
    with pytest.raises(IterationLimitExceeded):
        IDAStarSolver(SearchConfig(max_iterations=1)).solve(board)

    cancel = threading.Event()
    cancel.set()
    with pytest.raises(SearchCancelled):
        IDAStarSolver(SearchConfig(cancel_check_interval=1)).solve(board, cancel)

    with pytest.raises(Unsolvable):
        IDAStarSolver().solve(Board.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0]))

    assert IDAStarSolver().solve(Board.solved(3)).moves == ()
