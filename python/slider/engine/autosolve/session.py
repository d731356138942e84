"""Background solving for an interactive game.

The solver itself is synchronous.  ``AutoSolver`` runs it on a worker
thread, caches finished solutions by the game's state-version token and
cancels requests whose version has gone stale.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial

from slider.engine.gameplay import GamePlay
from slider.engine.gamesolver import SearchConfig, Solution, Solver
from slider.models.board import Board, Position
from slider.models.errors import SearchCancelled

logger = logging.getLogger(__name__)


class AutoSolver:
    def __init__(
        self,
        game: GamePlay,
        config: SearchConfig | None = None,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.game = game
        self._solver = Solver(config)
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="slider-solve"
        )
        self._lock = threading.RLock()
        self._cache: dict[int, Solution] = {}
        self._pending: dict[int, tuple[Future[Solution], threading.Event]] = {}

    # -- requests -------------------------------------------------------------

    def request(self) -> Future[Solution]:
        """Solve the current board in the background.

        Returns an already-settled future when the current version is
        cached, and the in-flight future when one is already running for
        it.  Pending requests for older versions are cancelled.
        """
        version = self.game.version
        board = self.game.board
        with self._lock:
            cached = self._cache.get(version)
            if cached is not None:
                done: Future[Solution] = Future()
                done.set_result(cached)
                return done
            if version in self._pending:
                return self._pending[version][0]

            self._cancel_stale(version)
            cancel = threading.Event()
            future = self._executor.submit(self._run, version, board, cancel)
            self._pending[version] = (future, cancel)

        logger.debug("solve requested for version %d", version)
        future.add_done_callback(partial(self._settle, version))
        return future

    def _cancel_stale(self, version: int) -> None:
        for stale, (future, cancel) in list(self._pending.items()):
            if stale != version:
                logger.debug("cancelling stale solve for version %d", stale)
                cancel.set()
                future.cancel()
        for stale in [v for v in self._cache if v < version]:
            del self._cache[stale]

    def _run(self, version: int, board: Board, cancel: threading.Event) -> Solution:
        solution = self._solver.solve(board, cancel)
        # cached before the future settles, so waiters see it immediately
        with self._lock:
            self._cache[version] = solution
        return solution

    def _settle(self, version: int, future: Future[Solution]) -> None:
        with self._lock:
            self._pending.pop(version, None)
        if future.cancelled():
            return
        error = future.exception()
        if isinstance(error, SearchCancelled):
            logger.debug("solve for version %d cancelled", version)
        elif error is not None:
            logger.info("solve for version %d failed: %s", version, error)

    # -- playback -------------------------------------------------------------

    def cached(self) -> Solution | None:
        """The finished solution for the current board, if any."""
        with self._lock:
            return self._cache.get(self.game.version)

    def step(self) -> Position | None:
        """Apply the next slide of the cached plan for the current board.

        Returns the slide taken, or ``None`` when nothing is cached or the
        board is already solved.  The remaining plan is re-cached under the
        new version.
        """
        with self._lock:
            plan = self._cache.pop(self.game.version, None)
        if plan is None or not plan.moves:
            return None
        move, rest = plan.moves[0], plan.moves[1:]
        self.game.slide(move)
        with self._lock:
            self._cache[self.game.version] = Solution(
                rest, plan.heuristic, plan.expanded, plan.generated, plan.elapsed
            )
        return move

    # -- lifecycle ------------------------------------------------------------

    def close(self) -> None:
        with self._lock:
            for future, cancel in list(self._pending.values()):
                cancel.set()
                future.cancel()
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> AutoSolver:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
