#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py solve 1,2,3,4,5,6,0,7,8        # optimal solution
    python main.py solve 4,1,3,7,2,6,0,5,8 --ida   # same, via IDA*
    python main.py score 4,1,3,7,2,6,0,5,8         # heuristic values
    python main.py scramble 4 --moves 30 --seed 7  # reproducible board
    python main.py audit --size 3 --depth 14       # admissibility check
"""

import logging
import math
import sys
from pathlib import Path
from typing import Optional

import typer
import rich.box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slider.engine import moves  # noqa: E402
from slider.engine.gamegenerator import GameGenerator  # noqa: E402
from slider.engine.gamesolver import (  # noqa: E402
    IDAStarSolver,
    SearchConfig,
    Solver,
)
from slider.engine.gamesolver.solver import DEFAULT_MAX_ITERATIONS  # noqa: E402
from slider.engine.heuristics import Heuristic, audit as run_audit, ground_truth, score  # noqa: E402
from slider.models.board import Board  # noqa: E402
from slider.models.errors import ConfigurationError, SolverError  # noqa: E402

console = Console()

EXIT_SOLVER_FAILED = 1
EXIT_BAD_INPUT = 2


# -- helpers ------------------------------------------------------------------


def _parse_board(raw: str) -> Board:
    """Parse ``"1,2,3,4,5,6,7,0,8"`` (row-major, 0 = blank) into a board."""
    try:
        flat = [int(v) for v in raw.replace(" ", ",").split(",") if v]
    except ValueError:
        console.print(f"[red]Not a list of integers:[/red] {raw}")
        raise typer.Exit(EXIT_BAD_INPUT)
    size = math.isqrt(len(flat))
    if size * size != len(flat):
        console.print(f"[red]{len(flat)} cells do not form a square grid.[/red]")
        raise typer.Exit(EXIT_BAD_INPUT)
    try:
        return Board.from_flat(size, flat)
    except ConfigurationError as err:
        console.print(f"[red]{err}[/red]")
        raise typer.Exit(EXIT_BAD_INPUT)


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)
    return table


def _format_time(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}μs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def solve(
    board: str = typer.Argument(..., help="Row-major cells, comma separated, 0 = blank."),
    heuristic: Heuristic = typer.Option(
        Heuristic.SHORTEST_PATH, "-H", "--heuristic",
        envvar="SLIDER_HEURISTIC",
        help="Distance estimator guiding the search.",
    ),
    max_iterations: int = typer.Option(
        DEFAULT_MAX_ITERATIONS, "-n", "--max-iterations",
        min=1,
        envvar="SLIDER_MAX_ITERATIONS",
        help="Expansion budget before giving up.",
    ),
    ida: bool = typer.Option(False, "--ida", help="Use iterative-deepening A*."),
) -> None:
    """Find a minimum-length solution."""
    start = _parse_board(board)
    config = SearchConfig(heuristic=heuristic, max_iterations=max_iterations)
    solver = IDAStarSolver(config) if ida else Solver(config)

    try:
        solution = solver.solve(start)
    except SolverError as err:
        console.print(f"[red]{err}[/red]")
        raise typer.Exit(EXIT_SOLVER_FAILED)

    console.print(_render_board(start))
    if not solution.moves:
        console.print("[green]Already solved![/green]")
        return

    directions = ", ".join(d.value for d in solution.directions(start))
    clicks = moves.group_chain_clicks(start, solution.moves)
    stats = Table(show_header=False, box=rich.box.SIMPLE)
    stats.add_row("Moves", str(solution.length))
    stats.add_row("Chain clicks", str(len(clicks)))
    stats.add_row("Expanded", str(solution.expanded))
    stats.add_row("Generated", str(solution.generated))
    stats.add_row("Time", _format_time(solution.elapsed))
    console.print(Panel(stats, title=f"[bold cyan]{heuristic.value}[/bold cyan]"))
    console.print(f"[cyan]Slides:[/cyan] {' '.join(f'{r},{c}' for r, c in solution.moves)}")
    console.print(f"[cyan]Directions:[/cyan] {directions}")


@app.command("score")
def score_board(
    board: str = typer.Argument(..., help="Row-major cells, comma separated, 0 = blank."),
) -> None:
    """Print every heuristic's estimate for a board."""
    values = score(_parse_board(board))
    table = Table(title="Heuristics", box=rich.box.ROUNDED)
    table.add_column("Estimator")
    table.add_column("Value", justify="right")
    for h, value in values.items():
        table.add_row(h.value, str(value))
    console.print(table)


@app.command()
def scramble(
    size: int = typer.Argument(4, help="Grid size."),
    num_moves: int = typer.Option(30, "-m", "--moves", min=1, help="Random slides."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible board."),
) -> None:
    """Print a scrambled board in the format ``solve`` accepts."""
    try:
        board = GameGenerator.generate(size, num_moves, seed)
    except ConfigurationError as err:
        console.print(f"[red]{err}[/red]")
        raise typer.Exit(EXIT_BAD_INPUT)
    typer.echo(",".join(str(v) for v in board.cells))


@app.command()
def audit(
    size: int = typer.Option(3, "--size", help="Grid size."),
    depth: int = typer.Option(12, "--depth", min=0, help="Ground-truth search depth."),
) -> None:
    """Compare every heuristic against exact distances."""
    try:
        table = ground_truth(size, depth)
    except ConfigurationError as err:
        console.print(f"[red]{err}[/red]")
        raise typer.Exit(EXIT_BAD_INPUT)

    out = Table(title=f"{size}×{size}, depth ≤ {depth}", box=rich.box.ROUNDED)
    out.add_column("Estimator")
    out.add_column("Boards", justify="right")
    out.add_column("Overestimates", justify="right")
    out.add_column("Worst excess", justify="right")
    out.add_column("Inconsistent edges", justify="right")
    for h in Heuristic:
        report = run_audit(h, table)
        style = "green" if report.admissible else "yellow"
        out.add_row(
            f"[{style}]{h.value}[/{style}]",
            str(report.checked),
            str(len(report.overestimates)),
            str(report.worst_excess),
            str(report.inconsistencies),
        )
    console.print(out)


if __name__ == "__main__":
    app()
