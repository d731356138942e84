"""Move legality: elementary slides and chain-move resolution.

An elementary slide is named by the position of the tile that moves into
the blank.  A chain move is a click on any tile in line with the blank; it
resolves to the ordered elementary slides that shift the whole segment.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache

from slider.models.board import Board, Direction, Position
from slider.models.errors import IllegalMove

# Offset from the blank to the tile that slides in, keyed by where the tile goes.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, Position] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}
_DIRECTIONS: dict[Position, Direction] = {v: k for k, v in _OFFSETS.items()}


@lru_cache(maxsize=None)
def adjacency(size: int) -> tuple[tuple[int, ...], ...]:
    """Flat indices adjacent to each cell, ordered up, down, left, right."""
    adj: list[tuple[int, ...]] = []
    for i in range(size * size):
        r, c = divmod(i, size)
        nb: list[int] = []
        if r > 0:
            nb.append(i - size)
        if r < size - 1:
            nb.append(i + size)
        if c > 0:
            nb.append(i - 1)
        if c < size - 1:
            nb.append(i + 1)
        adj.append(tuple(nb))
    return tuple(adj)


# -- elementary slides ----------------------------------------------------------


def is_adjacent(pos: Position, blank: Position) -> bool:
    return abs(pos[0] - blank[0]) + abs(pos[1] - blank[1]) == 1


def legal_moves(board: Board) -> list[Position]:
    """Positions of the tiles that can slide into the blank.

    Two at a corner, three on an edge, four in the interior.
    """
    return [divmod(i, board.size) for i in adjacency(board.size)[board.blank]]


def successors(board: Board) -> Iterator[tuple[Position, Board]]:
    """Yield ``(move, next_board)`` for every legal elementary slide."""
    n = board.size
    for i in adjacency(n)[board.blank]:
        yield divmod(i, n), board.slide(i)


def apply(board: Board, pos: Position) -> Board:
    """Slide the tile at *pos* into the blank, returning the new board."""
    blank = board.blank_pos
    if not board.contains(pos) or not is_adjacent(pos, blank):
        raise IllegalMove(pos, blank)
    return board.slide(pos[0] * board.size + pos[1])


def apply_all(board: Board, moves: Iterable[Position]) -> Board:
    for pos in moves:
        board = apply(board, pos)
    return board


# -- directions -----------------------------------------------------------------


def direction_of(board: Board, pos: Position) -> Direction:
    """Direction the tile at *pos* travels when it slides into the blank."""
    br, bc = board.blank_pos
    offset = (pos[0] - br, pos[1] - bc)
    try:
        return _DIRECTIONS[offset]
    except KeyError:
        raise IllegalMove(pos, (br, bc)) from None


def target_of(board: Board, direction: Direction) -> Position:
    """Position of the tile that would move in *direction*."""
    br, bc = board.blank_pos
    dr, dc = _OFFSETS[direction]
    pos = (br + dr, bc + dc)
    if not board.contains(pos):
        raise IllegalMove(pos, (br, bc))
    return pos


def directions_for(board: Board, moves: Iterable[Position]) -> list[Direction]:
    """Translate a slide sequence starting at *board* into directions."""
    out: list[Direction] = []
    for pos in moves:
        out.append(direction_of(board, pos))
        board = apply(board, pos)
    return out


# -- chain moves ----------------------------------------------------------------


def resolve_chain(board: Board, target: Position) -> list[Position]:
    """Resolve a click on *target* into ordered elementary slides.

    The target must share a row or column with the blank.  Tiles nearest
    the blank move first.
    """
    br, bc = board.blank_pos
    tr, tc = target
    if not board.contains(target) or target == (br, bc):
        raise IllegalMove(target, (br, bc))
    if tr == br:
        step = 1 if tc > bc else -1
        return [(br, c) for c in range(bc + step, tc + step, step)]
    if tc == bc:
        step = 1 if tr > br else -1
        return [(r, bc) for r in range(br + step, tr + step, step)]
    raise IllegalMove(target, (br, bc))


def group_chain_clicks(board: Board, moves: Iterable[Position]) -> list[Position]:
    """Collapse runs of same-direction slides into single chain clicks.

    ``resolve_chain`` applied to each returned click reproduces *moves*.
    """
    clicks: list[Position] = []
    last: Direction | None = None
    for pos in moves:
        direction = direction_of(board, pos)
        if direction is last:
            clicks[-1] = pos
        else:
            clicks.append(pos)
        last = direction
        board = apply(board, pos)
    return clicks
