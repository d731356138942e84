"""Index-addressed node storage for a single search."""

from __future__ import annotations

from dataclasses import dataclass

from slider.models.board import Board, Position


@dataclass(slots=True)
class SearchNode:
    key: int
    g: int
    h: int
    parent: int | None
    move: Position | None
    board: Board

    @property
    def f(self) -> int:
        return self.g + self.h


class NodeArena:
    """Owns every node created by one search; parents are referenced by index."""

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def add(
        self,
        board: Board,
        key: int,
        g: int,
        h: int,
        parent: int | None = None,
        move: Position | None = None,
    ) -> int:
        self._nodes.append(SearchNode(key, g, h, parent, move, board))
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def path_to(self, index: int) -> list[Position]:
        """Moves from the root to node *index*, in execution order."""
        path: list[Position] = []
        node = self._nodes[index]
        while node.parent is not None:
            path.append(node.move)
            node = self._nodes[node.parent]
        path.reverse()
        return path
