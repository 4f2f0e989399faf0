"""Optimal 8-puzzle solver (A* over Manhattan distance)."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from eightpuzzle.backend.engine.gamesolver.heuristic import manhattan_tiles
from eightpuzzle.backend.engine.gamesolver.solvability import is_solvable
from eightpuzzle.backend.models.board import (
    ADJACENT,
    GOAL,
    Board,
    Direction,
    pack,
    swap,
)

logger = logging.getLogger(__name__)


class NoSolutionFound(RuntimeError):
    """The search ran out of boards without reaching the goal."""


class _Node:
    __slots__ = ("tiles", "blank", "g", "parent")

    def __init__(
        self,
        tiles: tuple[int, ...],
        blank: int,
        g: int,
        parent: _Node | None,
    ) -> None:
        self.tiles = tiles
        self.blank = blank
        self.g = g
        self.parent = parent


def _reconstruct_path(node: _Node | None) -> list[Board]:
    path: list[Board] = []
    while node is not None:
        path.append(Board(node.tiles))
        node = node.parent
    path.reverse()
    return path


@dataclass
class SearchResult:
    path: list[Board] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0
    termination: str = "exhausted"

    @property
    def found(self) -> bool:
        return self.termination == "ok"

    @property
    def moves(self) -> int:
        """Number of moves in the path, or -1 when nothing was found."""
        return len(self.path) - 1


def path_directions(path: Sequence[Board]) -> list[Direction]:
    """Convert a board path into the blank moves that produce it."""
    directions: list[Direction] = []
    for a, b in zip(path, path[1:]):
        d = a.direction_to(b)
        if d is None:
            raise ValueError(f"Boards {a.tiles} and {b.tiles} are not one move apart.")
        directions.append(d)
    return directions


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def search(board: Board | Sequence[int]) -> SearchResult:
        """Run A* from *board* with no solvability pre-check.

        Nodes leave the open set by lowest ``g + h``; ties go to the node
        pushed first.  Boards are marked visited when popped, never when
        pushed.
        """
        start = Board.from_flat(board)
        counter = itertools.count()
        root = _Node(start.tiles, start.blank_index, 0, None)
        open_heap: list[tuple[int, int, _Node]] = [
            (manhattan_tiles(start.tiles), next(counter), root)
        ]
        visited: set[int] = set()
        result = SearchResult()

        while open_heap:
            _, _, node = heapq.heappop(open_heap)
            key = pack(node.tiles)
            if key in visited:
                continue
            visited.add(key)

            if node.tiles == GOAL:
                result.path = _reconstruct_path(node)
                result.termination = "ok"
                break

            g2 = node.g + 1
            for _, target in ADJACENT[node.blank]:
                tiles = swap(node.tiles, node.blank, target)
                child = _Node(tiles, target, g2, node)
                heapq.heappush(
                    open_heap, (g2 + manhattan_tiles(tiles), next(counter), child)
                )
                result.generated += 1

        result.expanded = len(visited)
        if result.found:
            logger.debug(
                "Solved %s in %d moves (%d expanded, %d generated)",
                start.tiles, result.moves, result.expanded, result.generated,
            )
        else:
            logger.warning(
                "Search exhausted %d boards from %s without reaching the goal",
                result.expanded, start.tiles,
            )
        return result

    @staticmethod
    def solve(board: Board | Sequence[int]) -> list[Board]:
        """Return the shortest path from *board* to the goal, both ends included.

        Returns ``[board]`` when already solved and ``[]`` if unsolvable.
        """
        start = Board.from_flat(board)
        if start.is_solved():
            return [start]

        if not Solver.is_solvable(start):
            logger.debug("Board %s fails the parity test", start.tiles)
            return []

        return Solver.search(start).path

    @staticmethod
    def solve_or_raise(board: Board | Sequence[int]) -> list[Board]:
        """Like ``solve`` but raises ``NoSolutionFound`` instead of returning ``[]``."""
        path = Solver.solve(board)
        if not path:
            raise NoSolutionFound(
                f"No sequence of moves leads from {tuple(board)} to the goal."
            )
        return path

    @staticmethod
    def hint(board: Board | Sequence[int]) -> Board | None:
        """Return the next board on an optimal path, or ``None`` if solved / unsolvable."""
        path = Solver.solve(board)
        return path[1] if len(path) > 1 else None

    @staticmethod
    def is_solvable(board: Board | Sequence[int]) -> bool:
        """Return True if *board* can reach the goal state."""
        return is_solvable(board)

