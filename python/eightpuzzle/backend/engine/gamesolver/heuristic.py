"""Manhattan-distance heuristic."""

from __future__ import annotations

from collections.abc import Sequence

from eightpuzzle.backend.models.board import BLANK, CELLS, GRID, Board

# _DIST[cell][value]: grid distance between *cell* and the goal cell of *value*.
_DIST: tuple[tuple[int, ...], ...] = tuple(
    tuple(
        abs(i // GRID - v // GRID) + abs(i % GRID - v % GRID)
        for v in range(CELLS)
    )
    for i in range(CELLS)
)


def manhattan_tiles(tiles: Sequence[int]) -> int:
    """Sum of Manhattan distances to goal cells (blank ignored).

    Works on a raw tile tuple; no validation.
    """
    dist = 0
    for i, v in enumerate(tiles):
        if v != BLANK:
            dist += _DIST[i][v]
    return dist


def manhattan(board: Board | Sequence[int]) -> int:
    return manhattan_tiles(Board.from_flat(board).tiles)
