"""Inversion-parity solvability test for the 3×3 grid."""

from __future__ import annotations

from collections.abc import Sequence

from eightpuzzle.backend.models.board import BLANK, Board


def count_inversions(tiles: Sequence[int]) -> int:
    """Count pairs of non-blank values that appear out of ascending order."""
    flat = [v for v in tiles if v != BLANK]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board | Sequence[int]) -> bool:
    """Return True if *board* can reach the goal state.

    Only valid for an odd grid width, where a move never changes the
    inversion parity of the tiles.
    """
    return count_inversions(Board.from_flat(board).tiles) % 2 == 0
