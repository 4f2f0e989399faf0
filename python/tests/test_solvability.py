"""Inversion-parity solvability test."""

from __future__ import annotations

import itertools
import random

import pytest

from eightpuzzle.backend.engine.gamesolver import Solver, count_inversions, is_solvable
from eightpuzzle.backend.models.board import GOAL, Board, InvalidBoard


def test_goal_is_solvable() -> None:
    assert is_solvable(GOAL)
    assert count_inversions(GOAL) == 0


def test_blank_is_ignored() -> None:
    # Same tile order, blank elsewhere.
    assert count_inversions([8, 0, 1, 2, 3, 4, 5, 6, 7]) == 0
    assert is_solvable([8, 0, 1, 2, 3, 4, 5, 6, 7])


@pytest.mark.parametrize("pair", list(itertools.combinations(range(8), 2)))
def test_swapping_two_tiles_of_the_goal_is_unsolvable(pair: tuple[int, int]) -> None:
    i, j = pair
    tiles = list(GOAL)
    tiles[i], tiles[j] = tiles[j], tiles[i]
    assert not is_solvable(tiles)


def test_parity_preserved_by_moves() -> None:
    rng = random.Random(7)
    board = Board.solved()
    for _ in range(1000):
        board = rng.choice(board.neighbors())
        assert is_solvable(board)


def test_matches_reachability(distances: dict[tuple[int, ...], int]) -> None:
    rng = random.Random(3)
    for _ in range(2000):
        tiles = list(GOAL)
        rng.shuffle(tiles)
        assert is_solvable(tiles) == (tuple(tiles) in distances)


def test_solver_delegates() -> None:
    assert Solver.is_solvable(Board.solved())
    assert not Solver.is_solvable([1, 0, 2, 3, 4, 5, 6, 7, 8])


def test_rejects_malformed_input() -> None:
    with pytest.raises(InvalidBoard):
        is_solvable([0, 1, 2, 3, 4, 5, 6, 7, 7])
