"""Shuffler: every generated board is a solvable, unsolved permutation."""

from __future__ import annotations

import random

import pytest

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gamesolver import is_solvable
from eightpuzzle.backend.models.board import GOAL, Board


def test_solved() -> None:
    assert GameGenerator.solved() == Board(GOAL)


@pytest.mark.parametrize("seed", range(50))
def test_generate_postconditions(seed: int) -> None:
    board = GameGenerator.generate(random.Random(seed))
    assert sorted(board.tiles) == list(GOAL)
    assert is_solvable(board)
    assert not board.is_solved()


def test_generate_without_rng() -> None:
    for _ in range(50):
        board = GameGenerator.generate()
        assert is_solvable(board)
        assert not board.is_solved()


def test_generate_is_reproducible() -> None:
    a = GameGenerator.generate(random.Random(42))
    b = GameGenerator.generate(random.Random(42))
    assert a == b


def test_generate_varies() -> None:
    rng = random.Random(0)
    boards = {GameGenerator.generate(rng) for _ in range(30)}
    assert len(boards) > 20


def test_scramble_is_a_permutation() -> None:
    tiles = list(GOAL)
    GameGenerator.scramble(tiles, random.Random(5))
    assert sorted(tiles) == list(GOAL)
