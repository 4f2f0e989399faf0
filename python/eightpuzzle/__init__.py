"""8-puzzle engine: board model, solvability test, shuffler and A* solver."""

from __future__ import annotations

import random
from collections.abc import Sequence

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gamesolver import (
    NoSolutionFound,
    Solver,
    manhattan,
)
from eightpuzzle.backend.models.board import GOAL, Board, Direction, InvalidBoard

__all__ = [
    "GOAL",
    "Board",
    "Direction",
    "InvalidBoard",
    "NoSolutionFound",
    "generate_shuffled_board",
    "is_solvable",
    "manhattan",
    "solve",
]


def is_solvable(board: Board | Sequence[int]) -> bool:
    return Solver.is_solvable(board)


def generate_shuffled_board(rng: random.Random | None = None) -> Board:
    return GameGenerator.generate(rng)


def solve(board: Board | Sequence[int]) -> list[Board]:
    return Solver.solve(board)
