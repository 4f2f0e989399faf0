"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import logging
import random

from eightpuzzle.backend.engine.gamesolver.solvability import is_solvable
from eightpuzzle.backend.models.board import GOAL, Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling with rejection."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (identity, blank bottom-right)."""
        return Board.solved()

    @staticmethod
    def scramble(tiles: list[int], rng: random.Random | None = None) -> None:
        """Shuffle *tiles* in-place (Fisher–Yates)."""
        randint = rng.randint if rng is not None else random.randint
        for i in range(len(tiles) - 1, 0, -1):
            j = randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        tiles = list(GOAL)
        attempts = 0
        while True:
            attempts += 1
            GameGenerator.scramble(tiles, rng)
            if tuple(tiles) != GOAL and is_solvable(tiles):
                break

        logger.debug("Shuffled %s after %d attempt(s)", tiles, attempts)
        return Board(tuple(tiles))
