"""Core gameplay logic: processes moves and checks the win condition."""

from __future__ import annotations

import random
from collections.abc import Sequence

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gamestate import GameState
from eightpuzzle.backend.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.state = GameState(GameGenerator.generate(rng))

    @classmethod
    def from_board(cls, board: Board | Sequence[int]) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.state = GameState(Board.from_flat(board))
        return obj

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Slide the blank one cell in *direction*.

        Returns True if the move was valid.
        """
        board = self.state.board.move(direction)
        if board is None:
            return False
        self.state.advance(board)
        return True

    def move_tile(self, index: int) -> bool:
        """Move the tile at cell *index* into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        board = self.state.board.move_tile(index)
        if board is None:
            return False
        self.state.advance(board)
        return True

    def play_path(self, path: Sequence[Board]) -> None:
        """Step through *path*, which must start at the current board.

        Raises ``ValueError`` on the first step that is not a single move;
        the session is left untouched in that case.
        """
        if not path:
            return
        if path[0] != self.state.board:
            raise ValueError(
                f"Path starts at {path[0].tiles}, board is {self.state.board.tiles}."
            )
        for i, (prev, board) in enumerate(zip(path, path[1:]), 1):
            if prev.direction_to(board) is None:
                raise ValueError(
                    f"Step {i} ({board.tiles}) is not one move from {prev.tiles}."
                )
        for board in path[1:]:
            self.state.advance(board)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
