"""Tracks the state of a game in progress."""

from __future__ import annotations

from eightpuzzle.backend.models.board import Board


class GameState:
    """Holds the current board, move counter, and board history."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.history: list[Board] = [board]

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board) -> None:
        self.board = board
        self.history.append(board)
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
