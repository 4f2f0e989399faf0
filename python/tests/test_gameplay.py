"""Game session: moves, clicks, path replay and win detection."""

from __future__ import annotations

import random

import pytest

from eightpuzzle.backend.engine.gameplay import GamePlay
from eightpuzzle.backend.engine.gamesolver import Solver
from eightpuzzle.backend.models.board import GOAL, Board, Direction

ONE_MOVE = (0, 1, 2, 3, 4, 5, 6, 8, 7)


def test_new_game_is_shuffled() -> None:
    game = GamePlay(random.Random(11))
    assert not game.is_won
    assert game.state.moves == 0
    assert Solver.is_solvable(game.board)


def test_move() -> None:
    game = GamePlay.from_board(GOAL)
    assert game.is_won
    assert game.move(Direction.UP)
    assert game.board.tiles == (0, 1, 2, 3, 4, 8, 6, 7, 5)
    assert game.state.moves == 1
    assert not game.is_won


def test_invalid_move_is_ignored() -> None:
    game = GamePlay.from_board(GOAL)
    assert not game.move(Direction.DOWN)
    assert not game.move(Direction.RIGHT)
    assert game.state.moves == 0
    assert game.state.history == [Board(GOAL)]


def test_move_tile() -> None:
    game = GamePlay.from_board(ONE_MOVE)
    assert not game.move_tile(0)
    assert game.move_tile(8)
    assert game.is_won
    assert game.state.history == [Board(ONE_MOVE), Board(GOAL)]


def test_play_path() -> None:
    board = Board((0, 8, 2, 3, 1, 4, 6, 7, 5))
    game = GamePlay.from_board(board)
    path = Solver.solve(board)
    game.play_path(path)
    assert game.is_won
    assert game.state.moves == len(path) - 1
    assert game.state.history == path


def test_play_path_must_start_at_current_board() -> None:
    game = GamePlay.from_board(GOAL)
    with pytest.raises(ValueError, match="starts at"):
        game.play_path([Board(ONE_MOVE), Board(GOAL)])


def test_play_path_rejects_jumps() -> None:
    game = GamePlay.from_board(ONE_MOVE)
    with pytest.raises(ValueError, match="Step 1"):
        game.play_path([Board(ONE_MOVE), Board((1, 0, 2, 3, 4, 5, 6, 8, 7))])
    assert game.state.moves == 0


def test_rejected_path_leaves_session_unchanged() -> None:
    start = Board((0, 1, 2, 3, 4, 5, 8, 6, 7))
    game = GamePlay.from_board(start)
    path = [start, Board(ONE_MOVE), Board((1, 0, 2, 3, 4, 5, 6, 8, 7))]
    with pytest.raises(ValueError, match="Step 2"):
        game.play_path(path)
    assert game.board == start
    assert game.state.moves == 0
    assert game.state.history == [start]


def test_play_empty_path_is_noop() -> None:
    game = GamePlay.from_board(ONE_MOVE)
    game.play_path([])
    assert game.board == Board(ONE_MOVE)
