#!/usr/bin/env python3
"""8-Puzzle solver.

Usage::

    eightpuzzle shuffle --seed 7          # random solvable board
    eightpuzzle check 1 0 2 3 4 5 6 7 8   # parity test
    eightpuzzle solve 0 8 2 3 1 4 6 7 5   # optimal path, step by step
    eightpuzzle solve --delay 0.5         # shuffle, then play back slowly

Tiles are given row-major; 8 is the blank.
"""

import logging
import random
from typing import List, Optional

import typer

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gamesolver import (
    NoSolutionFound,
    Solver,
    path_directions,
)
from eightpuzzle.backend.models.board import Board, InvalidBoard
from eightpuzzle.frontend.cli.rich import app as rich_app

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(
            f"Unknown logging level {level!r}.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _rng(seed: Optional[int]) -> Optional[random.Random]:
    return random.Random(seed) if seed is not None else None


def _parse_board(tiles: List[int]) -> Board:
    try:
        return Board.from_flat(tiles)
    except InvalidBoard as exc:
        rich_app.show_error(f"Invalid board: {exc}")
        raise typer.Exit(code=1) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="LOGLEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """8-Puzzle solver."""
    _setup_logging(log_level)


@app.command()
def shuffle(
    seed: Optional[int] = typer.Option(
        None, "--seed", envvar="EIGHTPUZZLE_SEED",
        help="Seed for a reproducible shuffle.",
    ),
) -> None:
    """Print a random solvable board."""
    board = GameGenerator.generate(_rng(seed))
    rich_app.show_board(board, "Shuffled")


@app.command()
def check(
    tiles: List[int] = typer.Argument(..., help="Nine tiles, row-major, 8 = blank."),
) -> None:
    """Report whether a board can reach the goal."""
    board = _parse_board(tiles)
    rich_app.show_solvability(board, Solver.is_solvable(board))


@app.command()
def solve(
    tiles: Optional[List[int]] = typer.Argument(
        None, help="Nine tiles, row-major, 8 = blank. Omit to shuffle."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", envvar="EIGHTPUZZLE_SEED",
        help="Seed used when shuffling.",
    ),
    delay: float = typer.Option(
        0.0, "--delay", min=0.0,
        help="Seconds between boards during playback.",
    ),
) -> None:
    """Solve a board optimally and play back the path."""
    board = _parse_board(tiles) if tiles else GameGenerator.generate(_rng(seed))

    try:
        path = Solver.solve_or_raise(board)
    except NoSolutionFound:
        rich_app.show_board(board, "Solve")
        rich_app.show_error("Board is unsolvable.")
        raise typer.Exit(code=1) from None

    rich_app.play_path(path, path_directions(path), delay=delay)


if __name__ == "__main__":
    app()
