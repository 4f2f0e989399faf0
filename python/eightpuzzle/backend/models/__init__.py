from eightpuzzle.backend.models.board import (
    BLANK,
    GOAL,
    GRID,
    Board,
    Direction,
    InvalidBoard,
)

__all__ = ["BLANK", "GOAL", "GRID", "Board", "Direction", "InvalidBoard"]
