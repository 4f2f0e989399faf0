from eightpuzzle.backend.engine.gamesolver.heuristic import manhattan
from eightpuzzle.backend.engine.gamesolver.solvability import (
    count_inversions,
    is_solvable,
)
from eightpuzzle.backend.engine.gamesolver.solver import (
    NoSolutionFound,
    SearchResult,
    Solver,
    path_directions,
)

__all__ = [
    "NoSolutionFound",
    "SearchResult",
    "Solver",
    "count_inversions",
    "is_solvable",
    "manhattan",
    "path_directions",
]
