"""Shared fixtures.

The distance oracle is a plain breadth-first search from the goal over
every reachable 3×3 arrangement.  It is self-contained and does not use
the board model or the solver, so it can be trusted to check them.
"""

from __future__ import annotations

from collections import deque

import pytest

GOAL = tuple(range(9))


def _successors(state: tuple[int, ...]):
    i = state.index(8)
    r, c = divmod(i, 3)
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < 3 and 0 <= nc < 3:
            j = nr * 3 + nc
            lst = list(state)
            lst[i], lst[j] = lst[j], lst[i]
            yield tuple(lst)


@pytest.fixture(scope="session")
def distances() -> dict[tuple[int, ...], int]:
    """True move count to the goal for every solvable board (9!/2 entries)."""
    dist = {GOAL: 0}
    queue = deque([GOAL])
    while queue:
        state = queue.popleft()
        d = dist[state] + 1
        for nxt in _successors(state):
            if nxt not in dist:
                dist[nxt] = d
                queue.append(nxt)
    return dist
