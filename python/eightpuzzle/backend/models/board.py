"""Board model for the 8-puzzle.

A board is a row-major arrangement of the values ``0..8`` over a 3×3
grid.  Value ``8`` is the blank; the goal is the identity arrangement.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum

GRID = 3
CELLS = GRID * GRID
BLANK = CELLS - 1
GOAL: tuple[int, ...] = tuple(range(CELLS))


class InvalidBoard(ValueError):
    """Raised when a tile sequence is not a permutation of ``0..8``."""


class Direction(StrEnum):
    """Direction the *blank* travels in a single move."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def _build_adjacency() -> tuple[tuple[tuple[Direction, int], ...], ...]:
    adj: list[tuple[tuple[Direction, int], ...]] = []
    for i in range(CELLS):
        r, c = divmod(i, GRID)
        nb: list[tuple[Direction, int]] = []
        for direction, (dr, dc) in _OFFSETS.items():
            nr, nc = r + dr, c + dc
            if 0 <= nr < GRID and 0 <= nc < GRID:
                nb.append((direction, nr * GRID + nc))
        adj.append(tuple(nb))
    return tuple(adj)


# Cells reachable by the blank from each index, in up/down/left/right order.
ADJACENT = _build_adjacency()


def validate_tiles(flat: Sequence[int]) -> tuple[int, ...]:
    """Return *flat* as a tuple, or raise ``InvalidBoard``."""
    try:
        tiles = tuple(flat)
    except TypeError:
        raise InvalidBoard(f"Expected a sequence of tiles, got {flat!r}.") from None
    if len(tiles) != CELLS:
        raise InvalidBoard(
            f"Expected {CELLS} tiles for a {GRID}×{GRID} board, "
            f"got {len(tiles)}."
        )
    for v in tiles:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidBoard(f"Tile values must be integers, got {v!r}.")
        if not 0 <= v < CELLS:
            raise InvalidBoard(f"Tile value {v} is outside 0..{CELLS - 1}.")
    if len(set(tiles)) != CELLS:
        dupes = sorted({v for v in tiles if tiles.count(v) > 1})
        raise InvalidBoard(f"Duplicate tile values: {dupes}.")
    return tiles


def swap(tiles: tuple[int, ...], i: int, j: int) -> tuple[int, ...]:
    """Return a copy of *tiles* with cells *i* and *j* exchanged."""
    lst = list(tiles)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def pack(tiles: Sequence[int]) -> int:
    """Encode a tile sequence as an integer, 4 bits per cell."""
    key = 0
    for v in reversed(tiles):
        key = (key << 4) | v
    return key


@dataclass(frozen=True)
class Board(Sequence[int]):
    """Immutable 3×3 arrangement.  Every move returns a new board.

    A read-only sequence of its tile values, so callers can index tile
    images with it directly.
    """

    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", validate_tiles(self.tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([3, 1, 2, 0, 4, 5, 6, 7, 8])
        """
        if isinstance(flat, Board):
            return flat
        return cls(validate_tiles(flat))

    @classmethod
    def solved(cls) -> Board:
        return cls(GOAL)

    # -- sequence protocol ----------------------------------------------------

    def __len__(self) -> int:
        return CELLS

    def __iter__(self) -> Iterator[int]:
        return iter(self.tiles)

    def __getitem__(self, index: int) -> int:
        return self.tiles[index]

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return GRID

    @property
    def blank_index(self) -> int:
        return self.tiles.index(BLANK)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, GRID)

    @property
    def key(self) -> int:
        """Canonical integer key used for visited-state bookkeeping."""
        return pack(self.tiles)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * GRID + col]

    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * GRID : (r + 1) * GRID] for r in range(GRID)]

    def is_solved(self) -> bool:
        return self.tiles == GOAL

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if the tile at (row, col) sits on its goal cell."""
        return self.get_tile(row, col) == row * GRID + col

    # -- moves ----------------------------------------------------------------

    def moves(self) -> list[tuple[Direction, Board]]:
        """Every single-move successor, ordered up, down, left, right."""
        bi = self.blank_index
        return [
            (direction, Board(swap(self.tiles, bi, target)))
            for direction, target in ADJACENT[bi]
        ]

    def neighbors(self) -> list[Board]:
        return [board for _, board in self.moves()]

    def move(self, direction: Direction) -> Board | None:
        """Slide the blank in *direction*; ``None`` if that leaves the grid."""
        bi = self.blank_index
        for d, target in ADJACENT[bi]:
            if d == direction:
                return Board(swap(self.tiles, bi, target))
        return None

    def move_tile(self, index: int) -> Board | None:
        """Slide the tile at *index* into the blank.

        Returns ``None`` unless the cell is orthogonally adjacent to the
        blank.
        """
        bi = self.blank_index
        for _, target in ADJACENT[bi]:
            if target == index:
                return Board(swap(self.tiles, bi, target))
        return None

    def direction_to(self, other: Board) -> Direction | None:
        """Return the move turning this board into *other*, if there is one."""
        for direction, board in self.moves():
            if board == other:
                return direction
        return None

    def __str__(self) -> str:
        return "\n".join(
            " ".join("_" if v == BLANK else str(v) for v in row)
            for row in self.rows()
        )
