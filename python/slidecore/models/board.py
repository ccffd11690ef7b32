"""Grid model for the sliding puzzle."""

from __future__ import annotations

from enum import StrEnum

from slidecore.engine.gamestate.state import SolvedDetector
from slidecore.errors import IllegalMoveError, InvalidCoordinateError

EMPTY = 0

Cell = tuple[int, int]


class Direction(StrEnum):
    """Which way the *tile* slides into the empty slot."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def offset(self) -> Cell:
        """Offset from the empty slot to the tile that slides into it."""
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# UP   → tile at (er+1, ec) moves up
# DOWN → tile at (er-1, ec) moves down
# LEFT → tile at (er, ec+1) moves left
# RIGHT→ tile at (er, ec-1) moves right
_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class GridState:
    """The N×N tile arrangement.

    Tiles are stored as a 2D list of ints, ``0`` marks the empty slot.
    The empty cell is cached and every mutating method keeps it in step
    with the tiles; it is read-only from the outside.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self._tiles: list[list[int]] = []
        self._empty: Cell = (size - 1, size - 1)
        self.reset(size)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> GridState:
        return cls(size)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> GridState:
        """Create a grid from a flat row-major tile list.

        Example::

            GridState.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        grid = cls(size)
        grid._tiles = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        index = flat.index(EMPTY)
        grid._empty = (index // size, index % size)
        return grid

    def reset(self, size: int | None = None) -> None:
        """Restore the solved arrangement, optionally resizing."""
        if size is not None:
            self.size = size
        n = self.size
        self._tiles = [
            [r * n + c + 1 for c in range(n)] for r in range(n)
        ]
        self._tiles[n - 1][n - 1] = EMPTY
        self._empty = (n - 1, n - 1)

    # -- queries --------------------------------------------------------------

    @property
    def empty(self) -> Cell:
        return self._empty

    @property
    def empty_row(self) -> int:
        return self._empty[0]

    @property
    def empty_col(self) -> int:
        return self._empty[1]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def value_at(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._tiles[row][col]

    def rows(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._tiles)

    def flat(self) -> list[int]:
        return [v for row in self._tiles for v in row]

    def is_solved(self) -> bool:
        return SolvedDetector.is_solved(self)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.value_at(row, col)
        if val == EMPTY:
            return row == self.size - 1 and col == self.size - 1
        return row == (val - 1) // self.size and col == (val - 1) % self.size

    def copy(self) -> GridState:
        return GridState.from_flat(self.size, self.flat())

    # -- mutation -------------------------------------------------------------

    def set_value(self, row: int, col: int, value: int) -> None:
        """Write a single cell.

        Writing ``0`` moves the cached empty cell. Overwriting the cached
        empty cell re-derives it from the remaining ``0``; a write that
        would leave no ``0`` at all raises ``ValueError`` and changes
        nothing. Callers writing several cells are responsible for leaving
        exactly one ``0`` behind.
        """
        self._check(row, col)
        if value != EMPTY and (row, col) == self._empty:
            remaining = self._find_empty(skip=(row, col))
            if remaining is None:
                raise ValueError(
                    f"Writing {value} at ({row}, {col}) would leave no empty slot."
                )
            self._empty = remaining
        self._tiles[row][col] = value
        if value == EMPTY:
            self._empty = (row, col)

    def assign(self, other: GridState) -> None:
        """Take over *other*'s size and arrangement in one step."""
        self.size = other.size
        self._tiles = [list(row) for row in other.rows()]
        self._empty = other.empty

    def slide(self, source: Cell) -> int:
        """Slide the tile at *source* into the adjacent empty slot.

        Returns the moved tile value. The vacated *source* becomes the
        new empty cell.
        """
        sr, sc = source
        self._check(sr, sc)
        er, ec = self._empty
        if abs(sr - er) + abs(sc - ec) != 1:
            raise IllegalMoveError(
                f"Tile at {source} is not adjacent to the empty slot {self._empty}."
            )
        value = self._tiles[sr][sc]
        self._tiles[er][ec] = value
        self._tiles[sr][sc] = EMPTY
        self._empty = (sr, sc)
        return value

    # -- helpers --------------------------------------------------------------

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise InvalidCoordinateError(row, col, self.size)

    def _find_empty(self, skip: Cell | None = None) -> Cell | None:
        for r, line in enumerate(self._tiles):
            for c, value in enumerate(line):
                if value == EMPTY and (r, c) != skip:
                    return (r, c)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return self.size == other.size and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"GridState(size={self.size}, tiles={self._tiles!r})"
