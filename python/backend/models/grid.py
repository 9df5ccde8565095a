"""Grid model for the timed sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

EMPTY = -1


class Direction(StrEnum):
    """Direction the *empty cell* travels when a move is applied."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def offset(self, size: int) -> int:
        """Return the flat-index offset this direction applies on a *size* grid."""
        return {
            Direction.UP: -size,
            Direction.DOWN: size,
            Direction.LEFT: -1,
            Direction.RIGHT: 1,
        }[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Grid:
    """Represents the puzzle board as a flat row-major list.

    Each cell holds the canonical solved index of its tile, or ``EMPTY``
    for the single gap.  ``cells[empty_index] == EMPTY`` at all times.
    """

    size: int
    cells: list[int]
    empty_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Grid:
        """Return the goal-state grid (tiles in order, gap bottom-right)."""
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}.")
        last = size * size - 1
        cells = list(range(last)) + [EMPTY]
        return cls(size=size, cells=cells, empty_index=last)

    @classmethod
    def from_cells(cls, size: int, cells: list[int]) -> Grid:
        """Create a grid from a flat row-major cell list.

        Example::

            Grid.from_cells(3, [0, 1, 2, 3, 4, 5, 6, EMPTY, 7])
        """
        if len(cells) != size * size:
            raise ValueError(
                f"Expected {size * size} cells for a {size}×{size} grid, "
                f"got {len(cells)}."
            )
        expected = set(range(size * size - 1)) | {EMPTY}
        if set(cells) != expected or cells.count(EMPTY) != 1:
            raise ValueError(
                f"Cells must be a permutation of 0..{size * size - 2} "
                f"plus one EMPTY."
            )
        return cls(size=size, cells=list(cells), empty_index=cells.index(EMPTY))

    # -- queries --------------------------------------------------------------

    def tile_at(self, index: int) -> int:
        return self.cells[index]

    def row_of(self, index: int) -> int:
        return index // self.size

    def col_of(self, index: int) -> int:
        return index % self.size

    def rows(self) -> list[list[int]]:
        """Return a 2-D copy of the cells, one list per row."""
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    # -- mutation -------------------------------------------------------------

    def swap(self, a: int, b: int) -> None:
        """Exchange the tiles at *a* and *b*.  No legality check."""
        self.cells[a], self.cells[b] = self.cells[b], self.cells[a]
        if self.empty_index == a:
            self.empty_index = b
        elif self.empty_index == b:
            self.empty_index = a

    def copy(self) -> Grid:
        return Grid(size=self.size, cells=self.cells[:], empty_index=self.empty_index)
