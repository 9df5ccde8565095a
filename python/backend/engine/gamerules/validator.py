"""Legal-move rule for the sliding puzzle."""

from __future__ import annotations

from backend.models.grid import Direction, Grid


class MoveValidator:
    """Stateless move rules; all methods are static.

    A move slides the empty cell one step in a ``Direction``.  Illegal
    requests are no-ops: the grid is left untouched and ``False`` (or
    ``None``) is returned.
    """

    @staticmethod
    def target_of(grid: Grid, direction: Direction) -> int | None:
        """Return the index the empty cell would move to, or ``None``."""
        empty = grid.empty_index
        target = empty + direction.offset(grid.size)

        if not 0 <= target < grid.size * grid.size:
            return None

        # Row-wrap guard for horizontal moves, edge guard for vertical ones.
        if direction.is_horizontal:
            if grid.row_of(target) != grid.row_of(empty):
                return None
        elif abs(grid.row_of(target) - grid.row_of(empty)) != 1:
            return None

        return target

    @staticmethod
    def is_legal(grid: Grid, direction: Direction) -> bool:
        return MoveValidator.target_of(grid, direction) is not None

    @staticmethod
    def try_move(grid: Grid, direction: Direction) -> bool:
        """Slide the empty cell in *direction*.  Returns True if applied."""
        target = MoveValidator.target_of(grid, direction)
        if target is None:
            return False
        grid.swap(grid.empty_index, target)
        return True

    @staticmethod
    def direction_toward(grid: Grid, cell: int) -> Direction | None:
        """Resolve a tapped *cell* to the direction that pulls it into the gap.

        Returns ``None`` unless *cell* is an orthogonal neighbour of the
        empty cell on the same row or column.
        """
        empty = grid.empty_index
        n = grid.size

        if cell == empty - 1 and grid.col_of(cell) != n - 1:
            return Direction.LEFT
        if cell == empty + 1 and grid.col_of(cell) != 0:
            return Direction.RIGHT
        if cell == empty - n:
            return Direction.UP
        if cell == empty + n:
            return Direction.DOWN
        return None

    @staticmethod
    def try_move_toward_cell(grid: Grid, cell: int) -> bool:
        """Move the tile at *cell* into the gap if it is adjacent."""
        direction = MoveValidator.direction_toward(grid, cell)
        if direction is None:
            return False
        return MoveValidator.try_move(grid, direction)
