"""Win-condition check."""

from __future__ import annotations

from backend.models.grid import EMPTY, Grid


class CompletionChecker:
    """Decides whether a grid is in the canonical solved arrangement."""

    @staticmethod
    def is_tile_correct(grid: Grid, index: int) -> bool:
        """Check if the cell at *index* holds its goal tile."""
        last = grid.size * grid.size - 1
        return grid.cells[index] == (EMPTY if index == last else index)

    @staticmethod
    def is_solved(grid: Grid) -> bool:
        """True iff every tile sits at its own index and the gap is last."""
        return all(
            CompletionChecker.is_tile_correct(grid, i) for i in range(len(grid.cells))
        )

    @staticmethod
    def misplaced(grid: Grid) -> list[int]:
        """Return the indices of non-empty tiles away from home."""
        return [
            i
            for i, tile in enumerate(grid.cells)
            if tile != EMPTY and tile != i
        ]
