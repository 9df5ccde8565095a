"""Generates solvable sliding puzzle arrangements."""

from __future__ import annotations

import logging
import random

from backend.engine.gamerules.completion import CompletionChecker
from backend.engine.gamerules.validator import MoveValidator
from backend.models.grid import Direction, Grid

logger = logging.getLogger(__name__)


class Shuffler:
    """Scrambles a grid with a random walk of legal slides.

    Every step is a legal move, so the result is always reachable from
    (and back to) the solved arrangement.
    """

    @staticmethod
    def shuffle(
        grid: Grid,
        seed: int | random.Random | None = None,
        *,
        iterations: int | None = None,
        avoid_backtrack: bool = True,
    ) -> list[Direction]:
        """Scramble *grid* in-place and return the empty-cell moves applied.

        Picks uniformly random cells and pulls each one into the gap when
        it is an orthogonal neighbour, resampling otherwise, until
        *iterations* slides (default ``size**3``) have been made.  For
        boards of size 2 or more the walk continues past that count until
        the grid is no longer solved.
        """
        if grid.size < 2:
            return []

        rng = seed if isinstance(seed, random.Random) else random.Random(seed)
        count = iterations if iterations is not None else grid.size ** 3
        n_cells = grid.size * grid.size

        moves: list[Direction] = []
        previous_empty: int | None = None
        resamples = 0

        while len(moves) < count or CompletionChecker.is_solved(grid):
            cell = rng.randrange(n_cells)
            if avoid_backtrack and cell == previous_empty:
                resamples += 1
                continue

            direction = MoveValidator.direction_toward(grid, cell)
            if direction is None:
                resamples += 1
                continue

            previous_empty = grid.empty_index
            MoveValidator.try_move(grid, direction)
            moves.append(direction)

        logger.debug(
            "Shuffled %dx%d grid with %d slides (%d resamples)",
            grid.size,
            grid.size,
            len(moves),
            resamples,
        )
        return moves

    @staticmethod
    def generate(
        size: int,
        seed: int | random.Random | None = None,
        *,
        avoid_backtrack: bool = True,
    ) -> tuple[Grid, list[Direction]]:
        """Return a freshly shuffled grid of *size* and its shuffle moves."""
        grid = Grid.solved(size)
        moves = Shuffler.shuffle(grid, seed, avoid_backtrack=avoid_backtrack)
        return grid, moves
