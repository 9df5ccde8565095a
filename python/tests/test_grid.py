"""Grid model tests: construction and swapping."""

from __future__ import annotations

import pytest

from backend.models.grid import EMPTY, Direction, Grid


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize("size", [1, 2, 3, 4, 8])
def test_solved_layout(size: int) -> None:
    grid = Grid.solved(size)
    last = size * size - 1

    assert grid.size == size
    assert grid.cells == list(range(last)) + [EMPTY]
    assert grid.empty_index == last
    assert grid.tile_at(last) == EMPTY


@pytest.mark.parametrize("size", [0, -3])
def test_solved_rejects_empty_board(size: int) -> None:
    with pytest.raises(ValueError):
        Grid.solved(size)


def test_from_cells_finds_empty() -> None:
    grid = Grid.from_cells(3, [0, 1, 2, EMPTY, 3, 4, 5, 6, 7])
    assert grid.empty_index == 3
    assert grid.tile_at(4) == 3


def test_from_cells_copies_input() -> None:
    cells = [0, 1, 2, EMPTY]
    grid = Grid.from_cells(2, cells)
    grid.swap(2, 3)
    assert cells == [0, 1, 2, EMPTY]


@pytest.mark.parametrize(
    "cells",
    [
        [0, 1, 2],
        [0, 1, 2, 3],
        [0, 0, 1, EMPTY],
        [EMPTY, EMPTY, 0, 1],
        [0, 1, 5, EMPTY],
    ],
    ids=["short", "no-empty", "duplicate", "two-empty", "out-of-range"],
)
def test_from_cells_rejects_non_permutation(cells: list[int]) -> None:
    with pytest.raises(ValueError):
        Grid.from_cells(2, cells)


# -- queries ------------------------------------------------------------------


def test_row_and_col() -> None:
    grid = Grid.solved(4)
    assert (grid.row_of(0), grid.col_of(0)) == (0, 0)
    assert (grid.row_of(7), grid.col_of(7)) == (1, 3)
    assert (grid.row_of(15), grid.col_of(15)) == (3, 3)


def test_rows_view() -> None:
    grid = Grid.solved(3)
    assert grid.rows() == [[0, 1, 2], [3, 4, 5], [6, 7, EMPTY]]


# -- swapping -----------------------------------------------------------------


def test_swap_moves_empty_index_from_first_argument() -> None:
    grid = Grid.solved(3)
    grid.swap(8, 5)
    assert grid.empty_index == 5
    assert grid.cells[5] == EMPTY
    assert grid.cells[8] == 5


def test_swap_moves_empty_index_from_second_argument() -> None:
    grid = Grid.solved(3)
    grid.swap(7, 8)
    assert grid.empty_index == 7
    assert grid.cells[7] == EMPTY
    assert grid.cells[8] == 7


def test_swap_of_two_tiles_keeps_empty_index() -> None:
    grid = Grid.solved(3)
    grid.swap(0, 1)
    assert grid.empty_index == 8
    assert grid.cells[:2] == [1, 0]


def test_copy_is_independent() -> None:
    grid = Grid.solved(3)
    clone = grid.copy()
    clone.swap(8, 7)
    assert grid == Grid.solved(3)
    assert clone != grid


# -- directions ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (Direction.UP, -4),
        (Direction.DOWN, 4),
        (Direction.LEFT, -1),
        (Direction.RIGHT, 1),
    ],
)
def test_direction_offsets(direction: Direction, expected: int) -> None:
    assert direction.offset(4) == expected


def test_direction_opposites_pair_up() -> None:
    for direction in Direction:
        assert direction.opposite.opposite is direction
        assert direction.offset(5) + direction.opposite.offset(5) == 0
