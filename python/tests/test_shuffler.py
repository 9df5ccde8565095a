"""Shuffle tests. Every scramble must replay back to the solved grid."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import Shuffler
from backend.engine.gamerules import CompletionChecker, MoveValidator
from backend.models.grid import EMPTY, Direction, Grid

_CASES = [(size, seed) for size in (2, 3, 4, 5, 7) for seed in (0, 1, 42)]


def _ids(case: tuple[int, int]) -> str:
    size, seed = case
    return f"{size}x{size}-seed{seed}"


# -- helpers ------------------------------------------------------------------


def _undo(grid: Grid, moves: list[Direction]) -> None:
    for direction in reversed(moves):
        assert MoveValidator.try_move(grid, direction.opposite), (
            f"Undo of {direction.value} was illegal at empty {grid.empty_index}"
        )


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("case", _CASES, ids=_ids)
def test_shuffle_is_a_permutation(case: tuple[int, int]) -> None:
    size, seed = case
    grid = Grid.solved(size)
    Shuffler.shuffle(grid, seed)

    assert sorted(grid.cells) == sorted(Grid.solved(size).cells)
    assert grid.cells.count(EMPTY) == 1
    assert grid.cells[grid.empty_index] == EMPTY


@pytest.mark.parametrize("case", _CASES, ids=_ids)
def test_shuffle_replays_back_to_solved(case: tuple[int, int]) -> None:
    size, seed = case
    grid = Grid.solved(size)
    moves = Shuffler.shuffle(grid, seed)

    assert len(moves) >= size ** 3
    assert not CompletionChecker.is_solved(grid)

    _undo(grid, moves)
    assert CompletionChecker.is_solved(grid)


@pytest.mark.parametrize("size", [2, 3, 4])
def test_shuffle_never_undoes_previous_step(size: int) -> None:
    grid = Grid.solved(size)
    moves = Shuffler.shuffle(grid, 7)
    for prev, nxt in zip(moves, moves[1:]):
        assert nxt is not prev.opposite


def test_shuffle_without_backtrack_guard_is_still_solvable() -> None:
    grid = Grid.solved(4)
    moves = Shuffler.shuffle(grid, 3, avoid_backtrack=False)
    _undo(grid, moves)
    assert grid == Grid.solved(4)


def test_shuffle_is_reproducible_from_seed() -> None:
    a, b = Grid.solved(4), Grid.solved(4)
    assert Shuffler.shuffle(a, 1234) == Shuffler.shuffle(b, 1234)
    assert a == b


def test_shuffle_accepts_random_instance() -> None:
    a, b = Grid.solved(3), Grid.solved(3)
    Shuffler.shuffle(a, random.Random(5))
    Shuffler.shuffle(b, 5)
    assert a == b


def test_custom_iteration_count() -> None:
    grid = Grid.solved(3)
    moves = Shuffler.shuffle(grid, 0, iterations=10)
    assert len(moves) >= 10
    _undo(grid, moves)
    assert CompletionChecker.is_solved(grid)


def test_degenerate_board_is_left_alone() -> None:
    grid = Grid.solved(1)
    assert Shuffler.shuffle(grid, 0) == []
    assert grid == Grid.solved(1)


def test_generate_returns_grid_and_moves() -> None:
    grid, moves = Shuffler.generate(3, 11)
    assert grid.size == 3
    assert not CompletionChecker.is_solved(grid)
    _undo(grid, moves)
    assert grid == Grid.solved(3)
