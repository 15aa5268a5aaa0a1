"""Shuffle walk: solvability, anti-backtracking and degenerate results."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.errors import InvalidConfiguration
from backend.models.board import Board


@pytest.mark.parametrize("size", [2, 3, 4, 6])
@pytest.mark.parametrize("seed", range(5))
def test_scramble_keeps_a_permutation(size: int, seed: int) -> None:
    board = Board.solved(size)
    GameGenerator.scramble(board, 150, random.Random(seed))
    assert board.is_permutation()
    assert Solver.is_solvable(board)


def test_trail_follows_the_empty_tile() -> None:
    board = Board.solved(3)
    trail = GameGenerator.scramble(board, 40, random.Random(3))
    assert len(trail) == 41
    assert trail[0] == 8
    assert trail[-1] == board.empty_index
    for a, b in zip(trail, trail[1:]):
        assert b in Board.solved(3).neighbors(a)


@pytest.mark.parametrize("seed", range(10))
def test_reversing_the_trail_restores_solved(seed: int) -> None:
    board = Board.solved(3)
    trail = GameGenerator.scramble(board, 150, random.Random(seed))
    for prev, cur in zip(reversed(trail[:-1]), reversed(trail[1:])):
        board.swap(cur, prev)
    assert board.is_solved()


@pytest.mark.parametrize("size", [2, 3, 5])
@pytest.mark.parametrize("seed", range(5))
def test_walk_never_steps_straight_back(size: int, seed: int) -> None:
    board = Board.solved(size)
    trail = GameGenerator.scramble(board, 150, random.Random(seed))
    for k in range(1, len(trail) - 1):
        assert trail[k + 1] != trail[k - 1]


def test_seeded_scramble_is_reproducible() -> None:
    a, b = Board.solved(3), Board.solved(3)
    GameGenerator.scramble(a, 150, random.Random(99))
    GameGenerator.scramble(b, 150, random.Random(99))
    assert a.cells == b.cells


@pytest.mark.parametrize("seed", range(10))
def test_generate_is_never_solved(seed: int) -> None:
    board = GameGenerator.generate(3, 150, random.Random(seed))
    assert not board.is_solved()
    assert Solver.is_solvable(board)


def test_two_by_two_cycle_of_twelve_always_returns_to_solved() -> None:
    # With backtracking forbidden the 2×2 empty tile can only circle,
    # and three full laps restore every tile.
    board = Board.solved(2)
    GameGenerator.scramble(board, 12, random.Random(0))
    assert board.is_solved()

    with pytest.raises(InvalidConfiguration, match="keep"):
        GameGenerator.generate(2, 12, random.Random(0))


@pytest.mark.parametrize("seed", [915, 3633])
def test_shuffle_retries_a_degenerate_walk(seed: int) -> None:
    # These seeds make the first 12-move walk on 3×3 end back on solved.
    first = Board.solved(3)
    GameGenerator.scramble(first, 12, random.Random(seed))
    assert first.is_solved()

    board = Board.solved(3)
    trail = GameGenerator.shuffle(board, 12, random.Random(seed))
    assert not board.is_solved()
    assert len(trail) >= 25
    assert (len(trail) - 1) % 12 == 0

    # The join between walks is no exception to the no-backtrack rule.
    for k in range(1, len(trail) - 1):
        assert trail[k + 1] != trail[k - 1]

    for a, b in zip(reversed(trail[1:]), reversed(trail[:-1])):
        board.swap(a, b)
    assert board.is_solved()


@pytest.mark.parametrize("moves", [0, -5])
def test_shuffle_needs_at_least_one_move(moves: int) -> None:
    with pytest.raises(InvalidConfiguration):
        GameGenerator.shuffle(Board.solved(3), moves)
