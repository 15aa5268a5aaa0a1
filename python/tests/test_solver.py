"""Solvability checks.

Every board reachable by legal moves must pass, every board one
transposition away from a reachable board must fail.
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.models.board import Board


def _swap_two_visible(board: Board) -> Board:
    """Return a copy with the first two visible tiles exchanged."""
    out = board.copy()
    visible = [i for i, v in enumerate(out.cells) if v != out.empty_value]
    out.swap(visible[0], visible[1])
    return out


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_solved_board_is_solvable(size: int) -> None:
    assert Solver.is_solvable(Board.solved(size))


def test_inversions() -> None:
    assert Solver.inversions(Board.solved(3)) == 0
    assert Solver.inversions(Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8])) == 1
    # The empty tile (8) is ignored.
    assert Solver.inversions(Board.from_flat(3, [8, 0, 1, 2, 3, 4, 5, 6, 7])) == 0


def test_classic_unsolvable_3x3() -> None:
    assert not Solver.is_solvable(Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8]))


@pytest.mark.parametrize("size", [2, 3, 4, 5])
@pytest.mark.parametrize("seed", range(8))
def test_scrambled_boards_are_solvable(size: int, seed: int) -> None:
    board = GameGenerator.generate(size, 150, random.Random(seed))
    assert Solver.is_solvable(board)
    assert not Solver.is_solvable(_swap_two_visible(board))


def test_even_width_accounts_for_empty_row() -> None:
    # Moving the empty tile up on a 4×4 flips inversion parity.
    board = Board.solved(4)
    board.swap(15, 11)
    assert Solver.inversions(board) % 2 == 1
    assert Solver.is_solvable(board)
