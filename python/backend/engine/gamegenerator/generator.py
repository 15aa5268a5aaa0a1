"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.config import DEFAULT_SHUFFLE_MOVES
from backend.errors import InvalidConfiguration
from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by walking the empty tile from the solved state."""

    # Walks that land back on the solved board are repeated at most this often.
    MAX_ATTEMPTS = 32

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (tile ``i`` in cell ``i``)."""
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board,
        moves: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
        prev: int | None = None,
    ) -> list[int]:
        """Scramble *board* in-place with ``moves`` random empty-tile swaps.

        The walk never steps straight back to the cell the empty tile just
        left unless that is the only neighbour.  Pass *prev* to continue an
        earlier walk without stepping back across the join.  Returns the
        trail of empty-cell positions, starting with the position before the
        first swap, so ``len(trail) == moves + 1``.
        """
        choose = (rng or random).choice
        empty = board.empty_index
        trail = [empty]

        for _ in range(moves):
            neighbors = board.neighbors(empty)
            candidates = [n for n in neighbors if n != prev] or neighbors
            target = choose(candidates)
            board.swap(empty, target)
            prev, empty = empty, target
            trail.append(empty)

        return trail

    @staticmethod
    def shuffle(
        board: Board,
        moves: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> list[int]:
        """Scramble *board* in-place, repeating walks that end solved.

        Returns the combined trail of every walk performed.
        """
        if moves < 1:
            raise InvalidConfiguration(
                f"Shuffle moves must be at least 1, got {moves}."
            )

        trail = [board.empty_index]
        for attempt in range(1, GameGenerator.MAX_ATTEMPTS + 1):
            prev = trail[-2] if len(trail) > 1 else None
            trail.extend(GameGenerator.scramble(board, moves, rng, prev)[1:])
            if not board.is_solved():
                logger.debug(
                    "Scrambled %d×%d board with %d moves (attempt %d)",
                    board.size, board.size, moves, attempt,
                )
                return trail
            logger.warning(
                "Shuffle of %d moves ended on the solved board; reshuffling",
                moves,
            )

        raise InvalidConfiguration(
            f"{moves} shuffle moves on a {board.size}×{board.size} grid keep "
            "returning to the solved board."
        )

    @staticmethod
    def generate(
        size: int,
        moves: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size."""
        board = GameGenerator.solved(size)
        GameGenerator.shuffle(board, moves, rng)
        return board
