"""Solvability check for sliding puzzle boards."""

from __future__ import annotations

from backend.models.board import Board


class Solver:
    """Stateless helpers — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count pairs of visible tiles that appear in the wrong order."""
        tiles = [v for v in board.cells if v != board.empty_value]
        count = 0
        for i, a in enumerate(tiles):
            for b in tiles[i + 1 :]:
                if a > b:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state by legal moves.

        On odd widths a vertical move shifts a tile past an even number of
        others, so the inversion parity alone is invariant.  On even widths
        each vertical move flips the parity and also moves the empty tile
        one row, so the sum of both is invariant.
        """
        inversions = Solver.inversions(board)
        if board.size % 2 == 1:
            return inversions % 2 == 0
        empty_row, _ = board.coords(board.empty_index)
        rows_from_bottom = board.size - 1 - empty_row
        return (inversions + rows_from_bottom) % 2 == 0
