"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.errors import InvalidBoard, InvalidConfiguration


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    ``cells`` is a flat row-major list: ``cells[i]`` is the value of the
    tile sitting in grid cell ``i``.  Values run from ``0`` to ``N - 1``
    and the highest value is the empty slot, so the solved board is
    simply ``[0, 1, ..., N - 1]``.
    """

    size: int
    cells: list[int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board for a ``size``×``size`` grid."""
        if size < 2:
            raise InvalidConfiguration(
                f"Grid size must be at least 2, got {size}."
            )
        return cls(size=size, cells=list(range(size * size)))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
        """
        if size < 2:
            raise InvalidConfiguration(
                f"Grid size must be at least 2, got {size}."
            )
        if len(flat) != size * size:
            raise InvalidBoard(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoard(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        return cls(size=size, cells=list(flat))

    # -- queries --------------------------------------------------------------

    @property
    def tile_count(self) -> int:
        return self.size * self.size

    @property
    def empty_value(self) -> int:
        return self.tile_count - 1

    @property
    def empty_index(self) -> int:
        return self.cells.index(self.empty_value)

    def index_of(self, value: int) -> int:
        return self.cells.index(value)

    def coords(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def neighbors(self, index: int) -> list[int]:
        """Return the cells adjacent to ``index`` (up, down, left, right).

        Cells that would fall off the grid are omitted, so corners have
        two neighbours, edges three and interior cells four.
        """
        if not 0 <= index < self.tile_count:
            raise IndexError(f"Cell {index} is outside the board.")
        row, col = self.coords(index)
        out: list[int] = []
        if row > 0:
            out.append(index - self.size)
        if row < self.size - 1:
            out.append(index + self.size)
        if col > 0:
            out.append(index - 1)
        if col < self.size - 1:
            out.append(index + 1)
        return out

    def is_permutation(self) -> bool:
        return sorted(self.cells) == list(range(self.tile_count))

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(value == index for index, value in enumerate(self.cells))

    # -- mutation -------------------------------------------------------------

    def swap(self, a: int, b: int) -> None:
        self.cells[a], self.cells[b] = self.cells[b], self.cells[a]

    def copy(self) -> Board:
        return Board(size=self.size, cells=self.cells[:])
