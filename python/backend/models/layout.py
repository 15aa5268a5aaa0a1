"""Pixel geometry of the tile grid."""

from __future__ import annotations

import re
from dataclasses import dataclass

from backend.errors import DimensionParseError

_DIMENSION_RE = re.compile(r"^\s*(\d+)\s*(px)?\s*$")


def parse_dimension(raw: str) -> int:
    """Parse a pixel length such as ``"100px"`` or ``"4"``.

    Anything that is not a non-negative whole number of pixels raises
    ``DimensionParseError``.
    """
    match = _DIMENSION_RE.match(raw)
    if match is None:
        raise DimensionParseError(f"Not a pixel dimension: {raw!r}")
    return int(match.group(1))


@dataclass(frozen=True)
class Layout:
    """Tile and gap sizes for a ``size``×``size`` grid.

    Positions are relative to the top-left corner of the grid.  The
    puzzle image is stretched over the whole grid (gaps included), so
    the slice shown by tile value ``v`` starts at ``offset(v)``.
    """

    size: int
    tile_size: int
    gap: int

    @classmethod
    def from_strings(cls, size: int, tile: str, gap: str) -> Layout:
        return cls(size=size, tile_size=parse_dimension(tile), gap=parse_dimension(gap))

    @property
    def pitch(self) -> int:
        return self.tile_size + self.gap

    @property
    def extent(self) -> int:
        """Side length of the whole grid in pixels."""
        return self.size * self.tile_size + (self.size - 1) * self.gap

    def offset(self, index: int) -> tuple[int, int]:
        row, col = divmod(index, self.size)
        return col * self.pitch, row * self.pitch

    def hit_test(self, x: int, y: int) -> int | None:
        """Return the cell under ``(x, y)``, or ``None`` for gaps and outside."""
        if x < 0 or y < 0:
            return None
        col, dx = divmod(x, self.pitch)
        row, dy = divmod(y, self.pitch)
        if col >= self.size or row >= self.size:
            return None
        if dx >= self.tile_size or dy >= self.tile_size:
            return None
        return row * self.size + col

    def scaled_to(self, pixels: int) -> Layout:
        """Return a layout with the same gap whose extent fits ``pixels``."""
        tile = max(1, (pixels - (self.size - 1) * self.gap) // self.size)
        return Layout(size=self.size, tile_size=tile, gap=self.gap)
