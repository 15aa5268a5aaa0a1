"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from backend.errors import InvalidConfiguration

DEFAULT_GRID_SIZE = 3
DEFAULT_SHUFFLE_MOVES = 150


@dataclass(frozen=True)
class GameConfig:
    """Fixed parameters of a game session.

    Timings are in seconds and mirror the reveal animation: the hidden
    tile appears ``reveal_delay`` after the win, fades in over
    ``fade_duration``, and the modal follows ``modal_delay`` after the
    reveal started.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    shuffle_moves: int = DEFAULT_SHUFFLE_MOVES
    tile_size: int = 100
    gap_size: int = 4
    reveal_delay: float = 0.3
    fade_duration: float = 0.5
    modal_delay: float = 0.8
    image_path: Path | None = None
    seed: int | None = None

    @property
    def tile_count(self) -> int:
        return self.grid_size * self.grid_size

    def validate(self) -> GameConfig:
        """Raise ``InvalidConfiguration`` if any field is out of range."""
        if self.grid_size < 2:
            raise InvalidConfiguration(
                f"Grid size must be at least 2, got {self.grid_size}."
            )
        if self.shuffle_moves < 1:
            raise InvalidConfiguration(
                f"Shuffle moves must be at least 1, got {self.shuffle_moves}."
            )
        if self.tile_size < 1:
            raise InvalidConfiguration(
                f"Tile size must be positive, got {self.tile_size}."
            )
        if self.gap_size < 0:
            raise InvalidConfiguration(
                f"Gap size must not be negative, got {self.gap_size}."
            )
        for name in ("reveal_delay", "fade_duration", "modal_delay"):
            if getattr(self, name) < 0:
                raise InvalidConfiguration(f"{name} must not be negative.")
        return self
