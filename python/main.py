#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                       # Pygame GUI, 3×3
    python main.py -f rich               # Rich terminal
    python main.py --image photo.jpg     # puzzle a picture
    python main.py --seed 7 -v DEBUG     # reproducible shuffle, verbose
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
DEFAULT_IMAGE = ASSETS_DIR / "image.jpg"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_GRID_SIZE, DEFAULT_SHUFFLE_MOVES, GameConfig  # noqa: E402
from backend.errors import PuzzleError  # noqa: E402
from backend.models.layout import Layout  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def build_config(
    size: int,
    shuffle_moves: int,
    tile_size: str,
    gap_size: str,
    image: Optional[Path],
    seed: Optional[int],
) -> GameConfig:
    """Assemble and validate a ``GameConfig`` from raw CLI values."""
    if image is None and DEFAULT_IMAGE.is_file():
        image = DEFAULT_IMAGE
    layout = Layout.from_strings(size, tile_size, gap_size)
    config = GameConfig(
        grid_size=size,
        shuffle_moves=shuffle_moves,
        tile_size=layout.tile_size,
        gap_size=layout.gap,
        image_path=image,
        seed=seed,
    )
    return config.validate()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.pygame, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_GRID_SIZE, "-s", "--size",
        help="Grid size (at least 2).",
    ),
    shuffle_moves: int = typer.Option(
        DEFAULT_SHUFFLE_MOVES, "--shuffle-moves",
        help="Random moves used to scramble the board.",
    ),
    tile_size: str = typer.Option(
        "100px", "--tile-size",
        help="Tile side length, e.g. 100px.",
    ),
    gap_size: str = typer.Option(
        "4px", "--gap-size",
        help="Gap between tiles, e.g. 4px.",
    ),
    image: Optional[Path] = typer.Option(
        None, "--image",
        help="Picture to cut into tiles (Pygame only).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "-v", "--log-level",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _setup_logging(log_level)
    try:
        config = build_config(size, shuffle_moves, tile_size, gap_size, image, seed)
    except PuzzleError as e:
        raise typer.BadParameter(str(e)) from e

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config)


if __name__ == "__main__":
    app()
