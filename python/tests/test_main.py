"""Command-line validation (no frontend is launched)."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import main
from backend.errors import DimensionParseError, InvalidConfiguration

runner = CliRunner()


def test_build_config() -> None:
    config = main.build_config(4, 60, "80px", "2px", None, 5)
    assert config.grid_size == 4
    assert config.shuffle_moves == 60
    assert config.tile_size == 80
    assert config.gap_size == 2
    assert config.seed == 5


def test_build_config_rejects_bad_dimension() -> None:
    with pytest.raises(DimensionParseError):
        main.build_config(3, 150, "wide", "4px", None, None)


def test_build_config_rejects_small_grid() -> None:
    with pytest.raises(InvalidConfiguration):
        main.build_config(1, 150, "100px", "4px", None, None)


@pytest.mark.parametrize("args", [
    ["--size", "1"],
    ["--shuffle-moves", "0"],
    ["--tile-size", "100em"],
    ["--frontend", "curses"],
    ["--log-level", "LOUD"],
])
def test_cli_usage_errors(args: list[str]) -> None:
    result = runner.invoke(main.app, args)
    assert result.exit_code == 2
