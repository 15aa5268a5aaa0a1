"""Terminal key mapping, tile-label entry and the Rich view's use of both."""

from __future__ import annotations

import random

import pytest

from backend.config import GameConfig
from frontend.cli.input_handler import LabelBuffer, _resolve
from frontend.cli.rich.app import _TerminalView


# -- key mapping --------------------------------------------------------------


@pytest.mark.parametrize(("raw", "action"), [
    ("w", "up"),
    ("D", "right"),
    ("q", "quit"),
    ("\x03", "quit"),
    ("r", "restart"),
    ("\r", "enter"),
    ("\n", "enter"),
    ("7", "7"),
    ("x", ""),
    ("²", ""),
])
def test_resolve(raw: str, action: str) -> None:
    assert _resolve(raw) == action


# -- LabelBuffer --------------------------------------------------------------


@pytest.mark.parametrize("digit", list("12345678"))
def test_single_digit_labels_commit_at_once_on_3x3(digit: str) -> None:
    labels = LabelBuffer(8)
    assert labels.push(digit) == int(digit)
    assert labels.pending == ""


def test_two_digit_labels_on_4x4() -> None:
    labels = LabelBuffer(15)
    assert labels.push("1") is None
    assert labels.pending == "1"
    assert labels.push("2") == 12
    assert labels.pending == ""

    # 2..9 cannot grow into a label of 15 or less.
    assert labels.push("3") == 3


def test_enter_finishes_a_short_label() -> None:
    labels = LabelBuffer(15)
    labels.push("1")
    assert labels.flush() == 1
    assert labels.flush() is None


def test_leading_zero_commits_immediately() -> None:
    labels = LabelBuffer(15)
    assert labels.push("0") == 0


def test_clear_drops_pending_digits() -> None:
    labels = LabelBuffer(15)
    labels.push("1")
    labels.clear()
    assert labels.pending == ""
    assert labels.flush() is None


# -- Rich view ----------------------------------------------------------------


def _view(size: int, seed: int = 3) -> _TerminalView:
    config = GameConfig(grid_size=size, shuffle_moves=40, seed=seed)
    return _TerminalView(config, random.Random(seed))


def _type(view: _TerminalView, label: int) -> None:
    for digit in str(label):
        view.handle(digit)
    view.handle("enter")


@pytest.mark.parametrize("size", [3, 4])
def test_typed_label_slides_each_neighbouring_tile(size: int) -> None:
    view = _view(size)
    board = view.game.state.board
    for cell in board.neighbors(board.empty_index):
        empty = board.empty_index
        value = board.cells[cell]
        _type(view, value + 1)
        assert board.cells[empty] == value
        assert board.empty_index == cell
        assert view.status == ""
        # Slide it back so every neighbour is tried from the same state.
        _type(view, value + 1)
        assert board.empty_index == empty


def test_two_digit_label_is_selected_whole() -> None:
    view = _view(4)
    board = view.game.state.board
    movable = {board.cells[c] + 1 for c in board.neighbors(board.empty_index)}
    stuck = next(label for label in range(10, 16) if label not in movable)
    _type(view, stuck)
    assert view.status == f"[yellow]Tile {stuck} can't move.[/yellow]"


@pytest.mark.parametrize("label", [0, 9])
def test_unknown_label_is_reported(label: int) -> None:
    view = _view(3)
    before = view.game.state.board.cells[:]
    _type(view, label)
    assert view.status == f"[yellow]No tile {label}.[/yellow]"
    assert view.game.state.board.cells == before


def test_movement_key_discards_a_half_typed_label() -> None:
    view = _view(4)
    view.handle("1")
    assert view.labels.pending == "1"
    view.handle("up")
    assert view.labels.pending == ""
