"""Shared fixtures: seeded randomness and a hand-driven clock."""

from __future__ import annotations

import random

import pytest

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.engine.reveal import PolledScheduler


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.time = start

    def __call__(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> PolledScheduler:
    return PolledScheduler(clock)


@pytest.fixture
def game(rng: random.Random) -> GamePlay:
    """A fresh, unshuffled 3×3 session."""
    return GamePlay(GameConfig(), rng)
