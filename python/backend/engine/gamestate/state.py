"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from backend.errors import PhaseError
from backend.models.board import Board


class Phase(StrEnum):
    PLAYING = "playing"
    WON = "won"
    REVEALING = "revealing"
    MODAL_SHOWN = "modal_shown"


_ORDER = list(Phase)


class GameState:
    """Holds the current board and the session phase.

    The phase only ever moves forward, one step at a time, so ``solved``
    flips to True exactly once per session.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.phase: Phase = Phase.PLAYING

    @property
    def solved(self) -> bool:
        return self.phase is not Phase.PLAYING

    def advance(self, phase: Phase) -> None:
        """Move to *phase*, which must directly follow the current one."""
        current = _ORDER.index(self.phase)
        if _ORDER.index(phase) != current + 1:
            raise PhaseError(f"Cannot go from {self.phase} to {phase}.")
        self.phase = phase
