"""Exceptions raised by the puzzle backend.

Illegal moves are not errors: ``GamePlay.apply_move`` signals them by
returning ``False``.  Everything here indicates a programming or
configuration mistake and is meant to propagate to the caller.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all backend errors."""


class InvalidConfiguration(PuzzleError, ValueError):
    """A grid size, shuffle count or timing value is out of range."""


class InvalidBoard(PuzzleError, ValueError):
    """A tile list is not a permutation of ``0..N-1`` (or is unsolvable)."""


class DimensionParseError(PuzzleError, ValueError):
    """A pixel dimension string such as ``"100px"`` could not be parsed."""


class PhaseError(PuzzleError, RuntimeError):
    """The reveal state machine was asked to make an illegal transition."""
