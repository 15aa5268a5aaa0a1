"""The end-of-game sequence: reveal the hidden tile, then show the modal."""

from __future__ import annotations

import logging
from collections.abc import Callable

from backend.config import GameConfig
from backend.engine.gamestate import GameState, Phase
from backend.engine.reveal.scheduler import PolledScheduler
from backend.errors import PhaseError

logger = logging.getLogger(__name__)


class RevealSequence:
    """Drives ``Won → Revealing → ModalShown`` on a scheduler.

    Call :meth:`start` from the game's win listener.  ``on_reveal`` fires
    when the hidden tile should start fading in, ``on_modal`` when the
    completion modal should appear.
    """

    def __init__(
        self,
        state: GameState,
        scheduler: PolledScheduler,
        config: GameConfig,
        *,
        on_reveal: Callable[[], None] | None = None,
        on_modal: Callable[[], None] | None = None,
    ) -> None:
        self.state = state
        self.scheduler = scheduler
        self.config = config
        self.on_reveal = on_reveal
        self.on_modal = on_modal
        self._started = False
        self._reveal_started_at: float | None = None

    def start(self) -> None:
        if self.state.phase is not Phase.WON or self._started:
            raise PhaseError(f"Cannot start the reveal in phase {self.state.phase}.")
        self._started = True
        self.scheduler.call_later(self.config.reveal_delay, self._reveal)

    def _reveal(self) -> None:
        self.state.advance(Phase.REVEALING)
        self._reveal_started_at = self.scheduler.now()
        logger.debug("Revealing hidden tile")
        if self.on_reveal is not None:
            self.on_reveal()
        self.scheduler.call_later(self.config.modal_delay, self._show_modal)

    def _show_modal(self) -> None:
        self.state.advance(Phase.MODAL_SHOWN)
        logger.debug("Showing completion modal")
        if self.on_modal is not None:
            self.on_modal()

    # -- queries --------------------------------------------------------------

    def opacity(self) -> float:
        """Opacity of the hidden tile, from 0.0 (invisible) to 1.0."""
        if self._reveal_started_at is None:
            return 0.0
        if self.config.fade_duration <= 0:
            return 1.0
        elapsed = self.scheduler.now() - self._reveal_started_at
        return max(0.0, min(1.0, elapsed / self.config.fade_duration))

    @property
    def fading(self) -> bool:
        return self._reveal_started_at is not None and self.opacity() < 1.0

    @property
    def modal_visible(self) -> bool:
        return self.state.phase is Phase.MODAL_SHOWN
