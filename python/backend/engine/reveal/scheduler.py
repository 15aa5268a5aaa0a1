"""A polled timer queue for sequencing the reveal animation."""

from __future__ import annotations

import heapq
import itertools
import time
from collections.abc import Callable


class PolledScheduler:
    """Runs delayed callbacks when the owner polls it.

    Nothing happens in the background: frontends call :meth:`poll` from
    their event loop and tests drive ``clock`` by hand.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._queue: list[tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(
            self._queue, (self._clock() + delay, next(self._counter), callback)
        )

    def poll(self) -> int:
        """Run every callback whose deadline has passed; return how many ran.

        Callbacks scheduled by a running callback are picked up in the same
        poll if they are already due.
        """
        ran = 0
        while self._queue and self._queue[0][0] <= self._clock():
            _, _, callback = heapq.heappop(self._queue)
            callback()
            ran += 1
        return ran

    def cancel_all(self) -> None:
        self._queue.clear()

    @property
    def pending(self) -> int:
        return len(self._queue)
