"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD become directions, digits select tiles by label
(multi-digit labels are collected by ``LabelBuffer``).
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if ch.isascii() and ch.isdigit():
        return ch
    return _KEY_MAP.get(ch.lower(), "")


class LabelBuffer:
    """Collects typed digits into a tile label.

    A label is committed as soon as no further digit could keep it within
    ``1..max_label`` (so ``2`` commits at once on a 4×4 board but ``1``
    waits for a second digit or Enter).  A leading ``0`` commits straight
    away.
    """

    def __init__(self, max_label: int) -> None:
        self.max_label = max_label
        self._digits = ""

    @property
    def pending(self) -> str:
        return self._digits

    def push(self, digit: str) -> int | None:
        """Add *digit*; return the label once it is complete."""
        self._digits += digit
        value = int(self._digits)
        if (
            self._digits.startswith("0")
            or value * 10 > self.max_label
            or len(self._digits) >= len(str(self.max_label))
        ):
            return self.flush()
        return None

    def flush(self) -> int | None:
        """Commit whatever has been typed so far (Enter)."""
        digits, self._digits = self._digits, ""
        return int(digits) if digits else None

    def clear(self) -> None:
        self._digits = ""


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):  # arrow key prefix
        return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(
            msvcrt.getwch(), ""
        )
    if ch == "\x1b":
        return "quit"
    return _resolve(ch)


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def pending(wait: float | None) -> bool:
        ready, _, _ = select.select([fd], [], [], wait)
        return bool(ready)

    def read1() -> str:
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        if not pending(timeout):
            return None
        ch = read1()
        if ch != "\x1b":
            return _resolve(ch)
        # ESC [ A/B/C/D, or a bare Escape
        if not pending(0.1) or read1() != "[":
            return "quit"
        if not pending(0.1):
            return ""
        return _ARROW_MAP.get(read1(), "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def read_key(timeout: float | None = None) -> str | None:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed, or returns ``None`` once *timeout*
    seconds pass without one.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "0" .. "9"                     — digit of a tile label
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "enter"                        — Enter / Return
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)
