"""Whole-second countdown used to time a running question."""

from __future__ import annotations

from typing import Callable


class Countdown:
    """Counts down in one-second ticks and notifies once on expiry.

    The base class does not own a clock: something has to call :meth:`tick`
    once per second. Tests and headless callers do that directly, the Qt shell
    uses :class:`hquiz.ui.qt_countdown.QtCountdown`, which drives it from a
    ``QTimer``.
    """

    def __init__(self) -> None:
        self._remaining: int = 0
        self._active: bool = False
        self._on_tick: Callable[[int], None] | None = None
        self._on_expire: Callable[[], None] | None = None

    @property
    def remaining(self) -> int:
        return self._remaining

    def is_active(self) -> bool:
        return self._active

    def start(
        self,
        duration_seconds: int,
        on_expire: Callable[[], None],
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        if duration_seconds <= 0:
            raise ValueError("Countdown duration must be a positive number of seconds.")
        if self._active:
            raise RuntimeError("Countdown is already running; cancel it before starting again.")
        self._remaining = duration_seconds
        self._on_expire = on_expire
        self._on_tick = on_tick
        self._active = True
        self._start_clock()

    def cancel(self) -> None:
        """Stop counting. Remaining time is kept for callers that need it."""
        if not self._active:
            return
        self._active = False
        self._on_expire = None
        self._on_tick = None
        self._stop_clock()

    def tick(self) -> None:
        """Advance one second. Ignored unless the countdown is active."""
        if not self._active:
            return
        self._remaining -= 1
        if self._on_tick is not None:
            self._on_tick(self._remaining)
        if self._remaining > 0 or not self._active:
            return

        on_expire = self._on_expire
        self.cancel()
        if on_expire is not None:
            on_expire()

    def _start_clock(self) -> None:
        """Hook for subclasses that schedule ticks."""

    def _stop_clock(self) -> None:
        """Hook for subclasses that schedule ticks."""
