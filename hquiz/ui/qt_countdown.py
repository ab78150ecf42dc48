"""Countdown driven by the Qt event loop."""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer

from hquiz.constants.quiz_constants import TICK_INTERVAL_MS
from hquiz.core.countdown import Countdown


class QtCountdown(Countdown):
    """Ticks a :class:`Countdown` once per second with a ``QTimer``."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__()
        self._timer = QTimer(parent)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self.tick)

    def _start_clock(self) -> None:
        self._timer.start()

    def _stop_clock(self) -> None:
        self._timer.stop()
