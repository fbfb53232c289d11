"""
Tick scheduler: repeating QTimer callbacks with add-one / cancel-all semantics.
Owned by the Container and passed explicitly to every view that starts an animation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer, Signal

from button_insets.config import TICK_INTERVAL_MS

log = logging.getLogger(__name__)


class TickScheduler(QObject):
    """Registry of active repeating timers. All timers fire on the UI thread."""

    active_count_changed = Signal(int)

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._interval_ms = interval_ms
        self._timers: list[QTimer] = []

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def schedule(self, callback: Callable[[], None]) -> None:
        """Invoke ``callback`` every ``interval_ms`` until :meth:`cancel_all`."""
        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        self._timers.append(timer)
        log.debug("Tick scheduled", extra={"active_ticks": len(self._timers)})
        self.active_count_changed.emit(len(self._timers))

    def cancel_all(self) -> None:
        """Stop every timer and clear the registry. No-op when nothing is scheduled."""
        if not self._timers:
            return
        timers, self._timers = self._timers, []
        for timer in timers:
            timer.stop()
            timer.deleteLater()
        log.debug("Cancelled %d tick(s)", len(timers))
        self.active_count_changed.emit(0)
