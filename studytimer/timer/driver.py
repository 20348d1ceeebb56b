"""Periodic tick source for ``StudyTimerEngine``.

The driver holds a ``QTimer`` only while the engine is RUNNING or in a
BREAK and releases it on every other state, so a paused, stopped or
completed engine never receives ticks.  ``close()`` (or leaving a
``with`` block) releases it for good on teardown.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer

from .engine import COUNTING_STATES, StudyTimerEngine, TimerState

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TickDriver(QObject):

    def __init__(
        self,
        engine: StudyTimerEngine,
        interval_ms: int = TICK_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._closed = False

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

        engine.state_changed.connect(self._on_state_changed)
        # pick up an engine that is already counting
        self._on_state_changed(engine.state)

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the timer and stop listening to the engine."""
        if self._closed:
            return
        self._closed = True
        self._release()
        self._engine.state_changed.disconnect(self._on_state_changed)
        logger.debug("tick driver closed")

    def __enter__(self) -> "TickDriver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── internal ──────────────────────────────────────────────────────

    def _on_state_changed(self, state: TimerState) -> None:
        if self._closed:
            return
        if state in COUNTING_STATES:
            self._acquire()
        else:
            self._release()

    def _acquire(self) -> None:
        if not self._qt_timer.isActive():
            self._qt_timer.start()
            logger.debug("tick driver acquired")

    def _release(self) -> None:
        if self._qt_timer.isActive():
            self._qt_timer.stop()
            logger.debug("tick driver released")

    def _on_timeout(self) -> None:
        self._engine.tick()
