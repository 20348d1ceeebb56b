"""Study session state machine.

States
------
IDLE        No run in progress (no runtime exists).
RUNNING     A study segment is counting down.
BREAK       A break segment is counting down.
PAUSED      Countdown frozen (remembers whether it was RUNNING or BREAK).
COMPLETED   Every target study segment finished; summary emitted.

Transitions
-----------
IDLE → RUNNING                         (start)
RUNNING | BREAK → PAUSED               (pause)
PAUSED → {whatever was paused}         (start / resume)
RUNNING → BREAK | COMPLETED            (study segment reaches 0)
BREAK → RUNNING                        (break segment reaches 0)
any but IDLE → IDLE                    (stop)
RUNNING | PAUSED | BREAK | COMPLETED → RUNNING   (reset)
COMPLETED → RUNNING                    (start, fresh run)

The engine never ticks itself.  The host calls ``tick()`` roughly once
a second while the state is RUNNING or BREAK (see ``TickDriver``).
Remaining time is derived from the clock on every call, so late,
missing or doubled ticks do not make the countdown drift.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from ..config.techniques import Technique
from ..config.validator import SessionConfig, validate
from ..errors import InvalidOperation
from .summary import CompletionSummary

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    BREAK = "break"
    COMPLETED = "completed"


COUNTING_STATES = frozenset({TimerState.RUNNING, TimerState.BREAK})


# ── projections ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerView:
    """Read-only projection for a display surface."""

    remaining_seconds: int
    segment_total_seconds: int
    state: TimerState
    segment_index: int = 0
    target_sessions: int = 0
    completed_segments: int = 0
    technique: Technique | None = None

    @property
    def mode(self) -> str:
        """``"study"``, ``"break"`` or ``"paused"``."""
        if self.state == TimerState.PAUSED:
            return "paused"
        if self.state == TimerState.BREAK:
            return "break"
        return "study"

    @property
    def is_running(self) -> bool:
        return self.state in COUNTING_STATES

    @property
    def progress_percent(self) -> float:
        """0 → 100 progress through the current segment."""
        if self.segment_total_seconds <= 0:
            return 0.0
        elapsed = self.segment_total_seconds - self.remaining_seconds
        return max(0.0, min(100.0, elapsed * 100.0 / self.segment_total_seconds))


@dataclass
class _Runtime:
    """Bookkeeping for one run.  Discarded on stop / fresh start."""

    config: SessionConfig
    started_at: datetime
    segment_total: int = 0
    remaining: int = 0
    # monotonic instant the current segment would have begun counting
    # from its full length; None while paused
    segment_started_at: float | None = None
    # exact seconds elapsed in the segment when it was paused
    paused_elapsed: float = 0.0
    segment_index: int = 1
    completed_segments: int = 0


# ── engine ────────────────────────────────────────────────────────────────


class StudyTimerEngine(QObject):
    """Qt-friendly study timer with study/break cycles and long breaks.

    Signals
    -------
    ticked(remaining_seconds: int)
        Emitted whenever a tick changes the remaining time.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    segment_started(view: TimerView)
        Emitted when a study or break segment begins counting.
    session_completed(summary: CompletionSummary)
        Emitted exactly once each time the run enters COMPLETED.
    """

    ticked = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    segment_started = pyqtSignal(object)
    session_completed = pyqtSignal(object)

    def __init__(
        self,
        config: SessionConfig | Mapping | None = None,
        *,
        parent: QObject | None = None,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(parent)
        if config is not None and not isinstance(config, SessionConfig):
            config = validate(config)
        self._config: SessionConfig | None = config
        self._clock = clock
        self._wall_clock = wall_clock

        self._state: TimerState = TimerState.IDLE
        self._paused_from: TimerState | None = None
        self._runtime: _Runtime | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def config(self) -> SessionConfig | None:
        return self._config

    @property
    def paused_from(self) -> TimerState | None:
        """RUNNING or BREAK while paused, else None."""
        return self._paused_from

    @property
    def is_counting(self) -> bool:
        """True while the host should be delivering ticks."""
        return self._state in COUNTING_STATES

    @property
    def remaining_seconds(self) -> int:
        return self._runtime.remaining if self._runtime else 0

    @property
    def segment_total_seconds(self) -> int:
        return self._runtime.segment_total if self._runtime else 0

    @property
    def current_segment_index(self) -> int:
        """1-based study segment in progress; 0 when idle."""
        return self._runtime.segment_index if self._runtime else 0

    @property
    def completed_segments(self) -> int:
        return self._runtime.completed_segments if self._runtime else 0

    @property
    def started_at(self) -> datetime | None:
        return self._runtime.started_at if self._runtime else None

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current segment."""
        return self.snapshot().progress_percent / 100.0

    def snapshot(self) -> TimerView:
        rt = self._runtime
        if rt is None:
            return TimerView(
                remaining_seconds=0,
                segment_total_seconds=0,
                state=self._state,
                technique=self._config.technique if self._config else None,
            )
        return TimerView(
            remaining_seconds=rt.remaining,
            segment_total_seconds=rt.segment_total,
            state=self._state,
            segment_index=rt.segment_index,
            target_sessions=rt.config.effective_target_sessions,
            completed_segments=rt.completed_segments,
            technique=rt.config.technique,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def reconfigure(self, config: SessionConfig | Mapping) -> SessionConfig:
        """Replace the session config.  Only valid while IDLE.

        A mapping is run through ``validate`` first.
        """
        if self._state != TimerState.IDLE:
            raise InvalidOperation("reconfigure", self._state)
        if not isinstance(config, SessionConfig):
            config = validate(config)
        self._config = config
        logger.debug("reconfigured: %s", config)
        return config

    def start(self) -> None:
        """Begin a run from IDLE/COMPLETED, or continue from PAUSED."""
        if self._state == TimerState.PAUSED:
            self.resume()
            return
        if self._state in COUNTING_STATES:
            raise InvalidOperation("start", self._state)
        if self._config is None:
            raise InvalidOperation("start", self._state)

        # a fresh start after COMPLETED discards the finished run
        self._runtime = _Runtime(
            config=self._config, started_at=self._wall_clock()
        )
        self._paused_from = None
        logger.debug(
            "run started: %s, %d x %d min",
            self._config.technique.value,
            self._config.effective_target_sessions,
            self._config.study_duration,
        )
        self._begin_segment(
            TimerState.RUNNING, self._config.study_seconds, self._clock()
        )

    def pause(self) -> None:
        """Freeze the countdown.  No-op unless RUNNING or BREAK."""
        if self._state not in COUNTING_STATES:
            return
        # absorb time elapsed since the last tick before freezing
        self.tick()
        if self._state not in COUNTING_STATES:
            return
        rt = self._runtime
        elapsed = self._clock() - rt.segment_started_at
        rt.paused_elapsed = min(float(rt.segment_total), max(0.0, elapsed))
        rt.segment_started_at = None
        self._paused_from = self._state
        self._set_state(TimerState.PAUSED)

    def resume(self) -> None:
        """Continue from PAUSED with the frozen remaining time."""
        if self._state != TimerState.PAUSED or self._paused_from is None:
            raise InvalidOperation("resume", self._state)
        rt = self._runtime
        rt.segment_started_at = self._clock() - rt.paused_elapsed
        restore_to = self._paused_from
        self._paused_from = None
        self._set_state(restore_to)

    def stop(self) -> None:
        """Discard the run and return to IDLE.  No-op when already IDLE."""
        if self._state == TimerState.IDLE:
            return
        self._runtime = None
        self._paused_from = None
        logger.debug("run stopped")
        self._set_state(TimerState.IDLE)
        self.ticked.emit(0)

    def reset(self) -> None:
        """Restart the first study segment, keeping completed counts."""
        if self._state == TimerState.IDLE:
            return
        rt = self._runtime
        rt.segment_index = 1
        self._paused_from = None
        self._begin_segment(
            TimerState.RUNNING, rt.config.study_seconds, self._clock()
        )

    def tick(self) -> None:
        """Recompute the countdown from the clock.

        Safe to call any number of times per second.  Ignored outside
        RUNNING/BREAK.  A late call crosses every segment boundary it
        spans, in order.  Stops early if a signal handler replaced the
        run (e.g. started a new one from ``session_completed``).
        """
        if self._state not in COUNTING_STATES:
            return
        rt = self._runtime
        now = self._clock()
        while self._state in COUNTING_STATES and self._runtime is rt:
            elapsed = max(0, math.floor(now - rt.segment_started_at))
            remaining = rt.segment_total - elapsed
            if remaining > 0:
                if remaining != rt.remaining:
                    rt.remaining = remaining
                    self.ticked.emit(remaining)
                return
            self._finish_segment(rt.segment_started_at + rt.segment_total)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: segment mechanics
    # ══════════════════════════════════════════════════════════════════

    def _begin_segment(
        self, state: TimerState, seconds: int, anchor: float
    ) -> None:
        rt = self._runtime
        rt.segment_total = seconds
        rt.remaining = seconds
        rt.segment_started_at = anchor
        rt.paused_elapsed = 0.0
        self._set_state(state)
        # a state_changed handler may already have moved the run on
        if self._runtime is rt and self._state == state:
            self.segment_started.emit(self.snapshot())

    def _finish_segment(self, boundary: float) -> None:
        rt = self._runtime
        config = rt.config

        if self._state == TimerState.BREAK:
            rt.segment_index += 1
            self._begin_segment(TimerState.RUNNING, config.study_seconds, boundary)
            return

        rt.completed_segments += 1
        logger.debug(
            "study segment %d/%d done",
            rt.segment_index,
            config.effective_target_sessions,
        )
        if not config.has_breaks or rt.segment_index >= config.effective_target_sessions:
            self._complete()
            return
        self._begin_segment(
            TimerState.BREAK, config.break_seconds_after(rt.segment_index), boundary
        )

    def _complete(self) -> None:
        rt = self._runtime
        rt.remaining = 0
        rt.segment_started_at = None
        summary = CompletionSummary.for_run(
            rt.config, rt.started_at, self._wall_clock()
        )
        self._set_state(TimerState.COMPLETED)
        if self._runtime is rt:
            self.ticked.emit(0)
        logger.info(
            "session completed: %s, %d min over %d sessions",
            summary.technique.value,
            summary.total_study_time,
            summary.completed_sessions,
        )
        self.session_completed.emit(summary)

    def _set_state(self, new_state: TimerState) -> None:
        if new_state != self._state:
            logger.debug("%s → %s", self._state.value, new_state.value)
        self._state = new_state
        self.state_changed.emit(new_state)
