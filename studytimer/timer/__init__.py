"""Timer package."""

from .engine import (
    StudyTimerEngine,
    TimerState,
    TimerView,
    COUNTING_STATES,
)
from .driver import TickDriver, TICK_INTERVAL_MS
from .display import format_clock, session_label
from .summary import CompletionSummary

__all__ = [
    "StudyTimerEngine",
    "TimerState",
    "TimerView",
    "COUNTING_STATES",
    "TickDriver",
    "TICK_INTERVAL_MS",
    "format_clock",
    "session_label",
    "CompletionSummary",
]
