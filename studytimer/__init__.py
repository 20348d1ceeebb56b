"""Study session timer: technique configs, validation and the timer engine."""

from .errors import StudyTimerError, ValidationError, InvalidOperation
from .config import SessionConfig, Technique, validate, editor_defaults
from .timer import (
    StudyTimerEngine,
    TimerState,
    TimerView,
    TickDriver,
    CompletionSummary,
    format_clock,
    session_label,
)
from .settings import Settings, load_settings, save_settings

__version__ = "0.1.0"

__all__ = [
    "StudyTimerError",
    "ValidationError",
    "InvalidOperation",
    "SessionConfig",
    "Technique",
    "validate",
    "editor_defaults",
    "StudyTimerEngine",
    "TimerState",
    "TimerView",
    "TickDriver",
    "CompletionSummary",
    "format_clock",
    "session_label",
    "Settings",
    "load_settings",
    "save_settings",
]
