"""Error types raised by the study timer.

Every error is raised synchronously at the call that triggered it.
Nothing is retried or deferred inside the package.
"""

from __future__ import annotations


class StudyTimerError(Exception):
    """Base class for all study-timer errors."""


class ValidationError(StudyTimerError, ValueError):
    """A proposed session config has a missing or out-of-range field."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        self.message = message or f"invalid value for {field!r}"
        super().__init__(self.message)


class InvalidOperation(StudyTimerError, RuntimeError):
    """A command was issued in a state that does not allow it.

    These are host programming errors (e.g. ``reconfigure`` while a
    run is in progress), not user-facing failures.
    """

    def __init__(self, attempted: str, current_state: object) -> None:
        self.attempted = attempted
        self.current_state = current_state
        state_name = getattr(current_state, "value", current_state)
        super().__init__(f"cannot {attempted}() while {state_name}")
