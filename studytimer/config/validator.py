"""Session config validation.

``validate`` turns an editor's partial mapping into an immutable
``SessionConfig`` or raises ``ValidationError`` naming the first bad
field.  It is pure: no I/O, no globals, same input → same output.

Ranges
------
study_duration        5 – 180 minutes  (required)
target_sessions       1 – 10           (required)
break_duration        1 – 30 minutes   (required when the technique needs it)
long_break_interval   2 – 8 segments   (optional, paired)
long_break_duration   10 – 60 minutes  (optional, paired)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import ValidationError
from .techniques import Technique


# ── ranges ────────────────────────────────────────────────────────────────

STUDY_RANGE = (5, 180)
BREAK_RANGE = (1, 30)
TARGET_SESSIONS_RANGE = (1, 10)
LONG_BREAK_INTERVAL_RANGE = (2, 8)
LONG_BREAK_DURATION_RANGE = (10, 60)

# Editor payloads use camelCase keys.
_ALIASES = {
    "studyDuration": "study_duration",
    "breakDuration": "break_duration",
    "targetSessions": "target_sessions",
    "longBreakInterval": "long_break_interval",
    "longBreakDuration": "long_break_duration",
}


# ── config ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SessionConfig:
    """A validated session configuration.  Durations are in minutes."""

    technique: Technique
    subject: str
    study_duration: int
    target_sessions: int
    break_duration: int | None = None
    long_break_interval: int | None = None
    long_break_duration: int | None = None

    @property
    def has_breaks(self) -> bool:
        return self.technique.profile.has_breaks

    @property
    def has_long_breaks(self) -> bool:
        return (
            self.has_breaks
            and self.long_break_interval is not None
            and self.long_break_duration is not None
        )

    @property
    def effective_target_sessions(self) -> int:
        """Study segments in a run; single-segment techniques ignore the target."""
        if not self.technique.profile.honors_target_sessions:
            return 1
        return self.target_sessions

    @property
    def study_seconds(self) -> int:
        return self.study_duration * 60

    def break_seconds_after(self, segment_index: int) -> int:
        """Length of the Break that follows study segment *segment_index*."""
        if self.has_long_breaks and segment_index % self.long_break_interval == 0:
            return self.long_break_duration * 60
        return (self.break_duration or 0) * 60

    def as_dict(self) -> dict[str, Any]:
        """The editor's camelCase payload; unset optional fields are omitted."""
        data: dict[str, Any] = {
            "technique": self.technique.value,
            "subject": self.subject,
            "studyDuration": self.study_duration,
            "targetSessions": self.target_sessions,
        }
        if self.break_duration is not None:
            data["breakDuration"] = self.break_duration
        if self.long_break_interval is not None:
            data["longBreakInterval"] = self.long_break_interval
        if self.long_break_duration is not None:
            data["longBreakDuration"] = self.long_break_duration
        return data


# ── validation ────────────────────────────────────────────────────────────


def _normalize(candidate: Mapping[str, Any]) -> dict[str, Any]:
    """Fold camelCase keys onto snake_case; both forms must agree."""
    values: dict[str, Any] = {}
    for key, value in candidate.items():
        if value is None:
            continue
        field = _ALIASES.get(key, key)
        if field in values and values[field] != value:
            raise ValidationError(field, f"conflicting values given for {field}")
        values[field] = value
    return values


def _check_int(values: dict, field: str, bounds: tuple[int, int]) -> int:
    if field not in values:
        raise ValidationError(field, f"{field} is required")
    value = values[field]
    # bool is an int subclass; a checkbox value is never a duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, f"{field} must be an integer")
    low, high = bounds
    if not low <= value <= high:
        raise ValidationError(field, f"{field} must be between {low} and {high}")
    return value


def validate(candidate: Mapping[str, Any]) -> SessionConfig:
    """Validate *candidate* and return the accepted ``SessionConfig``.

    Raises ``ValidationError`` for the first missing or out-of-range
    field.  Absent optional fields stay unset except a Stopwatch break,
    which falls back to the technique's default.
    """
    values = _normalize(candidate)

    try:
        technique = Technique.parse(values.get("technique", Technique.POMODORO))
    except ValueError as exc:
        raise ValidationError("technique", str(exc)) from exc
    profile = technique.profile

    subject = values.get("subject", "")
    if not isinstance(subject, str):
        raise ValidationError("subject", "subject must be a string")

    study_duration = _check_int(values, "study_duration", STUDY_RANGE)
    target_sessions = _check_int(values, "target_sessions", TARGET_SESSIONS_RANGE)

    break_duration = values.get("break_duration")
    if break_duration is not None:
        # checked even when the technique never takes a break
        break_duration = _check_int(values, "break_duration", BREAK_RANGE)
    elif profile.break_required:
        raise ValidationError("break_duration", "break_duration is required")
    elif profile.has_breaks:
        break_duration = profile.break_duration

    long_break_interval = values.get("long_break_interval")
    long_break_duration = values.get("long_break_duration")
    if long_break_interval is not None or long_break_duration is not None:
        # a half-configured long break would sit inert, so require both
        long_break_interval = _check_int(
            values, "long_break_interval", LONG_BREAK_INTERVAL_RANGE
        )
        long_break_duration = _check_int(
            values, "long_break_duration", LONG_BREAK_DURATION_RANGE
        )

    return SessionConfig(
        technique=technique,
        subject=subject,
        study_duration=study_duration,
        target_sessions=target_sessions,
        break_duration=break_duration,
        long_break_interval=long_break_interval,
        long_break_duration=long_break_duration,
    )
