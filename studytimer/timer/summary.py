"""Completion summary handed to the persistence sink."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from ..config.techniques import Technique
from ..config.validator import SessionConfig


@dataclass(frozen=True)
class CompletionSummary:
    technique: Technique
    subject: str
    total_study_time: int  # minutes
    completed_sessions: int
    started_at: datetime
    ended_at: datetime

    @classmethod
    def for_run(
        cls, config: SessionConfig, started_at: datetime, ended_at: datetime
    ) -> "CompletionSummary":
        sessions = config.effective_target_sessions
        return cls(
            technique=config.technique,
            subject=config.subject,
            total_study_time=config.study_duration * sessions,
            completed_sessions=sessions,
            started_at=started_at,
            ended_at=ended_at,
        )

    @property
    def duration(self) -> timedelta:
        """Wall-clock time from start to completion, pauses included."""
        return self.ended_at - self.started_at

    def as_dict(self) -> dict[str, Any]:
        """Sink payload: camelCase keys, ISO-8601 timestamps."""
        return {
            "technique": self.technique.value,
            "subject": self.subject,
            "totalStudyTime": self.total_study_time,
            "completedSessions": self.completed_sessions,
            "startedAt": self.started_at.isoformat(),
            "endedAt": self.ended_at.isoformat(),
        }
