"""Study techniques and their default-config table.

Behavior differences between techniques (breaks or not, whether the
target session count is honored) live in ``TECHNIQUES`` instead of
being checked by name throughout the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Technique(Enum):
    POMODORO = "Pomodoro"
    TIMEBLOCK = "Timeblock"
    STOPWATCH = "Stopwatch"
    FREEFORM = "Freeform"

    @classmethod
    def parse(cls, value: "Technique | str") -> "Technique":
        """Accept a member, its value, or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if wanted in (member.value.lower(), member.name.lower()):
                    return member
        raise ValueError(f"unknown technique: {value!r}")

    @property
    def profile(self) -> "TechniqueProfile":
        return TECHNIQUES[self]


@dataclass(frozen=True)
class TechniqueProfile:
    """Defaults (minutes / counts) and behavior flags for one technique."""

    study_duration: int
    break_duration: int
    target_sessions: int
    has_breaks: bool
    break_required: bool
    honors_target_sessions: bool
    description: str = ""


TECHNIQUES: dict[Technique, TechniqueProfile] = {
    Technique.POMODORO: TechniqueProfile(
        study_duration=25,
        break_duration=5,
        target_sessions=4,
        has_breaks=True,
        break_required=True,
        honors_target_sessions=True,
        description="25 minutes of study followed by a 5 minute break",
    ),
    Technique.TIMEBLOCK: TechniqueProfile(
        study_duration=45,
        break_duration=15,
        target_sessions=3,
        has_breaks=True,
        break_required=True,
        honors_target_sessions=True,
        description="Uninterrupted blocks for deep work",
    ),
    Technique.STOPWATCH: TechniqueProfile(
        study_duration=60,
        break_duration=10,
        target_sessions=2,
        has_breaks=True,
        break_required=False,
        honors_target_sessions=True,
        description="Track time at your own rhythm",
    ),
    Technique.FREEFORM: TechniqueProfile(
        study_duration=30,
        break_duration=5,
        target_sessions=1,
        has_breaks=False,
        break_required=False,
        honors_target_sessions=False,
        description="A single free session, recorded only",
    ),
}

# Quick-pick study lengths offered by the editor (minutes).
QUICK_STUDY_DURATIONS = (15, 20, 25, 30, 45, 60, 90)


def editor_defaults(technique: Technique | str) -> dict:
    """Pre-populated editor values for *technique*.

    These fill an editor form; they never override values the user
    has already entered.
    """
    technique = Technique.parse(technique)
    profile = technique.profile
    return {
        "technique": technique,
        "study_duration": profile.study_duration,
        "break_duration": profile.break_duration,
        "target_sessions": profile.target_sessions,
    }
