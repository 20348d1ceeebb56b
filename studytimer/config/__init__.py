"""Config package."""

from .techniques import (
    Technique,
    TechniqueProfile,
    TECHNIQUES,
    QUICK_STUDY_DURATIONS,
    editor_defaults,
)
from .subjects import (
    Subject,
    SUBJECTS,
    DEFAULT_SUBJECT,
    subjects_by_category,
    find_subject,
)
from .validator import SessionConfig, validate

__all__ = [
    "Technique",
    "TechniqueProfile",
    "TECHNIQUES",
    "QUICK_STUDY_DURATIONS",
    "editor_defaults",
    "Subject",
    "SUBJECTS",
    "DEFAULT_SUBJECT",
    "subjects_by_category",
    "find_subject",
    "SessionConfig",
    "validate",
]
