"""Subject catalogue offered by the config editor.

The engine treats ``subject`` as an opaque string; this list only
exists so editors have something sensible to show.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    value: str
    label: str
    category: str


SUBJECTS: tuple[Subject, ...] = (
    Subject("matematik", "Mathematics", "TYT"),
    Subject("geometri", "Geometry", "TYT"),
    Subject("turkce", "Turkish", "TYT"),
    Subject("tarih", "History", "TYT"),
    Subject("cografya", "Geography", "TYT"),
    Subject("felsefe", "Philosophy", "TYT"),
    Subject("fizik", "Physics", "TYT"),
    Subject("kimya", "Chemistry", "TYT"),
    Subject("biyoloji", "Biology", "TYT"),
    Subject("matematik_ayt", "Mathematics AYT", "AYT"),
    Subject("fizik_ayt", "Physics AYT", "AYT"),
    Subject("kimya_ayt", "Chemistry AYT", "AYT"),
    Subject("biyoloji_ayt", "Biology AYT", "AYT"),
    Subject("edebiyat", "Literature", "AYT"),
    Subject("tarih_ayt", "History AYT", "AYT"),
    Subject("cografya_ayt", "Geography AYT", "AYT"),
    Subject("ingilizce", "English", "YDT"),
    Subject("almanca", "German", "YDT"),
    Subject("fransizca", "French", "YDT"),
    Subject("genel_tekrar", "General Review", "Other"),
    Subject("deneme_sinavi", "Practice Exam", "Other"),
    Subject("diger", "Other", "Other"),
)

DEFAULT_SUBJECT = "matematik"


def subjects_by_category() -> dict[str, list[Subject]]:
    """Group ``SUBJECTS`` by category, preserving catalogue order."""
    grouped: dict[str, list[Subject]] = {}
    for subject in SUBJECTS:
        grouped.setdefault(subject.category, []).append(subject)
    return grouped


def find_subject(value: str) -> Subject | None:
    for subject in SUBJECTS:
        if subject.value == value:
            return subject
    return None
