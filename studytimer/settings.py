"""User preferences with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/StudyTimer/settings.json
or ``$STUDYTIMER_HOME/settings.json`` when that variable is set.

Usage::

    settings = load_settings()
    settings.default_technique = "Timeblock"
    save_settings(settings)
    config = validate(settings.editor_candidate())
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .config.subjects import DEFAULT_SUBJECT
from .config.techniques import Technique, editor_defaults
from .timer.driver import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "StudyTimer"


def settings_path() -> Path:
    home = os.environ.get("STUDYTIMER_HOME")
    base = Path(home) if home else APP_SUPPORT_DIR
    return base / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── editor defaults ───────────────────────────────────────────────
    default_technique: str = Technique.POMODORO.value
    default_subject: str = DEFAULT_SUBJECT
    # remembered overrides (minutes / counts); None → technique default
    study_duration: int | None = None
    break_duration: int | None = None
    target_sessions: int | None = None
    long_break_interval: int | None = None
    long_break_duration: int | None = None

    # ── tick source ───────────────────────────────────────────────────
    tick_interval_ms: int = TICK_INTERVAL_MS

    def editor_candidate(self) -> dict:
        """Values to pre-populate the editor, ready for ``validate``.

        Technique defaults fill whatever the user has not overridden.
        """
        candidate = editor_defaults(self.default_technique)
        candidate["subject"] = self.default_subject
        for key in (
            "study_duration",
            "break_duration",
            "target_sessions",
            "long_break_interval",
            "long_break_duration",
        ):
            value = getattr(self, key)
            if value is not None:
                candidate[key] = value
        return candidate


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or settings_path()
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings at %s: %s", path, exc)
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
