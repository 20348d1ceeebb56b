"""Formatting helpers for display surfaces."""

from __future__ import annotations

from .engine import TimerView


def format_clock(seconds: int) -> str:
    """``MM:SS``; minutes are not wrapped at 60."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def session_label(view: TimerView) -> str:
    """Header line for the timer card, e.g. ``"Pomodoro - 2/4"``."""
    if view.mode == "paused":
        return "Paused"
    progress = f"{view.segment_index}/{view.target_sessions}"
    if view.mode == "break":
        return f"Break {progress}"
    if view.technique is None:
        return progress
    return f"{view.technique.value} - {progress}"
