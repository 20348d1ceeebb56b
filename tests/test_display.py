"""Tests for the display projection and formatting helpers."""

import pytest

from studytimer.config import Technique
from studytimer.timer.display import format_clock, session_label
from studytimer.timer.engine import TimerState, TimerView

from helpers import run_ticks


class TestFormatClock:

    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00"),
        (59, "00:59"),
        (60, "01:00"),
        (1500, "25:00"),
        (10800, "180:00"),
        (-3, "00:00"),
    ])
    def test_format(self, seconds, expected):
        assert format_clock(seconds) == expected


class TestTimerView:

    def test_progress_percent(self):
        view = TimerView(remaining_seconds=75, segment_total_seconds=300,
                         state=TimerState.RUNNING)
        assert view.progress_percent == pytest.approx(75.0)

    def test_progress_zero_without_segment(self):
        view = TimerView(remaining_seconds=0, segment_total_seconds=0,
                         state=TimerState.IDLE)
        assert view.progress_percent == 0.0

    @pytest.mark.parametrize("state, mode", [
        (TimerState.IDLE, "study"),
        (TimerState.RUNNING, "study"),
        (TimerState.BREAK, "break"),
        (TimerState.PAUSED, "paused"),
        (TimerState.COMPLETED, "study"),
    ])
    def test_mode(self, state, mode):
        assert TimerView(0, 0, state).mode == mode

    def test_engine_snapshot(self, engine, clock):
        engine.start()
        run_ticks(engine, clock, 1500 + 30)
        view = engine.snapshot()
        assert view.state == TimerState.BREAK
        assert view.remaining_seconds == 270
        assert view.segment_total_seconds == 300
        assert view.segment_index == 1
        assert view.target_sessions == 2
        assert view.completed_segments == 1
        assert view.technique == Technique.POMODORO
        assert view.is_running

    def test_idle_snapshot(self, engine):
        view = engine.snapshot()
        assert view.state == TimerState.IDLE
        assert view.remaining_seconds == 0
        assert not view.is_running


class TestSessionLabel:

    def test_study_label(self, engine):
        engine.start()
        assert session_label(engine.snapshot()) == "Pomodoro - 1/2"

    def test_break_label(self, engine, clock):
        engine.start()
        run_ticks(engine, clock, 1500)
        assert session_label(engine.snapshot()) == "Break 1/2"

    def test_paused_label(self, engine):
        engine.start()
        engine.pause()
        assert session_label(engine.snapshot()) == "Paused"
