"""Shared pytest fixtures for study timer tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from studytimer.config import validate
from studytimer.timer.engine import StudyTimerEngine

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pomodoro_config():
    return validate({
        "technique": "Pomodoro",
        "subject": "matematik",
        "studyDuration": 25,
        "breakDuration": 5,
        "targetSessions": 2,
    })


@pytest.fixture
def engine(qapp, clock, pomodoro_config):
    """Pomodoro 2 x 25 min / 5 min break, driven by the fake clock."""
    return StudyTimerEngine(
        pomodoro_config, clock=clock.monotonic, wall_clock=clock.now,
    )


@pytest.fixture
def make_engine(qapp, clock):
    """Factory: build an engine from a raw editor mapping."""
    def _make(**candidate):
        return StudyTimerEngine(
            validate(candidate), clock=clock.monotonic, wall_clock=clock.now,
        )
    return _make
