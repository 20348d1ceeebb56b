"""Shared test helpers for the study timer."""

from datetime import datetime, timedelta

from studytimer.timer.engine import StudyTimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Monotonic + wall clock pair advanced by hand."""

    def __init__(self, start: float = 1000.0,
                 wall_start: datetime = datetime(2026, 3, 2, 9, 0, 0)):
        self.value = start
        self._start = start
        self._wall_start = wall_start

    def monotonic(self) -> float:
        return self.value

    def now(self) -> datetime:
        return self._wall_start + timedelta(seconds=self.value - self._start)

    def advance(self, seconds: float) -> None:
        self.value += seconds


def run_ticks(engine: StudyTimerEngine, clock: FakeClock, count: int) -> None:
    """Deliver *count* on-time ticks, one simulated second apart."""
    for _ in range(count):
        clock.advance(1)
        engine.tick()
