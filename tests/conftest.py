import random

import pytest
from rich.console import Console

from scrum_charts.models import DaySample


@pytest.fixture
def rng():
    """Seeded random source so placeholder data is repeatable."""
    return random.Random(42)


@pytest.fixture
def make_samples():
    """Build a linear 0..N sample run whose final made score is overridden."""
    def _make(final_made, count=11, planned_daily=5):
        samples = [
            DaySample(label="Start" if i == 0 else f"Day {i}",
                      planned_score=planned_daily * i, made_score=planned_daily * i)
            for i in range(count)
        ]
        if samples:
            samples[-1].made_score = final_made
        return samples
    return _make


@pytest.fixture
def recorded_console(monkeypatch):
    console = Console(record=True, width=120)
    monkeypatch.setattr("scrum_charts.app.console", console)
    return console
