"""Placeholder sprint data for when nothing has been imported yet."""
import random
from typing import Optional

from scrum_charts.models import DaySample
from scrum_charts.rounding import round_half_up

JITTER_LOW = 0.8
JITTER_SPAN = 0.4


def day_label(index: int) -> str:
    return "Start" if index == 0 else f"Day {index}"


def generate_default_samples(
    total_scope: float,
    sprint_days: int,
    rng: Optional[random.Random] = None,
) -> list[DaySample]:
    """Build ``sprint_days + 1`` samples on the linear plan.

    Made scores get a uniform jitter in [0.8, 1.2) per day, so the result is
    only a visual placeholder. Pass a seeded ``rng`` for repeatable output.
    """
    if sprint_days < 1:
        raise ValueError(f"sprint_days must be at least 1, got {sprint_days}")
    rng = rng or random
    planned_daily = total_scope / sprint_days
    samples = []
    for i in range(sprint_days + 1):
        jitter = JITTER_LOW + rng.random() * JITTER_SPAN
        samples.append(DaySample(
            label=day_label(i),
            planned_score=int(round_half_up(planned_daily * i)),
            made_score=int(round_half_up(planned_daily * i * jitter)),
        ))
    return samples
