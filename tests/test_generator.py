# tests/test_generator.py
import random

import pytest

from scrum_charts.generator import day_label, generate_default_samples
from scrum_charts.rounding import round_half_up


def test_sample_count_and_labels(rng):
    samples = generate_default_samples(50, 10, rng=rng)
    assert len(samples) == 11
    assert samples[0].label == "Start"
    assert [s.label for s in samples[1:]] == [f"Day {i}" for i in range(1, 11)]


def test_planned_is_linear(rng):
    samples = generate_default_samples(50, 10, rng=rng)
    assert [s.planned_score for s in samples] == [5 * i for i in range(11)]


def test_planned_rounds_halves_up(rng):
    """10 points over 4 days puts 2.5 points on each day."""
    samples = generate_default_samples(10, 4, rng=rng)
    assert [s.planned_score for s in samples] == [0, 3, 5, 8, 10]


def test_made_within_jitter_bounds(rng):
    samples = generate_default_samples(37, 9, rng=rng)
    for i, s in enumerate(samples):
        raw = 37 / 9 * i
        assert round_half_up(raw * 0.8) <= s.made_score <= round_half_up(raw * 1.2)


def test_start_is_zero(rng):
    samples = generate_default_samples(50, 10, rng=rng)
    assert samples[0].planned_score == 0
    assert samples[0].made_score == 0


def test_seeded_rng_is_repeatable():
    first = generate_default_samples(50, 10, rng=random.Random(7))
    second = generate_default_samples(50, 10, rng=random.Random(7))
    assert first == second


def test_zero_days_rejected():
    with pytest.raises(ValueError):
        generate_default_samples(50, 0)


def test_day_label():
    assert day_label(0) == "Start"
    assert day_label(3) == "Day 3"
