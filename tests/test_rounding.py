# tests/test_rounding.py
from scrum_charts.rounding import round_half_up


def test_halves_round_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(12.5) == 13
    assert round_half_up(0.5) == 1


def test_one_decimal():
    assert round_half_up(4.8, 1) == 4.8
    assert round_half_up(0.41666, 1) == 0.4
    assert round_half_up(1.25, 1) == 1.3


def test_negative_halves_round_toward_positive():
    assert round_half_up(-2.5) == -2
