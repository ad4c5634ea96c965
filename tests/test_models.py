"""Tests for data model classes."""
from scrum_charts.models import (
    ChartMode, ChartPoint, DaySample, ProgressEvaluation, SprintConfig, SprintState,
    SprintStatus,
)


def test_day_sample_defaults():
    s = DaySample(label="Start")
    assert s.planned_score == 0
    assert s.made_score == 0


def test_chart_point_goal_optional():
    p = ChartPoint(label="Day 1", actual=45, planned=45, ideal=45)
    assert p.goal is None


def test_status_values():
    assert SprintStatus.ON_TRACK.value == "on-track"
    assert SprintStatus.AT_RISK.value == "at-risk"
    assert SprintStatus("behind") is SprintStatus.BEHIND


def test_chart_mode_from_string():
    assert ChartMode("burnup") is ChartMode.BURNUP
    assert ChartMode.BURNDOWN == "burndown"


def test_progress_evaluation_defaults():
    e = ProgressEvaluation(status=SprintStatus.ON_TRACK, message="ok")
    assert e.recommendations == []
    assert e.velocity == 0.0
    assert e.efficiency == 0


def test_sprint_state_defaults():
    state = SprintState(config=SprintConfig(total_scope=50, sprint_days=10))
    assert state.samples == []
    assert state.mode is ChartMode.BURNDOWN
