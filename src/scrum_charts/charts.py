"""Burndown and burnup series for the sprint chart."""
from scrum_charts.models import ChartMode, ChartPoint, DaySample

CHART_GUIDANCE = {
    ChartMode.BURNDOWN: {
        "title": "Burndown Chart",
        "subtitle": "Shows remaining work decreasing over time",
        "summary": "Burndown charts show the amount of work remaining over time. "
                   "The line should trend downward as tasks are completed.",
        "signals": [
            ("Actual line above planned", "Team is behind schedule"),
            ("Actual line below planned", "Team is ahead of schedule"),
            ("Flat actual line", "No progress being made, investigate blockers"),
            ("Steep drops", "Significant work completed quickly"),
        ],
        "goal": "The actual line should reach zero by the end of the sprint.",
    },
    ChartMode.BURNUP: {
        "title": "Burnup Chart",
        "subtitle": "Shows completed work increasing over time",
        "summary": "Burnup charts show the amount of work completed over time. "
                   "The line should trend upward as work is finished.",
        "signals": [
            ("Actual line below planned", "Team is behind schedule"),
            ("Actual line above planned", "Team is ahead of schedule"),
            ("Gap to goal line", "Shows remaining work to complete"),
            ("Goal line movement", "Indicates scope changes during sprint"),
        ],
        "goal": "The actual line should reach the sprint goal line by the end.",
    },
}


def ideal_cumulative(total_scope: float, sprint_days: int, index: int) -> float:
    return (total_scope / sprint_days) * index


def build_chart_series(
    samples: list[DaySample],
    total_scope: float,
    sprint_days: int,
    mode: ChartMode,
) -> list[ChartPoint]:
    """One chart point per sample, in sample order.

    Burndown plots work remaining against a goal of 0; burnup plots work
    completed against a goal line at ``total_scope``.
    """
    if sprint_days < 1:
        raise ValueError(f"sprint_days must be at least 1, got {sprint_days}")
    mode = ChartMode(mode)
    points = []
    for index, sample in enumerate(samples):
        ideal = ideal_cumulative(total_scope, sprint_days, index)
        if mode == ChartMode.BURNDOWN:
            points.append(ChartPoint(
                label=sample.label,
                actual=total_scope - sample.made_score,
                planned=total_scope - sample.planned_score,
                ideal=total_scope - ideal,
                goal=0,
            ))
        else:
            points.append(ChartPoint(
                label=sample.label,
                actual=sample.made_score,
                planned=sample.planned_score,
                ideal=ideal,
                goal=total_scope,
            ))
    return points
