"""Sprint progress evaluation: velocity, efficiency and health status."""
from scrum_charts.models import DaySample, ProgressEvaluation, SprintStatus
from scrum_charts.rounding import round_half_up

ON_TRACK_THRESHOLD = 90
AT_RISK_THRESHOLD = 70

STATUS_MESSAGES = {
    SprintStatus.ON_TRACK: "Sprint is progressing well! Team is meeting or exceeding expectations.",
    SprintStatus.AT_RISK: "Sprint is slightly behind schedule but recoverable with focused effort.",
    SprintStatus.BEHIND: "Sprint is significantly behind schedule. Immediate action required.",
}

STATUS_RECOMMENDATIONS = {
    SprintStatus.ON_TRACK: [
        "Continue current pace",
        "Consider taking on additional scope if capacity allows",
        "Share successful practices with other teams",
    ],
    SprintStatus.AT_RISK: [
        "Identify and remove blockers",
        "Consider pair programming for complex tasks",
        "Daily check-ins on progress",
        "Reassess remaining scope priorities",
    ],
    SprintStatus.BEHIND: [
        "Emergency team meeting to identify issues",
        "Consider scope reduction",
        "Escalate blockers to management",
        "Implement daily standups if not already doing so",
        "Review and adjust task estimates",
    ],
}

INSUFFICIENT_DATA_MESSAGE = "Insufficient data for evaluation"
INSUFFICIENT_DATA_RECOMMENDATIONS = ["Add more daily progress data"]


def get_status(efficiency: float) -> SprintStatus:
    if efficiency >= ON_TRACK_THRESHOLD:
        return SprintStatus.ON_TRACK
    elif efficiency >= AT_RISK_THRESHOLD:
        return SprintStatus.AT_RISK
    return SprintStatus.BEHIND


def get_status_label(status: SprintStatus) -> str:
    return SprintStatus(status).value.upper()


def get_status_color(status: SprintStatus) -> str:
    status = SprintStatus(status)
    if status == SprintStatus.ON_TRACK:
        return "green"
    elif status == SprintStatus.AT_RISK:
        return "yellow"
    return "red"


def insufficient_data() -> ProgressEvaluation:
    return ProgressEvaluation(
        status=SprintStatus.ON_TRACK,
        message=INSUFFICIENT_DATA_MESSAGE,
        recommendations=list(INSUFFICIENT_DATA_RECOMMENDATIONS),
        velocity=0.0,
        projected_completion=0.0,
        efficiency=0,
    )


def evaluate_progress(
    samples: list[DaySample],
    total_scope: float,
    sprint_days: int,
) -> ProgressEvaluation:
    """Evaluate the sprint at its latest sample.

    Efficiency compares made points with the linear ideal at the same day.
    The status uses the unrounded efficiency; the returned metrics are
    rounded for display. ``projected_completion`` is the number of extra
    days needed at the current velocity (negative once scope is exceeded),
    or None when nothing has been completed yet.
    """
    if len(samples) < 2 or sprint_days < 1:
        return insufficient_data()

    current_day = len(samples) - 1
    current_progress = samples[-1].made_score
    ideal_progress = (total_scope / sprint_days) * current_day
    if ideal_progress <= 0:
        return insufficient_data()

    velocity = current_progress / current_day
    remaining = total_scope - current_progress
    projected = remaining / velocity if velocity > 0 else None
    efficiency = current_progress * 100 / ideal_progress

    status = get_status(efficiency)
    return ProgressEvaluation(
        status=status,
        message=STATUS_MESSAGES[status],
        recommendations=list(STATUS_RECOMMENDATIONS[status]),
        velocity=round_half_up(velocity, 1),
        projected_completion=round_half_up(projected, 1) if projected is not None else None,
        efficiency=int(round_half_up(efficiency)),
    )
