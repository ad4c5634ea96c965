"""Sprint configuration defaults and input bounds."""
from scrum_charts.models import SprintConfig

DEFAULT_TOTAL_SCOPE = 50
DEFAULT_SPRINT_DAYS = 10

MIN_TOTAL_SCOPE = 1
MIN_SPRINT_DAYS = 1
MAX_SPRINT_DAYS = 30

DEFAULT_EXPORT_FILENAME = "sprint-data.csv"

LOG_LEVEL = "WARNING"


def clamp_total_scope(total_scope: float) -> float:
    return max(MIN_TOTAL_SCOPE, total_scope)


def clamp_sprint_days(sprint_days: int) -> int:
    return min(MAX_SPRINT_DAYS, max(MIN_SPRINT_DAYS, int(sprint_days)))


def make_config(
    total_scope: float = DEFAULT_TOTAL_SCOPE,
    sprint_days: int = DEFAULT_SPRINT_DAYS,
) -> SprintConfig:
    """Build a SprintConfig with both values pulled into their allowed ranges."""
    return SprintConfig(
        total_scope=clamp_total_scope(total_scope),
        sprint_days=clamp_sprint_days(sprint_days),
    )
