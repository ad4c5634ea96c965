"""Data classes for the sprint tracking domain model."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ChartMode(str, Enum):
    BURNDOWN = "burndown"
    BURNUP = "burnup"


class SprintStatus(str, Enum):
    ON_TRACK = "on-track"
    AT_RISK = "at-risk"
    BEHIND = "behind"


@dataclass
class DaySample:
    label: str
    planned_score: float = 0
    made_score: float = 0


@dataclass
class SprintConfig:
    total_scope: float
    sprint_days: int


@dataclass
class ChartPoint:
    label: str
    actual: float
    planned: float
    ideal: float
    goal: Optional[float] = None


@dataclass
class ProgressEvaluation:
    status: SprintStatus
    message: str
    recommendations: list[str] = field(default_factory=list)
    velocity: float = 0.0
    projected_completion: Optional[float] = 0.0  # None when velocity is not positive
    efficiency: int = 0


@dataclass
class SprintState:
    config: SprintConfig
    samples: list[DaySample] = field(default_factory=list)
    mode: ChartMode = ChartMode.BURNDOWN
