"""Sprint session state and the explicit updates applied to it."""
import logging
import random
from dataclasses import replace
from typing import Optional

from scrum_charts.charts import build_chart_series
from scrum_charts.config import (
    DEFAULT_SPRINT_DAYS, DEFAULT_TOTAL_SCOPE, MIN_SPRINT_DAYS, make_config,
)
from scrum_charts.dashboard import evaluate_progress
from scrum_charts.generator import generate_default_samples
from scrum_charts.models import (
    ChartMode, ChartPoint, DaySample, ProgressEvaluation, SprintState,
)

logger = logging.getLogger(__name__)


def new_state(
    total_scope: float = DEFAULT_TOTAL_SCOPE,
    sprint_days: int = DEFAULT_SPRINT_DAYS,
    mode: ChartMode = ChartMode.BURNDOWN,
    rng: Optional[random.Random] = None,
) -> SprintState:
    config = make_config(total_scope, sprint_days)
    samples = generate_default_samples(config.total_scope, config.sprint_days, rng=rng)
    return SprintState(config=config, samples=samples, mode=ChartMode(mode))


def update_config(
    state: SprintState,
    total_scope: Optional[float] = None,
    sprint_days: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> SprintState:
    """Apply new scope/duration and regenerate placeholder samples.

    Any imported or generated data in ``state`` is discarded.
    """
    config = make_config(
        state.config.total_scope if total_scope is None else total_scope,
        state.config.sprint_days if sprint_days is None else sprint_days,
    )
    samples = generate_default_samples(config.total_scope, config.sprint_days, rng=rng)
    logger.info("Config set to %s points over %d days", config.total_scope, config.sprint_days)
    return replace(state, config=config, samples=samples)


def regenerate(state: SprintState, rng: Optional[random.Random] = None) -> SprintState:
    return update_config(state, rng=rng)


def apply_import(state: SprintState, samples: list[DaySample]) -> SprintState:
    """Replace all samples with imported rows.

    Sprint length follows the row count (first row is the start). Scope is
    raised to cover the largest imported score but never lowered.
    """
    if not samples:
        raise ValueError("apply_import needs at least one sample")
    max_score = max(max(s.planned_score, s.made_score) for s in samples)
    config = replace(
        state.config,
        total_scope=max(max_score, state.config.total_scope),
        sprint_days=max(MIN_SPRINT_DAYS, len(samples) - 1),
    )
    logger.info("Imported %d samples, scope now %s", len(samples), config.total_scope)
    return replace(state, config=config, samples=list(samples))


def set_mode(state: SprintState, mode: ChartMode) -> SprintState:
    return replace(state, mode=ChartMode(mode))


def evaluate(state: SprintState) -> ProgressEvaluation:
    return evaluate_progress(state.samples, state.config.total_scope, state.config.sprint_days)


def chart_series(state: SprintState) -> list[ChartPoint]:
    return build_chart_series(
        state.samples, state.config.total_scope, state.config.sprint_days, state.mode,
    )
