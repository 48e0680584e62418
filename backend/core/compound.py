"""Compound interest schedule: rate normalization, projection and totals."""

from __future__ import annotations

import math

from backend.core.aggregate import aggregate
from backend.core.rates import effective_step_rate
from backend.core.schedule import project
from backend.domain.compound import (
    CalculationParameters,
    ProjectionInputError,
    ProjectionResult,
)
from backend.log import get_logger

logger = get_logger(__name__)


def compute_schedule(params: CalculationParameters) -> ProjectionResult:
    """Compute the year-by-year growth schedule and summary totals for ``params``."""
    steps_per_year = params.contribution_steps_per_year
    step_rate = effective_step_rate(
        params.annual_rate_percent,
        params.compounding,
        steps_per_year,
    )

    state, rows = project(
        principal=params.principal,
        step_contribution=params.contribution,
        step_rate=step_rate,
        total_steps=params.total_steps,
        steps_per_year=steps_per_year,
        contribution_at_start=params.contribution_at_period_start,
    )

    totals = aggregate(
        final_balance=state.balance,
        total_deposits=state.total_deposits,
        years=params.years,
        inflation_rate_percent=params.inflation_rate_percent,
    )

    if not all(math.isfinite(v) for v in totals.model_dump().values()):
        raise ProjectionInputError("projection overflowed; reduce the amounts, rate or horizon")

    logger.debug(
        "projection.computed",
        years=params.years,
        steps_per_year=steps_per_year,
        compounding=params.compounding.value,
        step_rate=step_rate,
        final_balance=totals.final_balance,
    )

    return ProjectionResult(**totals.model_dump(), schedule=rows)
