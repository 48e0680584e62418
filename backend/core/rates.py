"""Conversion of a nominal annual rate into a per-contribution-step growth rate."""

from __future__ import annotations

import math
from typing import Dict

from backend.domain.compound import CompoundingConvention, ProjectionInputError

# compounding periods per year; CONTINUOUS is handled separately
PERIODS_PER_YEAR: Dict[CompoundingConvention, int] = {
    CompoundingConvention.DAILY: 365,
    CompoundingConvention.WEEKLY: 52,
    CompoundingConvention.MONTHLY: 12,
    CompoundingConvention.QUARTERLY: 4,
    CompoundingConvention.SEMIANNUAL: 2,
    CompoundingConvention.ANNUAL: 1,
}


def effective_step_rate(
    nominal_annual_rate_percent: float,
    convention: CompoundingConvention,
    steps_per_year: int,
) -> float:
    """
    Return the growth rate to apply once per contribution step.

    Compounding that rate ``steps_per_year`` times reproduces one year of the
    nominal rate under ``convention``, so interest cadence and deposit cadence
    can differ (e.g. daily compounding with monthly deposits):

      continuous: exp(r / steps_per_year) - 1
      otherwise:  (1 + r/m) ** (m / steps_per_year) - 1
    """
    if steps_per_year < 1:
        raise ProjectionInputError(f"steps_per_year must be positive, got {steps_per_year}")

    r = nominal_annual_rate_percent / 100.0
    if convention is CompoundingConvention.CONTINUOUS:
        return math.exp(r / steps_per_year) - 1.0

    m = PERIODS_PER_YEAR[convention]
    return (1.0 + r / m) ** (m / steps_per_year) - 1.0
