from __future__ import annotations

from math import exp, isclose

import pytest

from backend.core.rates import PERIODS_PER_YEAR, effective_step_rate
from backend.domain.compound import CompoundingConvention, ProjectionInputError

# weakest to strongest compounding for the same nominal rate
ORDERED_CONVENTIONS = [
    CompoundingConvention.ANNUAL,
    CompoundingConvention.SEMIANNUAL,
    CompoundingConvention.QUARTERLY,
    CompoundingConvention.MONTHLY,
    CompoundingConvention.WEEKLY,
    CompoundingConvention.DAILY,
    CompoundingConvention.CONTINUOUS,
]


def test_every_discrete_convention_has_a_period_count():
    discrete = set(CompoundingConvention) - {CompoundingConvention.CONTINUOUS}
    assert set(PERIODS_PER_YEAR) == discrete
    assert PERIODS_PER_YEAR[CompoundingConvention.DAILY] == 365
    assert PERIODS_PER_YEAR[CompoundingConvention.WEEKLY] == 52
    assert PERIODS_PER_YEAR[CompoundingConvention.SEMIANNUAL] == 2


def test_annual_rate_with_annual_steps_is_the_nominal_rate():
    assert isclose(effective_step_rate(5, CompoundingConvention.ANNUAL, 1), 0.05, rel_tol=1e-12)


def test_matching_cadence_gives_simple_periodic_rate():
    """Monthly compounding with monthly deposits applies r/12 per step."""
    assert isclose(effective_step_rate(12, CompoundingConvention.MONTHLY, 12), 0.01, rel_tol=1e-12)
    assert isclose(effective_step_rate(7.3, CompoundingConvention.DAILY, 365), 0.073 / 365, rel_tol=1e-9)


def test_annual_compounding_spread_over_monthly_steps():
    step_rate = effective_step_rate(6, CompoundingConvention.ANNUAL, 12)
    assert isclose((1 + step_rate) ** 12, 1.06, rel_tol=1e-12)


def test_daily_compounding_spread_over_monthly_steps():
    step_rate = effective_step_rate(4, CompoundingConvention.DAILY, 12)
    assert isclose((1 + step_rate) ** 12, (1 + 0.04 / 365) ** 365, rel_tol=1e-12)


def test_continuous_compounding():
    assert isclose(effective_step_rate(5, CompoundingConvention.CONTINUOUS, 1), exp(0.05) - 1, rel_tol=1e-12)
    step_rate = effective_step_rate(5, CompoundingConvention.CONTINUOUS, 52)
    assert isclose((1 + step_rate) ** 52, exp(0.05), rel_tol=1e-12)


@pytest.mark.parametrize("convention", list(CompoundingConvention))
def test_zero_rate_gives_zero_step_rate(convention):
    assert effective_step_rate(0, convention, 12) == 0.0


@pytest.mark.parametrize("steps_per_year", [1, 12, 52, 365])
def test_step_rate_increases_toward_continuous(steps_per_year):
    rates = [effective_step_rate(8, c, steps_per_year) for c in ORDERED_CONVENTIONS]
    for weaker, stronger in zip(rates, rates[1:]):
        assert stronger > weaker


@pytest.mark.parametrize("steps_per_year", [0, -12])
def test_non_positive_steps_fail_fast(steps_per_year):
    with pytest.raises(ProjectionInputError):
        effective_step_rate(5, CompoundingConvention.MONTHLY, steps_per_year)
