from __future__ import annotations

from math import isclose

from backend.core.aggregate import aggregate, deflate


def test_total_interest_is_growth_above_deposits():
    totals = aggregate(final_balance=1500.0, total_deposits=1200.0, years=3, inflation_rate_percent=0.0)

    assert totals.total_interest == 300.0
    assert totals.final_balance == 1500.0
    assert totals.total_deposits == 1200.0


def test_zero_inflation_leaves_real_balance_unchanged():
    totals = aggregate(final_balance=1234.56, total_deposits=1000.0, years=25, inflation_rate_percent=0.0)
    assert totals.real_balance == totals.final_balance


def test_inflation_deflates_over_the_whole_horizon():
    totals = aggregate(final_balance=20000.0, total_deposits=15000.0, years=10, inflation_rate_percent=2.0)
    assert isclose(totals.real_balance, 20000.0 / 1.02 ** 10, rel_tol=1e-12)
    assert totals.real_balance < totals.final_balance


def test_deflate_one_year():
    assert isclose(deflate(110.0, 10.0, 1), 100.0, rel_tol=1e-12)
