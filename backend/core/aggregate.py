"""Summary totals derived from a finished projection."""

from __future__ import annotations

from backend.domain.compound import ProjectionTotals


def deflate(amount: float, inflation_rate_percent: float, years: int) -> float:
    """Express ``amount`` in today's money after ``years`` of compounding inflation."""
    if inflation_rate_percent <= 0:
        return amount
    return amount / (1.0 + inflation_rate_percent / 100.0) ** years


def aggregate(
    final_balance: float,
    total_deposits: float,
    years: int,
    inflation_rate_percent: float,
) -> ProjectionTotals:
    return ProjectionTotals(
        final_balance=final_balance,
        total_deposits=total_deposits,
        total_interest=final_balance - total_deposits,
        real_balance=deflate(final_balance, inflation_rate_percent, years),
    )
