"""Step-by-step balance projection with yearly rollups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from backend.domain.compound import ProjectionInputError, YearlyRow


@dataclass
class ScheduleState:
    """Running totals carried from one contribution step to the next."""

    balance: float
    previous_year_end: float
    deposits_this_year: float = 0.0
    total_deposits: float = 0.0

    @classmethod
    def opening(cls, principal: float) -> "ScheduleState":
        return cls(
            balance=principal,
            previous_year_end=principal,
            total_deposits=principal,
        )


def advance(
    state: ScheduleState,
    step_contribution: float,
    step_rate: float,
    contribution_at_start: bool,
) -> None:
    """Apply one contribution step: deposit and growth in the configured order."""
    if contribution_at_start:
        state.balance += step_contribution
    state.balance *= 1.0 + step_rate
    if not contribution_at_start:
        state.balance += step_contribution

    state.deposits_this_year += step_contribution
    state.total_deposits += step_contribution


def close_year(state: ScheduleState, year: int) -> YearlyRow:
    """Emit the row for a finished year and reset the per-year accumulators."""
    row = YearlyRow(
        year=year,
        end_balance=state.balance,
        deposits_this_year=state.deposits_this_year,
        interest_this_year=state.balance - state.previous_year_end - state.deposits_this_year,
    )
    state.previous_year_end = state.balance
    state.deposits_this_year = 0.0
    return row


def project(
    principal: float,
    step_contribution: float,
    step_rate: float,
    total_steps: int,
    steps_per_year: int,
    contribution_at_start: bool,
) -> Tuple[ScheduleState, List[YearlyRow]]:
    """
    Run ``total_steps`` contribution steps starting from ``principal``.

    Order of operations (per step):
      1) Deposit BEFORE growth when ``contribution_at_start`` (annuity-due).
      2) Grow the balance by ``step_rate``.
      3) Deposit AFTER growth otherwise (ordinary annuity).
      4) On every ``steps_per_year``-th step, record a YearlyRow.

    Returns the final state (``balance`` is the final balance and
    ``total_deposits`` includes the principal) and one row per year.
    """
    if steps_per_year < 1:
        raise ProjectionInputError(f"steps_per_year must be positive, got {steps_per_year}")
    if total_steps < steps_per_year or total_steps % steps_per_year:
        raise ProjectionInputError(
            f"total_steps ({total_steps}) must be a positive multiple of steps_per_year ({steps_per_year})"
        )

    state = ScheduleState.opening(principal)
    rows: List[YearlyRow] = []

    for step in range(1, total_steps + 1):
        advance(state, step_contribution, step_rate, contribution_at_start)
        if step % steps_per_year == 0:
            rows.append(close_year(state, step // steps_per_year))

    return state, rows
