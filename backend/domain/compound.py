"""Value objects exchanged between the validation boundary and the calculation core."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class ProjectionInputError(ValueError):
    """Raised when the core receives parameters outside its input contract."""


class CompoundingConvention(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"
    CONTINUOUS = "continuous"


class CalculationParameters(BaseModel):
    """
    Fully resolved inputs for one projection.

    Rates are percentages (7 means 7%). The contribution is deposited once
    per contribution step, so with 12 steps per year it is a monthly deposit.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float
    contribution: float
    annual_rate_percent: float
    years: int
    compounding: CompoundingConvention
    contribution_steps_per_year: int
    contribution_at_period_start: bool
    inflation_rate_percent: float

    @property
    def total_steps(self) -> int:
        return self.years * self.contribution_steps_per_year


class YearlyRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    end_balance: float
    deposits_this_year: float
    # includes interest earned on deposits made during the year
    interest_this_year: float


class ProjectionTotals(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_balance: float
    total_deposits: float
    total_interest: float
    real_balance: float


class ProjectionResult(ProjectionTotals):
    schedule: List[YearlyRow]
