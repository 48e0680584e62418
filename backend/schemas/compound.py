"""Data contracts for the compound interest calculator endpoints."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.domain.compound import (
    CalculationParameters,
    CompoundingConvention,
    ProjectionResult,
)


# keeps a 60 year, 100%, continuously compounded projection far below float overflow
MAX_AMOUNT = 1e12


class CompoundRequest(BaseModel):
    """Calculator form values; omitted fields take the form's defaults."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(
        10000.0,
        ge=0,
        le=MAX_AMOUNT,
        allow_inf_nan=False,
        description="Initial lump sum.",
    )
    contribution: float = Field(
        200.0,
        ge=0,
        le=MAX_AMOUNT,
        allow_inf_nan=False,
        description="Deposit made once per contribution step.",
    )
    rate: float = Field(7.0, ge=0, le=100, allow_inf_nan=False, description="Nominal annual rate in percent.")
    years: int = Field(10, ge=1, le=60)
    compounding: CompoundingConvention = CompoundingConvention.ANNUAL
    contributionFrequency: int = Field(12, ge=1, le=365, description="Contribution steps per year.")
    due: bool = Field(False, description="Deposit at the start of each step instead of the end.")
    inflation: Optional[float] = Field(
        0.0,
        ge=0,
        le=100,
        allow_inf_nan=False,
        description="Annual inflation in percent.",
    )

    def to_parameters(self) -> CalculationParameters:
        return CalculationParameters(
            principal=self.principal,
            contribution=self.contribution,
            annual_rate_percent=self.rate,
            years=self.years,
            compounding=self.compounding,
            contribution_steps_per_year=self.contributionFrequency,
            contribution_at_period_start=self.due,
            inflation_rate_percent=self.inflation if self.inflation is not None else 0.0,
        )


class YearRowOut(BaseModel):
    year: int = Field(..., ge=1)
    endBalance: float
    deposits: float
    interest: float


class CompoundResponse(BaseModel):
    """Summary figures plus the yearly breakdown used by the chart and table."""

    balance: float
    totalDeposits: float
    totalInterest: float
    realBalance: float
    schedule: List[YearRowOut]

    @classmethod
    def from_result(cls, result: ProjectionResult) -> "CompoundResponse":
        return cls(
            balance=result.final_balance,
            totalDeposits=result.total_deposits,
            totalInterest=result.total_interest,
            realBalance=result.real_balance,
            schedule=[
                YearRowOut(
                    year=row.year,
                    endBalance=row.end_balance,
                    deposits=row.deposits_this_year,
                    interest=row.interest_this_year,
                )
                for row in result.schedule
            ],
        )


class ContributionFrequency(BaseModel):
    key: str
    stepsPerYear: int


CONTRIBUTION_FREQUENCIES: List[ContributionFrequency] = [
    ContributionFrequency(key="monthly", stepsPerYear=12),
    ContributionFrequency(key="weekly", stepsPerYear=52),
    ContributionFrequency(key="annual", stepsPerYear=1),
]


class CalculatorOptions(BaseModel):
    compounding: List[CompoundingConvention]
    contributionFrequencies: List[ContributionFrequency]
    defaults: CompoundRequest

    @classmethod
    def build(cls) -> "CalculatorOptions":
        return cls(
            compounding=list(CompoundingConvention),
            contributionFrequencies=CONTRIBUTION_FREQUENCIES,
            defaults=CompoundRequest(),
        )
