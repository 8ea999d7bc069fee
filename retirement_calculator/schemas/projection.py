"""Data contracts for retirement projections."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from retirement_calculator.core.formatting import parse_input_number

# Keeps 73 years of 7% compounding far from float overflow.
MAX_AMOUNT = 1e12


class RetirementInputs(BaseModel):
    """Everything the projection needs, collected from the calculator form.

    No range checks here: out-of-range values flow through the arithmetic
    unchanged. ``ProjectionRequest`` adds the bounds for the HTTP boundary.
    """

    model_config = ConfigDict(frozen=True)

    currentAge: int = 30
    retirementAge: int = 65
    annualIncome: float = 100000.0
    currentSavings: float = 50000.0
    contributionPercent: float = 10.0
    hasEmployerMatch: bool = True
    matchPercentage: float = 50.0
    matchLimitPercent: float = 6.0
    includeSocialSecurity: bool = True


class ProjectionRequest(RetirementInputs):
    """Inputs as posted by the frontend, bounded like the form's fields."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    currentAge: int = Field(30, ge=18, le=80)
    retirementAge: int = Field(65, le=90)
    annualIncome: float = Field(
        100000.0,
        ge=0,
        le=MAX_AMOUNT,
        description="Yearly salary before tax.",
    )
    currentSavings: float = Field(
        50000.0,
        ge=0,
        le=MAX_AMOUNT,
        description="Total already saved across retirement accounts.",
    )
    contributionPercent: float = Field(10.0, ge=0, le=100)
    matchPercentage: float = Field(
        50.0,
        ge=0,
        le=100,
        description="Employer cents added per dollar contributed, as a percentage.",
    )
    matchLimitPercent: float = Field(
        6.0,
        ge=0,
        le=100,
        description="Share of salary the employer matches up to.",
    )

    @field_validator(
        "currentAge",
        "retirementAge",
        "annualIncome",
        "currentSavings",
        "contributionPercent",
        "matchPercentage",
        "matchLimitPercent",
        mode="before",
    )
    @classmethod
    def parse_formatted_numbers(cls, value):
        # the form sends grouped text such as "100,000"
        if isinstance(value, str):
            return parse_input_number(value)
        return value

    @model_validator(mode="after")
    def ensure_validity(self) -> "ProjectionRequest":
        if self.retirementAge < self.currentAge:
            raise ValueError("retirementAge must not be less than currentAge")
        return self


class TrajectoryPoint(BaseModel):
    """Savings balance at the end of the year the saver is ``age``."""

    age: int
    savings: float


class ProjectionResult(BaseModel):
    trajectory: List[TrajectoryPoint]
    investmentMonthlyIncome: float
    socialSecurityMonthlyBenefit: float
    totalMonthlyIncome: float

    annualContribution: float
    employerMatch: float
    totalAnnualContribution: float


class ProjectionSummary(BaseModel):
    """Currency-formatted figures for the income and contribution panels."""

    totalMonthlyIncome: str
    investmentMonthlyIncome: str
    # None when the saver left Social Security out
    socialSecurityMonthlyBenefit: Optional[str] = None

    annualContribution: str
    # None when there is no employer match
    employerMatch: Optional[str] = None
    totalAnnualContribution: str

    trajectory: List[TrajectoryPoint] = Field(default_factory=list)
