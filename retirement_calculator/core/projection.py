"""Deterministic retirement savings projection."""

from __future__ import annotations

import math
from typing import List

from retirement_calculator.core.formatting import format_currency
from retirement_calculator.schemas.projection import (
    ProjectionResult,
    ProjectionSummary,
    RetirementInputs,
    TrajectoryPoint,
)

# Fixed model assumptions, not user-tunable.
GROWTH_RATE = 0.07
WITHDRAWAL_RATE = 0.04  # the "4% rule"
SOCIAL_SECURITY_WAGE_BASE = 160200
SOCIAL_SECURITY_REPLACEMENT_RATE = 0.4
MONTHS_PER_YEAR = 12


def _round_half_up(value: float) -> float:
    """Nearest whole dollar, halves toward +inf. Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    whole = math.floor(value)
    # value - whole is exact in floating point
    if value - whole >= 0.5:
        whole += 1
    return float(whole)


def compute_annual_contribution(income: float, contribution_percent: float) -> float:
    return income * contribution_percent / 100


def compute_employer_match(
    income: float,
    annual_contribution: float,
    has_match: bool,
    match_percentage: float,
    match_limit_percent: float,
) -> float:
    """
    Employer adds ``match_percentage`` cents per dollar contributed, but only on
    contributions up to ``match_limit_percent`` of salary.
    """
    if not has_match:
        return 0.0
    matched_base = min(annual_contribution, income * match_limit_percent / 100)
    return matched_base * (match_percentage / 100)


def compute_social_security_monthly_benefit(annual_income: float) -> float:
    """
    Rough placeholder, not the SSA benefit formula: 40% of income capped at the
    wage base, spread over twelve months.
    """
    capped_income = min(annual_income, SOCIAL_SECURITY_WAGE_BASE)
    return capped_income * SOCIAL_SECURITY_REPLACEMENT_RATE / MONTHS_PER_YEAR


def compute_yearly_contribution(inputs: RetirementInputs) -> float:
    """Employee contribution plus employer match, the same every year."""
    annual_contribution = compute_annual_contribution(
        inputs.annualIncome, inputs.contributionPercent
    )
    return annual_contribution + compute_employer_match(
        inputs.annualIncome,
        annual_contribution,
        inputs.hasEmployerMatch,
        inputs.matchPercentage,
        inputs.matchLimitPercent,
    )


def build_trajectory(inputs: RetirementInputs) -> List[TrajectoryPoint]:
    """
    Year-by-year balance from currentAge..retirementAge (inclusive).

    Per year the balance grows by GROWTH_RATE and then the yearly contribution
    is added on top. Recorded points are rounded to whole dollars; the running
    balance is not.
    """
    yearly_contribution = compute_yearly_contribution(inputs)

    balance = float(inputs.currentSavings)
    points: List[TrajectoryPoint] = []
    for age in range(inputs.currentAge, inputs.retirementAge + 1):
        balance = balance * (1 + GROWTH_RATE) + yearly_contribution
        points.append(TrajectoryPoint(age=age, savings=_round_half_up(balance)))

    return points


def compute_projection(inputs: RetirementInputs) -> ProjectionResult:
    """
    Savings trajectory plus the monthly income it supports in retirement.

    Never raises: validation happens where the inputs are built, and anything
    out of range simply flows through the arithmetic.
    """
    annual_contribution = compute_annual_contribution(
        inputs.annualIncome, inputs.contributionPercent
    )
    employer_match = compute_employer_match(
        inputs.annualIncome,
        annual_contribution,
        inputs.hasEmployerMatch,
        inputs.matchPercentage,
        inputs.matchLimitPercent,
    )
    trajectory = build_trajectory(inputs)

    # empty only when retirementAge < currentAge
    final_balance = trajectory[-1].savings if trajectory else 0
    investment_monthly = final_balance * WITHDRAWAL_RATE / MONTHS_PER_YEAR

    if inputs.includeSocialSecurity:
        social_security_monthly = compute_social_security_monthly_benefit(inputs.annualIncome)
    else:
        social_security_monthly = 0.0

    return ProjectionResult(
        trajectory=trajectory,
        investmentMonthlyIncome=investment_monthly,
        socialSecurityMonthlyBenefit=social_security_monthly,
        totalMonthlyIncome=investment_monthly + social_security_monthly,
        annualContribution=annual_contribution,
        employerMatch=employer_match,
        totalAnnualContribution=annual_contribution + employer_match,
    )


def summarize_projection(inputs: RetirementInputs, result: ProjectionResult) -> ProjectionSummary:
    """Format a projection the way the income and contribution panels show it."""
    return ProjectionSummary(
        totalMonthlyIncome=format_currency(result.totalMonthlyIncome),
        investmentMonthlyIncome=format_currency(result.investmentMonthlyIncome),
        socialSecurityMonthlyBenefit=(
            format_currency(result.socialSecurityMonthlyBenefit)
            if inputs.includeSocialSecurity
            else None
        ),
        annualContribution=format_currency(result.annualContribution),
        employerMatch=(
            format_currency(result.employerMatch) if inputs.hasEmployerMatch else None
        ),
        totalAnnualContribution=format_currency(result.totalAnnualContribution),
        trajectory=result.trajectory,
    )


__all__ = [
    "GROWTH_RATE",
    "WITHDRAWAL_RATE",
    "SOCIAL_SECURITY_WAGE_BASE",
    "SOCIAL_SECURITY_REPLACEMENT_RATE",
    "MONTHS_PER_YEAR",
    "compute_annual_contribution",
    "compute_employer_match",
    "compute_social_security_monthly_benefit",
    "compute_yearly_contribution",
    "build_trajectory",
    "compute_projection",
    "summarize_projection",
]
