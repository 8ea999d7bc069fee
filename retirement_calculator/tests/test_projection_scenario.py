from __future__ import annotations

import math
from math import isclose

from retirement_calculator.core.projection import compute_projection
from retirement_calculator.schemas.projection import RetirementInputs


def default_inputs(**overrides) -> RetirementInputs:
    values = dict(
        currentAge=30,
        retirementAge=65,
        annualIncome=100000.0,
        currentSavings=50000.0,
        contributionPercent=10.0,
        hasEmployerMatch=True,
        matchPercentage=50.0,
        matchLimitPercent=6.0,
        includeSocialSecurity=True,
    )
    values.update(overrides)
    return RetirementInputs(**values)


def test_default_scenario_end_to_end():
    result = compute_projection(default_inputs())

    assert len(result.trajectory) == 36
    assert isclose(result.annualContribution, 10000.0)
    assert isclose(result.employerMatch, 3000.0)
    assert isclose(result.totalAnnualContribution, 13000.0)
    assert result.trajectory[0].age == 30
    assert result.trajectory[0].savings == 66500
    assert result.trajectory[-1].age == 65

    # closed form for 36 years of 7% growth with 13k added each year
    growth = 1.07**36
    expected_final = 50000.0 * growth + 13000.0 * (growth - 1) / 0.07
    final = result.trajectory[-1].savings
    assert isclose(final, expected_final, abs_tol=1.0)

    assert isclose(result.investmentMonthlyIncome, final * 0.04 / 12)
    assert isclose(result.socialSecurityMonthlyBenefit, 5340.0)
    assert isclose(result.totalMonthlyIncome, result.investmentMonthlyIncome + 5340.0)


def test_social_security_left_out():
    result = compute_projection(default_inputs(includeSocialSecurity=False))

    assert result.socialSecurityMonthlyBenefit == 0.0
    assert isclose(result.totalMonthlyIncome, result.investmentMonthlyIncome)


def test_repeat_calls_are_identical():
    inputs = default_inputs()
    assert compute_projection(inputs) == compute_projection(inputs)


def test_retirement_before_current_age_yields_no_investment_income():
    result = compute_projection(default_inputs(currentAge=50, retirementAge=40))

    assert result.trajectory == []
    assert result.investmentMonthlyIncome == 0.0
    assert isclose(result.totalMonthlyIncome, 5340.0)


def test_negative_income_flows_through_without_error():
    result = compute_projection(
        default_inputs(annualIncome=-1000.0, currentSavings=0.0, includeSocialSecurity=False)
    )

    assert isclose(result.annualContribution, -100.0)
    # min(-100, -60) * 50%
    assert isclose(result.employerMatch, -50.0)
    assert result.totalMonthlyIncome < 0


def test_non_finite_inputs_flow_through():
    """Infinite or NaN amounts come out the other side instead of raising."""
    overflowing = compute_projection(default_inputs(currentSavings=float("inf")))
    assert math.isinf(overflowing.trajectory[-1].savings)
    assert math.isinf(overflowing.totalMonthlyIncome)

    undefined = compute_projection(default_inputs(annualIncome=float("nan")))
    assert math.isnan(undefined.totalMonthlyIncome)
    assert math.isnan(undefined.socialSecurityMonthlyBenefit)
