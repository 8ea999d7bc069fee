from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from retirement_calculator.app import create_app


@pytest.fixture()
def app() -> Flask:
    return create_app({"TESTING": True})


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def default_payload() -> dict:
    """The calculator's opening scenario."""
    return {
        "currentAge": 30,
        "retirementAge": 65,
        "annualIncome": 100000,
        "currentSavings": 50000,
        "contributionPercent": 10,
        "hasEmployerMatch": True,
        "matchPercentage": 50,
        "matchLimitPercent": 6,
        "includeSocialSecurity": True,
    }
