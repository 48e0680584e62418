from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.config import Settings
from backend.domain.compound import CalculationParameters, CompoundingConvention


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(log_level="WARNING"))
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


def _make_params(**overrides) -> CalculationParameters:
    """Monthly-deposit defaults from the calculator form, overridable per test."""
    values = {
        "principal": 10000.0,
        "contribution": 200.0,
        "annual_rate_percent": 7.0,
        "years": 10,
        "compounding": CompoundingConvention.ANNUAL,
        "contribution_steps_per_year": 12,
        "contribution_at_period_start": False,
        "inflation_rate_percent": 0.0,
    }
    values.update(overrides)
    return CalculationParameters(**values)


@pytest.fixture()
def make_params():
    return _make_params
