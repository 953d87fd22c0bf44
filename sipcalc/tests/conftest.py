from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient, FlaskCliRunner

from sipcalc.app import create_app
from sipcalc.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        cors_origins=("http://localhost:5173",),
        max_tenure_years=100,
        default_currency="INR",
        port=5000,
    )


@pytest.fixture()
def app(settings: Settings) -> Flask:
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def runner(app: Flask) -> FlaskCliRunner:
    return app.test_cli_runner()


@pytest.fixture()
def scenario_payload() -> dict:
    return {
        "initial_lump_sum": 100000,
        "initial_monthly_contribution": 5000,
        "step_up_percentage": 10,
        "step_up_frequency_months": 12,
        "tenure_years": 1,
        "annual_return_percentage": 12,
    }
