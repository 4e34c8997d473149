from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from compounder.app import create_app
from compounder.app.config import TestingConfig


@pytest.fixture()
def app() -> Flask:
    return create_app(TestingConfig)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def series_payload() -> dict:
    return {
        "initial_value": 100,
        "rate_percent": 5,
        "years": 10,
        "compounding_frequency": 1,
        "is_growth": True,
    }
