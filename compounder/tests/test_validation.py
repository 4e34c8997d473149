from __future__ import annotations

import math

import pytest

from compounder.core.series import InvalidParametersError, is_valid, validation_errors
from compounder.schemas.series import SeriesRequest


def params(**overrides) -> SeriesRequest:
    values = {"initial_value": 100, "rate_percent": 5, "years": 10, "compounding_frequency": 1}
    values.update(overrides)
    return SeriesRequest(**values)


def test_accepts_typical_inputs():
    assert is_valid(params())
    assert validation_errors(params()) == []


def test_accepts_zero_and_negative_rates():
    assert is_valid(params(rate_percent=0))
    assert is_valid(params(rate_percent=-3.5))


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"initial_value": 0}, "initial_value must be a positive number"),
        ({"initial_value": -10}, "initial_value must be a positive number"),
        ({"initial_value": math.nan}, "initial_value must be a positive number"),
        ({"initial_value": math.inf}, "initial_value must be a positive number"),
        ({"years": 0}, "years must be at least 1"),
        ({"years": -5}, "years must be at least 1"),
        ({"compounding_frequency": 0}, "compounding_frequency must be at least 1"),
        ({"compounding_frequency": -12}, "compounding_frequency must be at least 1"),
        ({"rate_percent": math.nan}, "rate_percent must be a finite number"),
        ({"rate_percent": math.inf}, "rate_percent must be a finite number"),
        ({"rate_percent": -math.inf}, "rate_percent must be a finite number"),
    ],
)
def test_rejects_single_rule(overrides, message):
    candidate = params(**overrides)

    assert not is_valid(candidate)
    assert validation_errors(candidate) == [message]


def test_reports_every_violated_rule():
    candidate = params(initial_value=0, years=0, compounding_frequency=0, rate_percent=math.nan)

    assert len(validation_errors(candidate)) == 4


def test_invalid_parameters_error_carries_messages():
    errors = ["years must be at least 1", "compounding_frequency must be at least 1"]
    exc = InvalidParametersError(errors)

    assert isinstance(exc, ValueError)
    assert exc.errors == errors
    assert str(exc) == "years must be at least 1; compounding_frequency must be at least 1"
