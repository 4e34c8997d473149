"""Compound growth/decay series calculation and CSV serialization."""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from compounder.schemas.series import SeriesPoint, SeriesRequest

logger = logging.getLogger(__name__)

CSV_HEADER = "Year,Value"


class InvalidParametersError(ValueError):
    """Parameters that parse but cannot be computed; ``errors`` lists each broken rule."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def validation_errors(params: SeriesRequest) -> List[str]:
    """Return one message per violated rule; an empty list means computable."""
    errors: List[str] = []
    if not math.isfinite(params.initial_value) or params.initial_value <= 0:
        errors.append("initial_value must be a positive number")
    if not math.isfinite(params.rate_percent):
        errors.append("rate_percent must be a finite number")
    if params.years <= 0:
        errors.append("years must be at least 1")
    if params.compounding_frequency <= 0:
        errors.append("compounding_frequency must be at least 1")
    return errors


def is_valid(params: SeriesRequest) -> bool:
    """True when the parameters pass every validation rule."""
    return not validation_errors(params)


def _compound(principal: float, factor: float, periods: int) -> float:
    try:
        return principal * factor**periods
    except OverflowError:
        # float ** raises where IEEE-754 would give +/-inf
        if factor > 0 or periods % 2 == 0:
            return principal * math.inf
        return principal * -math.inf


def compute(params: SeriesRequest) -> list[SeriesPoint]:
    """
    Build the value series for years 0..params.years (inclusive).

    value(year) = P * (1 + rate / n) ** (n * year), where rate is the signed
    decimal rate, so decay is the same formula with a negated rate.

    Invalid parameters yield an empty list instead of raising.
    """
    if not is_valid(params):
        logger.debug("Not computing series for invalid parameters: %s", params)
        return []

    n = params.compounding_frequency
    factor = 1 + params.signed_rate / n

    series = [
        SeriesPoint(year=year, value=_compound(params.initial_value, factor, n * year))
        for year in range(params.years + 1)
    ]
    logger.debug(
        "Computed %s series over %d year(s), final value %.2f",
        params.direction.value,
        params.years,
        series[-1].value,
    )
    return series


def to_csv(series: Sequence[SeriesPoint]) -> str:
    """Serialize a series as ``Year,Value`` rows joined by newlines (no trailing newline)."""
    rows = [CSV_HEADER]
    rows.extend(f"{point.year},{point.value:.2f}" for point in series)
    return "\n".join(rows)
