"""Data contracts for compound growth/decay series calculations."""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no Infinity/NaN tokens; overflowed values go over the wire as null."""
    return value if math.isfinite(value) else None


class Direction(str, Enum):
    GROWTH = "growth"
    DECAY = "decay"

    @property
    def sign(self) -> int:
        return 1 if self is Direction.GROWTH else -1

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SeriesRequest(BaseModel):
    """Inputs required to compute a compound series.

    Ranges are not enforced here so that rejected combinations can still be
    represented; ``core.series.validation_errors`` decides what is computable.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    initial_value: float = Field(..., description="Principal at year 0.")
    rate_percent: float = Field(
        ...,
        description="Annual rate in percent (e.g. 5 for 5%). The sign comes from is_growth.",
    )
    years: int = Field(..., description="Last year of the series, inclusive.")
    compounding_frequency: int = Field(
        ...,
        description="Compounding periods per year (1, 2, 4 or 12 in the UI).",
    )
    is_growth: bool = Field(True, description="False applies the rate as decay.")

    @property
    def direction(self) -> Direction:
        return Direction.GROWTH if self.is_growth else Direction.DECAY

    @property
    def signed_rate(self) -> float:
        """Rate as a decimal with the growth/decay sign applied."""
        return self.direction.sign * self.rate_percent / 100


class SeriesPoint(BaseModel):
    """Single row of a compound series."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=0)
    value: float

    @field_serializer("value")
    def _serialize_value(self, value: float) -> Optional[float]:
        return finite_or_none(value)


class TableRow(BaseModel):
    """Display row; ``highlight`` marks the final year."""

    year: int
    value: str
    highlight: bool = False


class SeriesResponse(BaseModel):
    """Computed series plus the table the frontend renders."""

    parameters: SeriesRequest
    series: List[SeriesPoint]
    table: List[TableRow]
    final_value: float

    @field_serializer("final_value")
    def _serialize_final_value(self, value: float) -> Optional[float]:
        return finite_or_none(value)
