"""Pydantic schemas for the line chart and the compounding frequency picker."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer

from compounder.schemas.series import finite_or_none


class CompoundingOption(BaseModel):
    label: str
    value: int = Field(..., gt=0)


class ChartDataset(BaseModel):
    label: str
    data: List[float]
    fill: bool = False
    border_color: str = "rgb(75, 192, 192)"
    tension: float = 0.3
    point_radius: int = 4

    @field_serializer("data")
    def _serialize_data(self, data: List[float]) -> List[Optional[float]]:
        return [finite_or_none(value) for value in data]


class ChartConfig(BaseModel):
    title: str
    labels: List[str]
    datasets: List[ChartDataset]
    legend_position: str = "top"
    begin_at_zero: bool = False
