"""Shapes a computed series for the table, the line chart and the CSV download."""

from __future__ import annotations

from typing import List, Optional, Sequence

from compounder.schemas.chart import ChartConfig, ChartDataset, CompoundingOption
from compounder.schemas.series import SeriesPoint, SeriesRequest, TableRow

COMPOUNDING_OPTIONS: List[CompoundingOption] = [
    CompoundingOption(label="Annually", value=1),
    CompoundingOption(label="Semi-Annually", value=2),
    CompoundingOption(label="Quarterly", value=4),
    CompoundingOption(label="Monthly", value=12),
]


def compounding_label(value: int) -> Optional[str]:
    """Display label for a compounding frequency, or None if it is not offered."""
    for option in COMPOUNDING_OPTIONS:
        if option.value == value:
            return option.label
    return None


def chart_title(params: SeriesRequest) -> str:
    """e.g. ``Compound Growth Over 10 Year(s) (Annually)``."""
    frequency = compounding_label(params.compounding_frequency)
    if frequency is None:
        frequency = f"{params.compounding_frequency} per year"
    return f"Compound {params.direction.label} Over {params.years} Year(s) ({frequency})"


def build_chart(params: SeriesRequest, series: Sequence[SeriesPoint]) -> ChartConfig:
    """Line chart configuration with one "Year N" label per point."""
    return ChartConfig(
        title=chart_title(params),
        labels=[f"Year {point.year}" for point in series],
        datasets=[
            ChartDataset(
                label="Value",
                data=[round(point.value, 2) for point in series],
            )
        ],
    )


def build_table(params: SeriesRequest, series: Sequence[SeriesPoint]) -> List[TableRow]:
    """Results table rows, two-decimal values, final year highlighted."""
    return [
        TableRow(
            year=point.year,
            value=f"{point.value:.2f}",
            highlight=point.year == params.years,
        )
        for point in series
    ]


def export_filename(params: SeriesRequest) -> str:
    """Download name such as ``compound_growth_10years.csv``."""
    return f"compound_{params.direction.value}_{params.years}years.csv"
