"""Chart aggregation module.

Partitions rows by x-axis value (and optionally a group column) and
summarizes numeric measures into chart-ready series.
"""

from sheetsense.analysis.aggregation.models import (
    ChartAxes,
    ChartPoint,
    ChartSeries,
    MeasureAggregate,
    PieSlice,
)
from sheetsense.analysis.aggregation.processor import (
    compute_chart_series,
    compute_pie_slices,
    suggest_chart_axes,
)

__all__ = [
    "compute_chart_series",
    "compute_pie_slices",
    "suggest_chart_axes",
    "ChartAxes",
    "ChartPoint",
    "ChartSeries",
    "MeasureAggregate",
    "PieSlice",
]
