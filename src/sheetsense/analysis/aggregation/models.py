"""Chart aggregation models.

- MeasureAggregate: count/sum/mean (and optional percentage) of one measure
- ChartPoint: one x-axis partition with its measure aggregates
- ChartSeries: ordered chart points plus truncation metadata
- PieSlice / ChartAxes: pie chart input and default axis selection
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class MeasureAggregate(BaseModel):
    """Aggregate of one measure within one partition."""

    count: int
    sum: float
    mean: float
    percentage: float | None = None  # share of the measure total, percentage mode only


class ChartPoint(BaseModel):
    """One x-axis partition.

    Without grouping, ``measures`` is keyed by measure name. With grouping it
    is keyed ``"{group_value}_{measure_name}"`` and the chart value is the mean.
    """

    group_key: str
    count: int  # rows in this x partition
    measures: dict[str, MeasureAggregate] = Field(default_factory=dict)

    def to_record(self, grouped: bool = False) -> dict[str, Any]:
        """Flatten into a chart-ready record keyed by series name."""
        record: dict[str, Any] = {"name": self.group_key}
        if grouped:
            for key, aggregate in self.measures.items():
                record[key] = aggregate.mean
            return record

        record["count"] = self.count
        for measure, aggregate in self.measures.items():
            record[measure] = aggregate.mean
            record[f"{measure}_sum"] = aggregate.sum
            record[f"{measure}_count"] = aggregate.count
            if aggregate.percentage is not None:
                record[f"{measure}_percentage"] = aggregate.percentage
        return record


class ChartSeries(BaseModel):
    """Chart-ready aggregation of a table."""

    x_column: str
    measure_columns: list[str]
    group_column: str | None = None
    percentage: bool = False
    points: list[ChartPoint] = Field(default_factory=list)
    series_keys: list[str] = Field(default_factory=list)  # measure keys in first-seen order
    total_partitions: int = 0  # partitions before truncation
    truncated: bool = False

    @property
    def grouped(self) -> bool:
        return self.group_column is not None

    def to_records(self) -> list[dict[str, Any]]:
        return [point.to_record(grouped=self.grouped) for point in self.points]


class PieSlice(BaseModel):
    """A pie chart slice."""

    name: str
    value: float


class ChartAxes(BaseModel):
    """Default chart axis selection."""

    x_column: str | None = None
    measure_columns: list[str] = Field(default_factory=list)
