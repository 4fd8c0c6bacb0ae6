"""Chart aggregation processor.

Groups rows by the text value of an x-axis column (and optionally a group
column) and summarizes numeric measures per partition.

Output shape depends on grouping:
- no group: one aggregate per measure, keyed by measure name, with optional
  percentage of the measure total
- group: pivoted means keyed "{group_value}_{measure_name}" per x partition

Partitions are kept in first-seen order and truncated to the first
``max_partitions``; this is not a sorted top-K.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sheetsense.analysis.aggregation.models import (
    ChartAxes,
    ChartPoint,
    ChartSeries,
    MeasureAggregate,
    PieSlice,
)
from sheetsense.analysis.typing.inference import (
    infer_column_profiles,
    numeric_columns,
    text_columns,
)
from sheetsense.analysis.typing.models import ColumnProfile
from sheetsense.core.coercion import coerce_number, partition_key
from sheetsense.core.logging import get_logger
from sheetsense.core.models.base import AnalysisIssue, ColumnKind, Result
from sheetsense.core.table import ParsedTable

logger = get_logger(__name__)

DEFAULT_MAX_PARTITIONS = 50
DEFAULT_SAMPLE_SIZE = 10
DEFAULT_NUMERIC_THRESHOLD = 0.7
DEFAULT_PIE_SLICES = 10


@dataclass
class _Accumulator:
    """Running count and per-measure sums for one partition."""

    count: int = 0
    sums: dict[str, float] = field(default_factory=dict)

    def add(self, measures: dict[str, float]) -> None:
        self.count += 1
        for measure, value in measures.items():
            self.sums[measure] = self.sums.get(measure, 0.0) + value

    def aggregate(self, measure: str) -> MeasureAggregate:
        total = self.sums.get(measure, 0.0)
        mean = total / self.count if self.count else 0.0
        return MeasureAggregate(count=self.count, sum=total, mean=mean)


def _validate_selection(
    table: ParsedTable,
    x_column: str,
    measure_columns: Sequence[str],
    group_column: str | None,
    profiles: Sequence[ColumnProfile],
) -> str | None:
    """Return an error message when the column selection is unusable."""
    if not table.has_column(x_column):
        return f"X column not in table: {x_column}"
    if not measure_columns:
        return "At least one measure column is required"
    kinds = {p.name: p.kind for p in profiles}
    for measure in measure_columns:
        if not table.has_column(measure):
            return f"Measure column not in table: {measure}"
        if kinds.get(measure) is not ColumnKind.NUMERIC:
            return f"Measure column is not numeric: {measure}"
    if group_column is not None:
        if not table.has_column(group_column):
            return f"Group column not in table: {group_column}"
        if group_column == x_column:
            return "Group column must differ from the x column"
        if kinds.get(group_column) is not ColumnKind.TEXT:
            return f"Group column is not a text column: {group_column}"
    return None


def compute_chart_series(
    table: ParsedTable,
    x_column: str,
    measure_columns: Sequence[str],
    group_column: str | None = None,
    percentage: bool = False,
    max_partitions: int = DEFAULT_MAX_PARTITIONS,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    numeric_threshold: float = DEFAULT_NUMERIC_THRESHOLD,
) -> Result[ChartSeries]:
    """Aggregate measures per x-axis partition for charting.

    Args:
        table: Parsed table
        x_column: Column whose text value defines partitions (any kind)
        measure_columns: Numeric columns to summarize
        group_column: Optional text column for a second partition level
        percentage: Add each partition's share of the measure total (no-group only)
        max_partitions: Number of first-seen partitions to emit
        sample_size: Sample size used to check measure/group column kinds
        numeric_threshold: Threshold used to check measure/group column kinds

    Returns:
        Result containing ChartSeries, or EMPTY_TABLE / INVALID_COLUMN_SELECTION
    """
    if table.is_empty:
        return Result.fail("Table has no rows", issue=AnalysisIssue.EMPTY_TABLE)

    measures = list(dict.fromkeys(measure_columns))
    profiles = infer_column_profiles(table, sample_size, numeric_threshold)
    error = _validate_selection(table, x_column, measures, group_column, profiles)
    if error:
        return Result.fail(error, issue=AnalysisIssue.INVALID_COLUMN_SELECTION)

    warnings: list[str] = []
    if group_column is not None:
        series = _grouped_series(table, x_column, measures, group_column, max_partitions)
        if percentage:
            warnings.append("Percentage mode is ignored when a group column is set")
    else:
        series = _flat_series(table, x_column, measures, max_partitions)
        if percentage:
            _apply_percentages(series)

    if series.truncated:
        warnings.append(
            f"Showing first {len(series.points)} of {series.total_partitions} partitions"
        )

    logger.debug(
        "chart_series_computed",
        x_column=x_column,
        measures=measures,
        group_column=group_column,
        partitions=series.total_partitions,
        truncated=series.truncated,
    )
    return Result.ok(series, warnings)


def _flat_series(
    table: ParsedTable,
    x_column: str,
    measures: list[str],
    max_partitions: int,
) -> ChartSeries:
    partitions: dict[str, _Accumulator] = {}
    for row in table.rows:
        key = partition_key(table.cell(row, x_column))
        partitions.setdefault(key, _Accumulator()).add(
            {m: coerce_number(table.cell(row, m)) for m in measures}
        )

    points = [
        ChartPoint(
            group_key=key,
            count=acc.count,
            measures={m: acc.aggregate(m) for m in measures},
        )
        for key, acc in list(partitions.items())[:max_partitions]
    ]
    return ChartSeries(
        x_column=x_column,
        measure_columns=measures,
        points=points,
        series_keys=list(measures),
        total_partitions=len(partitions),
        truncated=len(partitions) > len(points),
    )


def _grouped_series(
    table: ParsedTable,
    x_column: str,
    measures: list[str],
    group_column: str,
    max_partitions: int,
) -> ChartSeries:
    partitions: dict[str, dict[str, _Accumulator]] = {}
    row_counts: dict[str, int] = {}
    for row in table.rows:
        x_key = partition_key(table.cell(row, x_column))
        group_key = partition_key(table.cell(row, group_column))
        groups = partitions.setdefault(x_key, {})
        groups.setdefault(group_key, _Accumulator()).add(
            {m: coerce_number(table.cell(row, m)) for m in measures}
        )
        row_counts[x_key] = row_counts.get(x_key, 0) + 1

    points = []
    series_keys: dict[str, None] = {}
    for x_key, groups in list(partitions.items())[:max_partitions]:
        cell_measures = {}
        for group_key, acc in groups.items():
            for measure in measures:
                name = f"{group_key}_{measure}"
                cell_measures[name] = acc.aggregate(measure)
                series_keys.setdefault(name, None)
        points.append(ChartPoint(group_key=x_key, count=row_counts[x_key], measures=cell_measures))

    return ChartSeries(
        x_column=x_column,
        measure_columns=measures,
        group_column=group_column,
        points=points,
        series_keys=list(series_keys),
        total_partitions=len(partitions),
        truncated=len(partitions) > len(points),
    )


def _apply_percentages(series: ChartSeries) -> None:
    """Set each partition's share of the measure sum across emitted partitions."""
    series.percentage = True
    for measure in series.measure_columns:
        total = sum(point.measures[measure].sum for point in series.points)
        for point in series.points:
            aggregate = point.measures[measure]
            aggregate.percentage = aggregate.sum / total * 100 if total != 0 else 0.0


def compute_pie_slices(
    series: ChartSeries,
    measure: str | None = None,
    use_percentage: bool = False,
    limit: int = DEFAULT_PIE_SLICES,
) -> list[PieSlice]:
    """Largest partitions of one measure, for a pie chart.

    Args:
        series: Ungrouped chart series
        measure: Measure to slice; the first measure when omitted
        use_percentage: Use percentages instead of means (percentage mode only)
        limit: Maximum slices

    Returns:
        Slices sorted by value descending; ties keep partition order
    """
    if series.grouped or not series.measure_columns:
        return []
    measure = measure or series.measure_columns[0]
    if measure not in series.measure_columns:
        return []

    slices = []
    for point in series.points:
        aggregate = point.measures[measure]
        value = aggregate.percentage if use_percentage else aggregate.mean
        slices.append(PieSlice(name=point.group_key, value=value or 0.0))
    slices.sort(key=lambda s: s.value, reverse=True)
    return slices[:limit]


def suggest_chart_axes(profiles: Sequence[ColumnProfile]) -> ChartAxes:
    """Default axes: the first text column as x and the first numeric column as measure.

    Falls back to the first column for x when there are no text columns.
    """
    texts = text_columns(profiles)
    numerics = numeric_columns(profiles)
    x_column = texts[0] if texts else (profiles[0].name if profiles else None)
    return ChartAxes(x_column=x_column, measure_columns=numerics[:1])
